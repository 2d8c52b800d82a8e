import logging, sys, os, ctypes
from functools import wraps
from typing import Callable, Optional, Union

ROOT_LOGGER = "netcheck"
LEVEL_ENV = "NETCHECK_LOG_LEVEL"


def _enable_vt():
    if os.name == "nt":
        try:
            k32 = ctypes.windll.kernel32
            h = k32.GetStdHandle(-11)
            mode = ctypes.c_uint32()
            if k32.GetConsoleMode(h, ctypes.byref(mode)):
                k32.SetConsoleMode(h, mode.value | 0x0004)
        except (AttributeError, OSError):
            pass


class SoftColorFormatter(logging.Formatter):
    """
    Dim "time | level | name |" prefix, message tinted by level.
    """
    RESET = "\x1b[0m"
    DIM   = "\x1b[38;5;244m"
    RED   = "\x1b[38;5;124m"

    TINTS = {
        logging.INFO:    ("\x1b[38;5;71m", "• "),
        logging.WARNING: ("\x1b[38;5;137m", "! "),
        logging.ERROR:   (RED, "✖ "),
    }

    def __init__(self, fmt: Optional[str] = None, use_color: bool = True) -> None:
        super().__init__(fmt)
        self.use_color = use_color

    def format(self, record: logging.LogRecord) -> str:
        base = super().format(record)
        if not self.use_color:
            return base
        # DEBUG stays untinted, CRITICAL shares the ERROR tint
        color, mark = self.TINTS.get(min(record.levelno, logging.ERROR), ("", ""))
        parts = base.split(" | ", 3)
        if len(parts) < 4:
            return f"{color}{mark}{base}{self.RESET}"
        head = " | ".join(parts[:3])
        return f"{self.DIM}{head} | {self.RESET}{color}{mark}{parts[3]}{self.RESET}"


def _level_from_env(default: int = logging.WARNING) -> int:
    name = os.environ.get(LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def _base() -> logging.Logger:
    lg = logging.getLogger(ROOT_LOGGER)
    if lg.handlers:
        return lg
    _enable_vt()
    lg.setLevel(_level_from_env())
    h = logging.StreamHandler(sys.stdout)
    fmt = "%(asctime)s | %(levelname)-5s | %(name)s | %(message)s"
    h.setFormatter(SoftColorFormatter(fmt, use_color=sys.stdout.isatty()))
    lg.addHandler(h)
    lg.propagate = False
    return lg


def get_logger(name: str) -> logging.Logger:
    return _base().getChild(name)


def set_level(level: Union[int, str]) -> None:
    """
    Change the level of every netcheck logger ('DEBUG', 'info', 10, ...).
    Raises ValueError for an unknown level name.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level!r}")
        level = resolved
    _base().setLevel(level)


def log_call(level: int = logging.DEBUG) -> Callable:
    def deco(fn: Callable) -> Callable:
        lg = get_logger(f"{fn.__module__}.{fn.__qualname__}")
        @wraps(fn)
        def wrap(*a, **kw):
            lg.log(level, "START %s args=%r kwargs=%r", fn.__name__, a, kw)
            r = fn(*a, **kw)
            lg.log(level, "END   %s -> %r", fn.__name__, r)
            return r
        return wrap
    return deco
