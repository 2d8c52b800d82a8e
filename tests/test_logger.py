import logging

import pytest

from netcheck.utils.logger import SoftColorFormatter, get_logger, log_call, set_level


def test_loggers_hang_off_netcheck_root():
    assert get_logger("services.x").name == "netcheck.services.x"


def test_set_level_rejects_unknown_names():
    with pytest.raises(ValueError):
        set_level("chatty")


def test_set_level_accepts_names():
    root = logging.getLogger("netcheck")
    before = root.level
    try:
        set_level("debug")
        assert root.level == logging.DEBUG
    finally:
        root.setLevel(before)


def test_plain_formatter_has_no_escape_codes():
    fmt = SoftColorFormatter("%(levelname)s | x | y | %(message)s", use_color=False)
    record = logging.LogRecord("netcheck", logging.INFO, __file__, 1, "hello", None, None)
    assert fmt.format(record) == "INFO | x | y | hello"


def test_colored_formatter_marks_level():
    fmt = SoftColorFormatter("%(levelname)s | x | y | %(message)s")
    record = logging.LogRecord("netcheck", logging.ERROR, __file__, 1, "boom", None, None)
    out = fmt.format(record)
    assert SoftColorFormatter.RED in out
    assert out.endswith(SoftColorFormatter.RESET)


def test_log_call_passes_result_through():
    @log_call()
    def add(a, b):
        return a + b

    assert add(2, b=3) == 5
    assert add.__name__ == "add"


def test_colored_formatter_keeps_pipes_inside_message():
    fmt = SoftColorFormatter("%(levelname)s | x | y | %(message)s")
    record = logging.LogRecord("netcheck", logging.DEBUG, __file__, 1, "a | b", None, None)
    out = fmt.format(record)
    assert out.endswith("a | b" + SoftColorFormatter.RESET)
    assert out.startswith(SoftColorFormatter.DIM + "DEBUG | x | y | ")
