from dataclasses import dataclass
from typing import Tuple

from netcheck.utils.ip_utils import (
    broadcast_address,
    int_to_ip,
    is_reserved_address,
    network_address,
)


@dataclass(frozen=True)
class HostConfig:
    """
    One machine's network identity: IP + subnet mask, both dotted quads.
    Derived values assume the strings are already format-checked.
    """
    ip: str
    mask: str

    @property
    def network(self) -> str:
        return int_to_ip(network_address(self.ip, self.mask))

    @property
    def broadcast(self) -> str:
        return int_to_ip(broadcast_address(self.ip, self.mask))

    @property
    def is_reserved(self) -> bool:
        return is_reserved_address(self.ip, self.mask)

    def __str__(self) -> str:
        return f"{self.ip} mask {self.mask}"


@dataclass(frozen=True)
class ValidationReport:
    """
    Result of one validation run.
    messages keeps rule-evaluation order; ok is True only when it is empty.
    """
    ok: bool
    messages: Tuple[str, ...] = ()

    @classmethod
    def from_messages(cls, messages) -> "ValidationReport":
        msgs = tuple(messages)
        return cls(ok=not msgs, messages=msgs)

    def __post_init__(self) -> None:
        if self.ok != (not self.messages):
            raise ValueError(
                f"ok={self.ok} does not match {len(self.messages)} message(s)"
            )

    def __bool__(self) -> bool:
        return self.ok
