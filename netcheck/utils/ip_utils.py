# netcheck/utils/ip_utils.py
import re

MASK32 = 0xFFFFFFFF

_OCTET = r"(?:25[0-5]|2[0-4][0-9]|[01]?[0-9][0-9]?)"
_IPV4_RE = re.compile(rf"^(?:{_OCTET}\.){{3}}{_OCTET}$")


def is_valid_ipv4_format(text: str) -> bool:
    """
    True if text is four dot-separated decimal octets in 0..255.
    Leading zeros are fine ('01', '00') as long as the value is in range.
    """
    if not isinstance(text, str):
        return False
    return _IPV4_RE.fullmatch(text) is not None


def ip_to_int(ip: str) -> int:
    """
    Convert dotted IPv4 string to integer.
    Example: '10.0.10.1' -> 0x0A000A01

    Raises ValueError if ip is not a valid dotted quad.
    """
    if not is_valid_ipv4_format(ip):
        raise ValueError(f"Not a valid IPv4 address: {ip!r}")
    v = 0
    for p in ip.split("."):
        v = ((v << 8) + int(p, 10)) & MASK32
    return v


parse_address = ip_to_int


def int_to_ip(v: int) -> str:
    """
    Convert integer to dotted IPv4 string.
    Example: 0x0A000A01 -> '10.0.10.1'
    """
    v &= MASK32
    return ".".join(str((v >> (8 * i)) & 0xFF) for i in reversed(range(4)))


def _invert(v: int) -> int:
    return ~v & MASK32


def is_valid_subnet_mask(text: str) -> bool:
    """
    A mask is valid when its bits are a run of 1s followed by a run of 0s.
    Inverting gives 2^k - 1, so inverted + 1 must be a power of two (or 2^32).
    """
    if not is_valid_ipv4_format(text):
        return False
    inverted = _invert(ip_to_int(text))
    return ((inverted + 1) & inverted) == 0


def prefix_length(mask: str) -> int:
    """
    Number of leading 1-bits in a valid mask: '255.255.255.0' -> 24
    """
    return bin(ip_to_int(mask)).count("1")


def network_address(ip: str, mask: str) -> int:
    return ip_to_int(ip) & ip_to_int(mask)


def broadcast_address(ip: str, mask: str) -> int:
    return (network_address(ip, mask) | _invert(ip_to_int(mask))) & MASK32


def is_reserved_address(ip: str, mask: str) -> bool:
    """
    Returns True if ip is the network or the broadcast address of its subnet.
    """
    ip_int = ip_to_int(ip)
    return ip_int in (network_address(ip, mask), broadcast_address(ip, mask))
