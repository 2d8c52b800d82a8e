from __future__ import annotations

from typing import Dict, List

from netcheck.utils.logger import get_logger

LOG = get_logger("services.ping")


def simulate_ping(src_ip: str, dst_ip: str, messages: Dict[str, str]) -> str:
    """
    Mock echo request/reply between two validated hosts.
    Nothing is sent on the wire; this only builds the narrative line.
    """
    LOG.info("Simulated ping %s -> %s", src_ip, dst_ip)
    return messages["ping_line"].format(src=src_ip, dst=dst_ip)


def success_narrative(ip1: str, ip2: str, messages: Dict[str, str]) -> List[str]:
    """
    Success banner followed by a ping in each direction: ip1 -> ip2, ip2 -> ip1.
    """
    return [
        messages["success"],
        "",
        messages["ping_header"],
        simulate_ping(ip1, ip2, messages),
        simulate_ping(ip2, ip1, messages),
    ]
