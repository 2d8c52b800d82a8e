from __future__ import annotations

from functools import lru_cache
from types import MappingProxyType
from typing import List, Mapping, Optional

from netcheck.components.host_config import HostConfig, ValidationReport
from netcheck.utils.config_loader import load_messages
from netcheck.utils.ip_utils import (
    int_to_ip,
    is_reserved_address,
    is_valid_ipv4_format,
    is_valid_subnet_mask,
    network_address,
)
from netcheck.utils.logger import get_logger, log_call

LOG = get_logger("services.ConfigValidator")


@lru_cache(maxsize=None)
def _default_messages() -> Mapping[str, str]:
    return MappingProxyType(load_messages())


def _format_errors(ip1, mask1, ip2, mask2, gateway, msg) -> List[str]:
    errors: List[str] = []
    if not is_valid_ipv4_format(ip1):
        errors.append(msg["machine1_invalid_ip"])
    if not is_valid_subnet_mask(mask1):
        errors.append(msg["machine1_invalid_mask"])
    if not is_valid_ipv4_format(ip2):
        errors.append(msg["machine2_invalid_ip"])
    if not is_valid_subnet_mask(mask2):
        errors.append(msg["machine2_invalid_mask"])
    if not is_valid_ipv4_format(gateway):
        errors.append(msg["gateway_invalid_ip"])
    return errors


def _conflict_errors(ip1, mask1, ip2, mask2, gateway, msg) -> List[str]:
    errors: List[str] = []
    if ip1 == ip2:
        errors.append(msg["conflict_machines"])
    if ip1 == gateway:
        errors.append(msg["conflict_machine1_gateway"])
    if ip2 == gateway:
        errors.append(msg["conflict_machine2_gateway"])
    # warning-shaped, but it lands in the same list and blocks success
    if mask1 != mask2:
        errors.append(msg["warning_mask_mismatch"])
    return errors


def _subnet_errors(ip1, mask1, ip2, mask2, gateway, msg) -> List[str]:
    errors: List[str] = []
    net1 = network_address(ip1, mask1)
    net2 = network_address(ip2, mask2)
    # the gateway has no mask of its own, it is judged against machine 1's
    net_gw = network_address(gateway, mask1)
    LOG.debug(
        "networks: m1=%s m2=%s gw=%s",
        int_to_ip(net1), int_to_ip(net2), int_to_ip(net_gw),
    )
    if net1 != net_gw:
        errors.append(msg["machine1_gateway_subnet"])
    if net2 != net_gw:
        errors.append(msg["machine2_gateway_subnet"])
    if net1 != net2:
        errors.append(msg["machines_subnet_mismatch"])
    return errors


def _reserved_errors(ip1, mask1, ip2, mask2, gateway, msg) -> List[str]:
    errors: List[str] = []
    if is_reserved_address(ip1, mask1):
        errors.append(msg["machine1_reserved"])
    if is_reserved_address(ip2, mask2):
        errors.append(msg["machine2_reserved"])
    if is_reserved_address(gateway, mask1):
        errors.append(msg["gateway_reserved"])
    return errors


@log_call()
def validate_configuration(
    ip1: str,
    mask1: str,
    ip2: str,
    mask2: str,
    gateway: str,
    messages: Optional[Mapping[str, str]] = None,
) -> ValidationReport:
    """
    Check two hosts and a gateway and report every problem found.

    Phase 1 (format + mask legality) short-circuits: if any field is
    malformed only those messages are returned. Otherwise conflict, subnet
    and reserved-address rules all run and their messages accumulate in
    that order. An empty list means the hosts can talk through the gateway.
    """
    msg = messages if messages is not None else _default_messages()
    args = (ip1, mask1, ip2, mask2, gateway, msg)

    errors = _format_errors(*args)
    if errors:
        LOG.info("Format check failed with %d error(s); skipping remaining rules", len(errors))
        return ValidationReport.from_messages(errors)

    for phase in (_conflict_errors, _subnet_errors, _reserved_errors):
        found = phase(*args)
        LOG.debug("%s -> %d message(s)", phase.__name__.strip("_"), len(found))
        errors.extend(found)

    report = ValidationReport.from_messages(errors)
    if report.ok:
        LOG.info("Configuration valid: %s <-> %s via %s", ip1, ip2, gateway)
    else:
        LOG.info("Configuration rejected with %d message(s)", len(errors))
    return report


def validate_hosts(
    host1: HostConfig,
    host2: HostConfig,
    gateway: str,
    messages: Optional[Mapping[str, str]] = None,
) -> ValidationReport:
    return validate_configuration(
        host1.ip, host1.mask, host2.ip, host2.mask, gateway, messages=messages
    )
