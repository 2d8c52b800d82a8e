from __future__ import annotations

import argparse
import sys
from typing import Dict, List, Optional

from scrapy.utils.log import configure_logging

from netcheck.components.host_config import ValidationReport
from netcheck.services.config_validator import validate_configuration
from netcheck.services.ping import success_narrative
from netcheck.utils.config_loader import (
    DEFAULT_LOCALE,
    load_messages,
    load_scenarios,
)
from netcheck.utils.ip_utils import int_to_ip, network_address, prefix_length
from netcheck.utils.logger import get_logger, set_level

LOG = get_logger("driver")

EXIT_OK = 0
EXIT_INVALID = 1
EXIT_CONFIG = 2


# ---------------------------------------------------------------------------
# Rendering
# ---------------------------------------------------------------------------

def render_report(report: ValidationReport, ip1: str, ip2: str, messages: Dict[str, str]) -> str:
    """
    Text shown to the user:
      - rejected: one message per line, in rule order
      - accepted: success banner + the two mock ping exchanges
    """
    if not report.ok:
        return "\n".join(report.messages)
    return "\n".join(success_narrative(ip1, ip2, messages))


def _summary(ip1: str, mask1: str, gateway: str) -> str:
    return f"network {int_to_ip(network_address(ip1, mask1))}/{prefix_length(mask1)}, gateway {gateway}"


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def run_check(ip1: str, mask1: str, ip2: str, mask2: str, gateway: str,
              messages: Dict[str, str]) -> int:
    fields = [f.strip() for f in (ip1, mask1, ip2, mask2, gateway)]
    report = validate_configuration(*fields, messages=messages)
    print(render_report(report, fields[0], fields[2], messages))
    if report.ok:
        LOG.info("• • %s", _summary(fields[0], fields[1], fields[4]))
    return EXIT_OK if report.ok else EXIT_INVALID


def run_scenarios(path: Optional[str], messages: Dict[str, str]) -> int:
    """
    Validate every scenario of a YAML file and print each result.
    Fails if any scenario's outcome differs from its expect_ok.
    """
    scenarios = load_scenarios(path)
    LOG.info("• • • • Running %d scenario(s)", len(scenarios))
    mismatches: List[str] = []

    for name, sc in scenarios.items():
        report = validate_configuration(
            sc["ip1"], sc["mask1"], sc["ip2"], sc["mask2"], sc["gateway"],
            messages=messages,
        )
        header = f"=== {name}"
        if sc["description"]:
            header += f": {sc['description']}"
        print(header)
        print(render_report(report, sc["ip1"], sc["ip2"], messages))
        print()

        expected = sc["expect_ok"]
        if expected is not None and expected != report.ok:
            LOG.warning("Scenario %s: expected ok=%s, got ok=%s", name, expected, report.ok)
            mismatches.append(name)

    if mismatches:
        LOG.error("%d scenario(s) did not match expectations: %s",
                  len(mismatches), ", ".join(mismatches))
        return EXIT_INVALID
    LOG.info("• • • • All scenarios matched expectations")
    return EXIT_OK


# ---------------------------------------------------------------------------
# main()
# ---------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="netcheck",
        description="Check whether two IPv4 hosts can talk through a gateway.",
    )
    parser.add_argument("--lang", default=DEFAULT_LOCALE,
                        help="message language (default: %(default)s)")
    parser.add_argument("--log-level", default=None,
                        help="DEBUG, INFO, WARNING, ... (default: $NETCHECK_LOG_LEVEL or WARNING)")
    sub = parser.add_subparsers(dest="command", required=True)

    check = sub.add_parser("check", help="validate one configuration")
    for field, label in (("ip1", "machine 1 IP"), ("mask1", "machine 1 subnet mask"),
                         ("ip2", "machine 2 IP"), ("mask2", "machine 2 subnet mask"),
                         ("gateway", "gateway IP")):
        check.add_argument(field, help=label)

    scen = sub.add_parser("scenarios", help="run the configurations of a YAML file")
    scen.add_argument("--file", default=None,
                      help="scenario YAML (default: bundled scenarios.yaml)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging()

    try:
        if args.log_level:
            set_level(args.log_level)
        messages = load_messages(args.lang)
        if args.command == "check":
            return run_check(args.ip1, args.mask1, args.ip2, args.mask2, args.gateway, messages)
        return run_scenarios(args.file, messages)
    except (ValueError, OSError) as e:
        LOG.error("%s", e)
        return EXIT_CONFIG


if __name__ == "__main__":
    sys.exit(main())
