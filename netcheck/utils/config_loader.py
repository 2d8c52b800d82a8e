import yaml
from pathlib import Path
from typing import Dict, Optional, Union

CONFIG_DIR = Path(__file__).resolve().parent.parent / "config"
DEFAULT_LOCALE = "en"
HOST_FIELDS = ("ip1", "mask1", "ip2", "mask2", "gateway")

# Every rule the validator can emit plus the success narrative texts
MESSAGE_KEYS = (
    "machine1_invalid_ip",
    "machine1_invalid_mask",
    "machine2_invalid_ip",
    "machine2_invalid_mask",
    "gateway_invalid_ip",
    "conflict_machines",
    "conflict_machine1_gateway",
    "conflict_machine2_gateway",
    "warning_mask_mismatch",
    "machine1_gateway_subnet",
    "machine2_gateway_subnet",
    "machines_subnet_mismatch",
    "machine1_reserved",
    "machine2_reserved",
    "gateway_reserved",
    "success",
    "ping_header",
    "ping_line",
)


def _load_yaml(path: Union[str, Path]) -> dict:
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ValueError(f"Cannot parse {path}: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"{path}: top level must be a mapping, got {type(data).__name__}")
    return data


def load_messages(locale: str = DEFAULT_LOCALE, path: Optional[Union[str, Path]] = None) -> Dict[str, str]:
    """
    Return the message catalog for one locale from messages.yaml.
    Raises ValueError for an unknown locale or a catalog missing keys.
    """
    catalogs = _load_yaml(path or CONFIG_DIR / "messages.yaml")
    if locale not in catalogs:
        raise ValueError(
            f"Unknown locale {locale!r}, available: {', '.join(sorted(map(str, catalogs)))}"
        )
    block = catalogs[locale]
    if not isinstance(block, dict):
        raise ValueError(f"Locale {locale!r} must be a mapping of message keys")
    catalog = {k: str(v) for k, v in block.items()}
    missing = [k for k in MESSAGE_KEYS if k not in catalog]
    if missing:
        raise ValueError(f"Locale {locale!r} is missing messages: {', '.join(missing)}")
    return catalog


def load_scenarios(path: Optional[Union[str, Path]] = None) -> Dict[str, dict]:
    """
    Load named scenarios from a YAML file (bundled scenarios.yaml by default).

    Each scenario must carry ip1, mask1, ip2, mask2 and gateway; field values
    are stringified and trimmed the way a form would hand them over.
    expect_ok, when given, must be a YAML boolean.
    """
    data = _load_yaml(path or CONFIG_DIR / "scenarios.yaml")
    raw = data.get("scenarios") or {}
    if not isinstance(raw, dict):
        raise ValueError("'scenarios' must be a mapping of name -> scenario")
    scenarios: Dict[str, dict] = {}
    for name, cfg in raw.items():
        cfg = cfg or {}
        if not isinstance(cfg, dict):
            raise ValueError(f"Scenario {name!r} must be a mapping")
        missing = [f for f in HOST_FIELDS if f not in cfg]
        if missing:
            raise ValueError(f"Scenario {name!r} is missing fields: {', '.join(missing)}")
        expect_ok = cfg.get("expect_ok")
        if expect_ok is not None and not isinstance(expect_ok, bool):
            raise ValueError(f"Scenario {name!r}: expect_ok must be true or false, got {expect_ok!r}")
        scenario = {f: str(cfg[f]).strip() for f in HOST_FIELDS}
        scenario["description"] = cfg.get("description", "")
        scenario["expect_ok"] = expect_ok
        scenarios[str(name)] = scenario
    return scenarios
