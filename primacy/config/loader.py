import copy
import logging
from pathlib import Path

import yaml

from .defaults import DEFAULT_CONFIG
from primacy.config.provider_config import ProviderConfig


# -------------------------------------------------
# PROVIDER CONFIG LOADER
# -------------------------------------------------
def load_provider_config(cfg: dict) -> ProviderConfig:
    providers = cfg.get("providers", {})
    selection = cfg.get("selection", {})

    extra_modules = providers.get("extra_modules") or []
    if isinstance(extra_modules, str):
        extra_modules = [extra_modules]

    return ProviderConfig(
        user_defined=bool(providers.get("user_defined", True)),
        extra_modules=list(extra_modules),
        preset=selection.get("preset"),
        trace_calls=bool(cfg.get("logging", {}).get("trace_calls", True)),
    )


# -------------------------------------------------
# LOG LEVEL
# -------------------------------------------------
def normalize_log_level(level) -> str:
    name = str(level or "INFO").upper()
    if not isinstance(logging.getLevelName(name), int):
        raise ValueError(f"Unknown logging level: {level}")
    return name


# -------------------------------------------------
# MAIN CONFIG LOADER
# -------------------------------------------------
def load_config(path: str | None) -> dict:
    """
    Load and merge user config with framework defaults.

    - Defaults win for every field the user omits
    - Every section is OPTIONAL, but a present section must be a mapping
    - logging.level is case-insensitive
    """

    user_config = {}

    if path:
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        with open(path, "r", encoding="utf-8") as f:
            user_config = yaml.safe_load(f) or {}

        if not isinstance(user_config, dict):
            raise ValueError("Config file must contain a YAML dictionary")

    config = copy.deepcopy(DEFAULT_CONFIG)

    for key, value in user_config.items():
        if isinstance(config.get(key), dict):
            if not isinstance(value, dict):
                raise ValueError(f"Config section '{key}' must be a mapping")
            config[key].update(value)
        else:
            config[key] = value

    config["logging"]["level"] = normalize_log_level(config["logging"].get("level"))

    config["provider_engine"] = load_provider_config(config)

    return config
