from .loader import load_config, load_provider_config
from .defaults import DEFAULT_CONFIG
from .provider_config import ProviderConfig

__all__ = [
    "load_config",
    "load_provider_config",
    "DEFAULT_CONFIG",
    "ProviderConfig",
]
