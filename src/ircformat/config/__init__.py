"""Configuration: YAML + env overlay."""

from ircformat.config.loader import load_config, load_config_with_env
from ircformat.config.schema import KNOWN_KEYS, OUTPUT_FORMATS, Config, cfg, validate_settings

__all__ = [
    "KNOWN_KEYS",
    "OUTPUT_FORMATS",
    "Config",
    "cfg",
    "load_config",
    "load_config_with_env",
    "validate_settings",
]
