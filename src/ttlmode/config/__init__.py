"""Configuration module.

Exports ``ModeConfig``, ``ConfigError`` and the loaders.
"""
from __future__ import annotations

from ttlmode.config.config import ConfigError, ModeConfig, config_from_dict, load_config

__all__ = ["ConfigError", "ModeConfig", "config_from_dict", "load_config"]
