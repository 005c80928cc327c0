"""Mode configuration.

The only behavioral option is the indent width.  ``tab_width`` controls
how existing tab indentation is measured and ``extensions`` lists the
file suffixes the mode is associated with.

Configuration can be loaded from a YAML mapping::

    indent_width: 2
    tab_width: 8
    extensions: [".ttl", ".n3"]
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field, fields, replace
from pathlib import Path
from typing import Any

import yaml

from ttlmode.indent.indenter import DEFAULT_INDENT_WIDTH

logger = logging.getLogger(__name__)


class ConfigError(ValueError):
    """Raised when a configuration value or file is invalid.

    Parameters
    ----------
    message:
        Human-readable description of the problem.
    source:
        Path of the offending file, if any.
    """

    def __init__(self, message: str, source: str | None = None) -> None:
        prefix = f"{source}: " if source else ""
        super().__init__(f"{prefix}{message}")
        self.config_message = message
        self.source = source


@dataclass(frozen=True)
class ModeConfig:
    """Settings for the Turtle editing mode.

    Parameters
    ----------
    indent_width:
        Columns per indentation level.  Must be a positive integer.
    tab_width:
        Columns a tab advances to when measuring indentation.
    extensions:
        File suffixes handled by the mode, lower-case with the dot.
    """

    indent_width: int = DEFAULT_INDENT_WIDTH
    tab_width: int = 8
    extensions: tuple[str, ...] = field(default=(".ttl", ".n3"))

    def __post_init__(self) -> None:
        for name in ("indent_width", "tab_width"):
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or value < 1:
                raise ConfigError(f"{name} must be a positive integer, got {value!r}")

    def with_overrides(self, **overrides: Any) -> "ModeConfig":
        """Return a copy with every non-None override applied."""
        return replace(self, **{k: v for k, v in overrides.items() if v is not None})

    def is_turtle_path(self, path: str | Path) -> bool:
        """Return True if ``path`` has one of the associated suffixes."""
        return Path(path).suffix.lower() in self.extensions


def config_from_dict(data: dict[str, Any], source: str | None = None) -> ModeConfig:
    """Build a ``ModeConfig`` from a plain mapping.

    Unknown keys are logged and ignored.

    Raises
    ------
    ConfigError
        If a known key holds an invalid value.
    """
    known = {f.name for f in fields(ModeConfig)}
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        if key not in known:
            logger.warning("Ignoring unknown configuration key %r", key)
            continue
        kwargs[key] = value
    if "extensions" in kwargs:
        exts = kwargs["extensions"]
        if isinstance(exts, str) or not isinstance(exts, (list, tuple)):
            raise ConfigError(f"extensions must be a list, got {exts!r}", source)
        kwargs["extensions"] = tuple(str(e).lower() for e in exts)
    try:
        return ModeConfig(**kwargs)
    except ConfigError as exc:
        raise ConfigError(exc.config_message, source) from None


def load_config(path: str | Path) -> ModeConfig:
    """Load a ``ModeConfig`` from a YAML file.

    An empty file yields the defaults.

    Raises
    ------
    ConfigError
        If the file cannot be read, is not valid YAML, is not a mapping,
        or holds invalid values.
    """
    source = str(path)
    try:
        text = Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"cannot read configuration: {exc}", source) from exc
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"invalid YAML: {exc}", source) from exc
    if data is None:
        return ModeConfig()
    if not isinstance(data, dict):
        raise ConfigError("configuration must be a mapping", source)
    logger.debug("Loaded configuration from %s", source)
    return config_from_dict(data, source)
