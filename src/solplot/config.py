"""Render configuration."""

from dataclasses import asdict, dataclass, fields
from pathlib import Path
from typing import Any

import yaml

from .errors import ConfigError

DEFAULT_WIDTH = 640
DEFAULT_HEIGHT = 480
DEFAULT_MARGIN = 15
DEFAULT_RADIUS = 2


@dataclass(frozen=True)
class RenderConfig:
    """Non-data parameters governing chart appearance, all in pixels."""

    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    margin: int = DEFAULT_MARGIN  # applied on all four sides
    radius: int = DEFAULT_RADIUS

    @property
    def size(self) -> tuple[int, int]:
        return (self.width, self.height)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RenderConfig":
        """Create RenderConfig from a ``render`` mapping.

        Missing keys keep their defaults.

        Raises:
            ConfigError: On unknown keys or values that are not
                non-negative integers.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown render option(s): {', '.join(unknown)}")
        return cls(**{key: _pixel_value(key, value) for key, value in data.items()})

    @classmethod
    def from_yaml(cls, path: Path) -> "RenderConfig":
        """Load render configuration from a YAML file.

        The file holds a top-level ``render`` section::

            render:
              width: 1024
              height: 768
              margin: 20
              radius: 3
        """
        try:
            with open(path) as f:
                data = yaml.safe_load(f) or {}
        except OSError as e:
            raise ConfigError(f"Cannot read config file {path}: {e}") from e
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config file {path} must contain a mapping")
        render = data.get("render", {}) or {}
        if not isinstance(render, dict):
            raise ConfigError(f"'render' section in {path} must be a mapping")
        return cls.from_dict(render)

    def with_overrides(self, **overrides: int | None) -> "RenderConfig":
        """Return a copy with the given values replaced, None values are skipped."""
        changes = {key: value for key, value in overrides.items() if value is not None}
        return type(self).from_dict({**asdict(self), **changes})


def _pixel_value(key: str, value: Any) -> int:
    # bool is an int subclass, reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigError(f"Render option '{key}' must be an integer, got {value!r}")
    if value < 0:
        raise ConfigError(f"Render option '{key}' must not be negative, got {value}")
    return value
