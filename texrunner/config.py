"""
Runtime configuration.

Settings are read from a YAML mapping.  The file is looked up in priority
order:

1. An explicit path passed to :func:`load_config` (``--config`` on the CLI)
2. The ``TEXRUNNER_CONFIG`` environment variable
3. ``~/.config/texrunner/config.yaml``

A missing default file simply yields the defaults; a missing explicit
file, unknown keys or bad values raise :class:`ConfigError`.

Example::

    encoding: latin-1
    number_type: fraction
    show_bad_boxes: true
    max_errors: 20
"""

from __future__ import annotations

import codecs
import os
from dataclasses import dataclass, fields
from decimal import Decimal
from fractions import Fraction
from pathlib import Path
from typing import Any, Callable

import yaml

from texrunner.exceptions import ConfigError

_USER_CONFIG_FILE = Path.home() / ".config" / "texrunner" / "config.yaml"

NUMBER_TYPES: dict[str, Callable[[str], Any]] = {
    "float": float,
    "decimal": Decimal,
    "fraction": Fraction,
}


@dataclass(frozen=True)
class ParserConfig:
    """Settings for decoding and presenting parse results."""
    encoding: str = "utf-8"        # Codec for displaying byte payloads.
    number_type: str = "float"     # "float" | "decimal" | "fraction"
    show_bad_boxes: bool = False   # Also list bad-box warnings.
    max_errors: int = 0            # 0 = print every error

    def __post_init__(self) -> None:
        if not isinstance(self.encoding, str):
            raise ConfigError(f"encoding must be a codec name, got {self.encoding!r}.")
        try:
            codecs.lookup(self.encoding)
        except LookupError:
            raise ConfigError(f"Unknown encoding {self.encoding!r}.") from None
        if not isinstance(self.number_type, str) or self.number_type not in NUMBER_TYPES:
            raise ConfigError(
                f"number_type must be one of {sorted(NUMBER_TYPES)}, "
                f"got {self.number_type!r}."
            )
        if not isinstance(self.show_bad_boxes, bool):
            raise ConfigError("show_bad_boxes must be true or false.")
        if (
            isinstance(self.max_errors, bool)
            or not isinstance(self.max_errors, int)
            or self.max_errors < 0
        ):
            raise ConfigError("max_errors must be a non-negative integer.")

    @property
    def number(self) -> Callable[[str], Any]:
        return NUMBER_TYPES[self.number_type]


def config_path(explicit: Path | None = None) -> Path:
    """Return the configuration file that :func:`load_config` would read."""
    if explicit is not None:
        return Path(explicit)
    env = os.environ.get("TEXRUNNER_CONFIG", "")
    if env:
        return Path(env)
    return _USER_CONFIG_FILE


def load_config(path: Path | None = None) -> ParserConfig:
    """Load a :class:`ParserConfig` from YAML, falling back to defaults."""
    target = config_path(path)
    explicit = path is not None or bool(os.environ.get("TEXRUNNER_CONFIG"))
    if not target.is_file():
        if explicit:
            raise ConfigError(f"Configuration file not found: {target}")
        return ParserConfig()

    try:
        data = yaml.safe_load(target.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in {target}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{target} must contain a mapping of settings.")

    known = {f.name for f in fields(ParserConfig)}
    unknown = sorted(str(key) for key in data if key not in known)
    if unknown:
        raise ConfigError(f"Unknown settings in {target}: {', '.join(unknown)}")
    return ParserConfig(**data)
