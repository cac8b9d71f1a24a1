"""Sorter options and options-file loading.

Options name the record fields the sorter reads and the weight given to
records without a usable weight. They can be built directly, from a mapping,
or from a YAML/JSON file (top level or a ``sorter:`` section).
"""

from __future__ import annotations

import logging
import numbers
from dataclasses import dataclass
from decimal import Decimal
from pathlib import Path
from typing import Any, Mapping

from .errors import ConfigError

logger = logging.getLogger(__name__)

DEFAULT_ID_FIELD = "id"
DEFAULT_WEIGHT_FIELD = "weight"
DEFAULT_DEPENDS_FIELD = "depends"
DEFAULT_WEIGHT = 0

CONFIG_SECTION = "sorter"

# Accepted spellings for each option, canonical name first.
OPTION_ALIASES: dict[str, tuple[str, ...]] = {
    "id_field": ("id_field", "idField", "idProperty"),
    "weight_field": ("weight_field", "weightField", "weightProperty"),
    "depends_field": ("depends_field", "dependsField", "dependsProperty"),
    "default_weight": ("default_weight", "defaultWeight"),
}


def is_weight(value: Any) -> bool:
    """Check if a value is usable as a weight (real number or Decimal, not a bool)."""
    return isinstance(value, (numbers.Real, Decimal)) and not isinstance(value, bool)


@dataclass(frozen=True)
class SorterOptions:
    """Field names and default weight used to normalize records."""

    id_field: str = DEFAULT_ID_FIELD
    weight_field: str = DEFAULT_WEIGHT_FIELD
    depends_field: str = DEFAULT_DEPENDS_FIELD
    default_weight: float = DEFAULT_WEIGHT

    def to_dict(self) -> dict[str, Any]:
        return {
            "id_field": self.id_field,
            "weight_field": self.weight_field,
            "depends_field": self.depends_field,
            "default_weight": self.default_weight,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> SorterOptions:
        """Build options from a mapping, ignoring invalid values.

        Field names must be non-empty strings and the default weight must be
        a number; anything else is logged and replaced by the default.
        """
        if not data:
            return cls()

        values = canonical_options(data)
        resolved: dict[str, Any] = {}
        for name in ("id_field", "weight_field", "depends_field"):
            if name not in values:
                continue
            raw = values[name]
            if isinstance(raw, str) and raw:
                resolved[name] = raw
            else:
                logger.warning("Invalid %s %r, using default", name, raw)

        if "default_weight" in values:
            raw = values["default_weight"]
            if is_weight(raw):
                resolved["default_weight"] = raw
            else:
                logger.warning("Invalid default_weight %r, using default", raw)

        unknown = set(data) - {a for aliases in OPTION_ALIASES.values() for a in aliases}
        if unknown:
            logger.debug("Ignoring unknown sorter options: %s", sorted(unknown))

        return cls(**resolved)

    def merged(self, overrides: Mapping[str, Any]) -> SorterOptions:
        """Return new options with non-``None`` overrides applied on top.

        Overrides may use any accepted spelling.
        """
        data = self.to_dict()
        for name, value in canonical_options(overrides).items():
            if value is not None:
                data[name] = value
        return SorterOptions.from_dict(data)


def canonical_options(data: Mapping[str, Any]) -> dict[str, Any]:
    """Map every accepted option spelling in ``data`` to its canonical name."""
    result: dict[str, Any] = {}
    for name, aliases in OPTION_ALIASES.items():
        for alias in aliases:
            if alias in data:
                result[name] = data[alias]
                break
    return result


def load_options(path: Path) -> SorterOptions:
    """Read sorter options from a YAML or JSON file.

    Options may sit at the top level of the document or under a ``sorter:``
    section. Raises :class:`ConfigError` when the file is missing, cannot be
    parsed, or is not a mapping.
    """
    if not path.exists():
        raise ConfigError(f"Options file not found: {path}")

    from ruamel.yaml import YAML
    from ruamel.yaml.error import YAMLError

    yaml = YAML(typ="safe", pure=True)
    try:
        data = yaml.load(path.read_text(encoding="utf-8"))
    except (OSError, YAMLError) as exc:
        raise ConfigError(f"Failed to read options from {path}: {exc}") from exc

    if data is None:
        return SorterOptions()
    if not isinstance(data, dict):
        raise ConfigError(f"Options file {path} must contain a mapping")

    section = data.get(CONFIG_SECTION)
    if isinstance(section, dict):
        data = section
    return SorterOptions.from_dict(data)
