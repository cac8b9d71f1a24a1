"""Loading record lists from YAML/JSON documents."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from .errors import RecordsError

logger = logging.getLogger(__name__)

RECORDS_KEY = "records"


def load_records(path: Path) -> list[Any]:
    """Read a list of records from a YAML or JSON file.

    The document must be a list, or a mapping holding the list under
    ``records``. YAML ``.inf`` / ``-.inf`` load as infinite floats.
    Raises :class:`RecordsError` on a missing file, a parse failure, or an
    unexpected document shape.
    """
    if not path.exists():
        raise RecordsError(f"Records file not found: {path}")

    from ruamel.yaml import YAML
    from ruamel.yaml.error import YAMLError

    yaml = YAML(typ="safe", pure=True)
    try:
        data = yaml.load(path.read_text(encoding="utf-8"))
    except (OSError, YAMLError) as exc:
        raise RecordsError(f"Failed to read records from {path}: {exc}") from exc

    if isinstance(data, dict):
        data = data.get(RECORDS_KEY)
    if data is None:
        logger.info("No records found in %s", path)
        return []
    if not isinstance(data, list):
        raise RecordsError(
            f"{path} must contain a list of records "
            f"(or a mapping with a '{RECORDS_KEY}' list)"
        )
    return data
