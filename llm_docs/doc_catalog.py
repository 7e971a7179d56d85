"""Bundled documentation catalog: which packages have docs, in which variants."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

logger = logging.getLogger(__name__)

BUNDLED_DOCS_DIR = Path(__file__).parent / "docs"
MAPPING_FILE = "mapping.json"


class Variant(str, Enum):
    """Documentation granularity."""

    FULL = "full"
    TINY = "tiny"

    @property
    def label(self) -> str:
        return f"{self.value.capitalize()} Documentation"


@dataclass(frozen=True)
class DocEntry:
    """Filenames of the documentation variants for one package."""

    full: str
    tiny: str


Catalog = dict[str, DocEntry]


def filename_for(entry: DocEntry, variant: Variant) -> str:
    """Return the documentation filename for a variant."""
    if variant is Variant.TINY:
        return entry.tiny
    return entry.full


def _parse_entry(name: str, raw: object) -> DocEntry | None:
    if not isinstance(raw, dict):
        return None
    full = raw.get("full")
    tiny = raw.get("tiny")
    if not (isinstance(full, str) and full and isinstance(tiny, str) and tiny):
        return None
    return DocEntry(full=full, tiny=tiny)


def load_catalog(path: Path | str) -> Catalog:
    """Load the documentation mapping.

    A catalog that cannot be read is not fatal: the run continues with
    every dependency reported as unavailable.

    Args:
        path: Path to mapping.json.

    Returns:
        Mapping of package name to DocEntry, empty if the file is missing
        or corrupted.
    """
    path = Path(path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError, json.JSONDecodeError) as e:
        logger.warning(f"Could not read documentation mapping {path}: {e}")
        return {}

    if not isinstance(data, dict):
        logger.warning(f"Documentation mapping {path} must be a JSON object")
        return {}

    catalog: Catalog = {}
    for name, raw in data.items():
        entry = _parse_entry(name, raw)
        if entry is None:
            logger.warning(f"Skipping malformed mapping entry for {name}")
            continue
        catalog[name] = entry

    logger.debug(f"Loaded {len(catalog)} documentation entries from {path}")
    return catalog
