"""Copy selected documentation files into the project's output directory."""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Mapping, Optional

from llm_docs.doc_catalog import DocEntry, Variant, filename_for
from llm_docs.prompts import Selection

logger = logging.getLogger(__name__)


class CopyOutcome(Enum):
    SUCCESS = "success"
    CATALOG_MISS = "catalog_miss"
    FILE_SYSTEM_ERROR = "file_system_error"


@dataclass(frozen=True)
class CopyResult:
    """What happened to a single selection."""

    name: str
    variant: Variant
    outcome: CopyOutcome
    target: Optional[Path] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome is CopyOutcome.SUCCESS


def copy_doc(
    name: str,
    variant: Variant,
    catalog: Mapping[str, DocEntry],
    docs_dir: Path,
    output_dir: Path,
) -> CopyResult:
    """Copy one documentation file, overwriting any previous copy.

    Filesystem errors are returned as a FILE_SYSTEM_ERROR result rather
    than raised, so a caller copying several files keeps going.

    Args:
        name: Package name.
        variant: Which documentation variant to copy.
        catalog: Loaded documentation mapping.
        docs_dir: Directory containing the source documentation files.
        output_dir: Destination directory, created if needed.

    Returns:
        CopyResult describing the outcome.
    """
    entry = catalog.get(name)
    if entry is None:
        return CopyResult(name, variant, CopyOutcome.CATALOG_MISS)

    filename = filename_for(entry, variant)
    source = Path(docs_dir) / filename
    target = Path(output_dir) / filename

    try:
        Path(output_dir).mkdir(parents=True, exist_ok=True)
        shutil.copyfile(source, target)
    except OSError as e:
        logger.debug(f"Copy {source} -> {target} failed: {e}")
        return CopyResult(name, variant, CopyOutcome.FILE_SYSTEM_ERROR, target, str(e))

    return CopyResult(name, variant, CopyOutcome.SUCCESS, target)


def copy_selections(
    selections: Iterable[Selection],
    catalog: Mapping[str, DocEntry],
    docs_dir: Path,
    output_dir: Path,
) -> Iterator[CopyResult]:
    """Copy each selection in turn, yielding one result per selection."""
    for selection in selections:
        yield copy_doc(selection.name, selection.variant, catalog, docs_dir, output_dir)
