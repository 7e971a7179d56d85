"""Read the consuming project's package.json."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

# JSON key -> Manifest attribute, in enumeration order
SECTIONS = (
    ("dependencies", "dependencies"),
    ("devDependencies", "dev_dependencies"),
    ("peerDependencies", "peer_dependencies"),
)


class ManifestUnreadable(Exception):
    """The manifest is missing or is not a valid package.json."""

    def __init__(self, message: str, path: Path | str):
        super().__init__(message)
        self.message = message
        self.path = str(path)

    def __str__(self) -> str:
        return f"{self.message} | file: {self.path}"


@dataclass(frozen=True)
class Manifest:
    """Declared dependencies, name -> version constraint."""

    dependencies: dict[str, str] = field(default_factory=dict)
    dev_dependencies: dict[str, str] = field(default_factory=dict)
    peer_dependencies: dict[str, str] = field(default_factory=dict)


def _parse_section(data: dict, key: str, path: Path) -> dict[str, str]:
    section = data.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict) or not all(
        isinstance(v, str) for v in section.values()
    ):
        raise ManifestUnreadable(f"'{key}' must map package names to version strings", path)
    return dict(section)


def load_manifest(path: Path | str) -> Manifest:
    """Load and parse package.json.

    Raises:
        ManifestUnreadable: If the file is missing, unreadable or malformed.
    """
    path = Path(path)

    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except OSError as e:
        raise ManifestUnreadable(f"Could not read {path.name}: {e.strerror or e}", path)
    except UnicodeDecodeError as e:
        raise ManifestUnreadable(f"{path.name} is not valid UTF-8: {e.reason}", path)
    except json.JSONDecodeError as e:
        raise ManifestUnreadable(f"Invalid JSON in {path.name}: {e}", path)

    if not isinstance(data, dict):
        raise ManifestUnreadable(f"{path.name} must contain a JSON object", path)

    return Manifest(**{attr: _parse_section(data, key, path) for key, attr in SECTIONS})


def all_names(manifest: Manifest) -> list[str]:
    """All declared dependency names: runtime, then dev, then peer, without repeats."""
    names: list[str] = []
    seen: set[str] = set()
    for _, attr in SECTIONS:
        for name in getattr(manifest, attr):
            if name not in seen:
                seen.add(name)
                names.append(name)
    return names
