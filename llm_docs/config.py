"""Configuration loading and validation for llm-docs."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Optional

import yaml

from llm_docs.doc_catalog import BUNDLED_DOCS_DIR, Variant


class ConfigError(Exception):
    """Invalid or unreadable .llm-docs.yaml."""

    def __init__(self, message: str, file: Optional[str] = None, error_type: str = "config_invalid"):
        super().__init__(message if file is None else f"{message} ({file})")
        self.message = message
        self.file = file
        self.error_type = error_type

    def to_json(self) -> dict[str, Any]:
        """Error payload printed on stderr by the CLI."""
        return {"error": self.error_type, "message": self.message, "file": self.file}


DEFAULT_CONFIG_PATH = ".llm-docs.yaml"
DEFAULT_MANIFEST_FILE = "package.json"
DEFAULT_OUTPUT_DIR = ".llm-docs"


@dataclass
class LlmDocsConfig:
    """Complete llm-docs configuration."""

    version: str = "1.0"
    manifest_file: str = DEFAULT_MANIFEST_FILE
    output_dir: str = DEFAULT_OUTPUT_DIR
    docs_dir: Optional[str] = None  # None means the bundled corpus
    default_variant: Variant = Variant.FULL

    def docs_path(self) -> Path:
        """Directory holding mapping.json and the documentation files."""
        if self.docs_dir:
            return Path(self.docs_dir)
        return BUNDLED_DOCS_DIR


def get_default_config() -> LlmDocsConfig:
    """Return the default configuration."""
    return LlmDocsConfig()


def _require_string(data: dict[str, Any], key: str, default: str, config_file: str) -> str:
    value = data.get(key, default)
    if not isinstance(value, str) or not value.strip():
        raise ConfigError(
            f"'{key}' must be a non-empty string",
            file=config_file,
        )
    return value


def _parse_version(value: Any, config_file: str) -> str:
    # YAML reads `version: 1.0` as a float
    if isinstance(value, bool) or not isinstance(value, (str, int, float)) or not str(value).strip():
        raise ConfigError("'version' must be a non-empty string", file=config_file)
    return str(value)


def _require_project_relative(value: str, key: str, config_file: str) -> str:
    path = Path(value)
    if path.is_absolute() or ".." in path.parts:
        raise ConfigError(
            f"'{key}' must be a path inside the project directory, got '{value}'",
            file=config_file,
        )
    return value


def _parse_variant(value: Any, config_file: str) -> Variant:
    try:
        return Variant(value)
    except ValueError:
        choices = ", ".join(v.value for v in Variant)
        raise ConfigError(
            f"Unknown default_variant '{value}'. Must be one of: {choices}",
            file=config_file,
        )


def load_config(config_path: Path | str) -> LlmDocsConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the .llm-docs.yaml file.

    Returns:
        LlmDocsConfig with loaded values merged with defaults.

    Raises:
        ConfigError: If the file exists but contains invalid configuration.
    """
    config_path = Path(config_path)
    config_file = str(config_path)

    defaults = get_default_config()

    if not config_path.exists():
        return defaults

    try:
        content = config_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(
            f"Cannot read config: {e}",
            file=config_file,
            error_type="config_unreadable",
        )

    if not content.strip():
        return defaults

    try:
        data = yaml.safe_load(content)
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML: {e}", file=config_file)

    if not data:
        return defaults
    if not isinstance(data, dict):
        raise ConfigError(
            "Top-level llm-docs config must be a mapping",
            file=config_file,
        )

    docs_dir = data.get("docs_dir", defaults.docs_dir)
    if docs_dir is not None:
        docs_dir = _require_string(data, "docs_dir", "", config_file)

    return LlmDocsConfig(
        version=_parse_version(data.get("version", defaults.version), config_file),
        manifest_file=_require_string(data, "manifest_file", defaults.manifest_file, config_file),
        output_dir=_require_project_relative(
            _require_string(data, "output_dir", defaults.output_dir, config_file),
            "output_dir",
            config_file,
        ),
        docs_dir=docs_dir,
        default_variant=_parse_variant(
            data.get("default_variant", defaults.default_variant.value), config_file
        ),
    )


def find_config(config_path: Optional[str], root: Path) -> LlmDocsConfig:
    """Load config from an explicit path or the project default.

    Search order:
    1. Explicit --config path
    2. .llm-docs.yaml in the project root
    3. Built-in defaults
    """
    if config_path:
        path = Path(config_path)
        if not path.exists():
            raise ConfigError(
                "Config file not found",
                file=config_path,
                error_type="config_missing",
            )
        return load_config(path)

    return load_config(root / DEFAULT_CONFIG_PATH)
