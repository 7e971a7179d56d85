"""Command-line interface for llm-docs."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from enum import IntEnum
from pathlib import Path
from typing import Optional

from llm_docs.config import ConfigError, LlmDocsConfig, find_config
from llm_docs.copier import CopyOutcome, CopyResult, copy_selections
from llm_docs.doc_catalog import MAPPING_FILE, Variant, load_catalog
from llm_docs.manifest import ManifestUnreadable, all_names, load_manifest
from llm_docs.prompts import (
    AutoPrompt,
    ConsolePrompt,
    PromptCancelled,
    SelectionPrompt,
    collect_selections,
)
from llm_docs.resolver import availability, resolvable

logger = logging.getLogger(__name__)


class ExitCode(IntEnum):
    """Process exit codes."""

    SUCCESS = 0
    MANIFEST_ERROR = 1
    CONFIG_ERROR = 2
    UNEXPECTED_ERROR = 3
    INTERRUPTED = 130


def _print_status(names: list[str], available: list[str]) -> None:
    print("Your dependencies:")
    for name, has_doc in availability(names, available):
        print(f"{'✅' if has_doc else '❌'} {name}")


def _print_result(result: CopyResult) -> None:
    if result.outcome is CopyOutcome.SUCCESS:
        print(f"  ✅ Copied {result.variant.value} documentation for {result.name}")
    elif result.outcome is CopyOutcome.CATALOG_MISS:
        print(f"  ❌ No documentation available for {result.name}")
    else:
        print(f"  ❌ Failed to copy documentation for {result.name}: {result.error}")


def run(
    root: Path,
    config: LlmDocsConfig,
    prompt: SelectionPrompt,
    list_only: bool = False,
) -> int:
    """Run the full select-and-copy workflow in a project directory.

    Args:
        root: Project directory containing the manifest.
        config: Loaded configuration.
        prompt: Source of the user's choices.
        list_only: Stop after showing which dependencies have docs.

    Returns:
        Exit code. Per-package copy failures still count as success.
    """
    print("📚 LLM Documentation Generator\n")

    try:
        manifest = load_manifest(root / config.manifest_file)
    except ManifestUnreadable as e:
        print(f"Error: Could not read {config.manifest_file} file ({e.message})", file=sys.stderr)
        return ExitCode.MANIFEST_ERROR

    docs_dir = config.docs_path()
    catalog = load_catalog(docs_dir / MAPPING_FILE)

    names = all_names(manifest)
    if not names:
        print(f"No dependencies found in {config.manifest_file}. Nothing selected.")
        return ExitCode.SUCCESS

    candidates = resolvable(names, catalog)
    _print_status(names, candidates)

    if list_only:
        return ExitCode.SUCCESS

    if not candidates:
        print("\nNo documentation available for any of your dependencies.")
        return ExitCode.SUCCESS

    selections = collect_selections(prompt, candidates)
    if not selections:
        print("\nNo packages selected. Exiting...")
        return ExitCode.SUCCESS

    output_dir = root / config.output_dir
    print("\nCopying selected documentation...\n")
    failed = 0
    for result in copy_selections(selections, catalog, docs_dir, output_dir):
        _print_result(result)
        if not result.ok:
            failed += 1

    copied = len(selections) - failed
    print(f"\n✨ Copied {copied} of {len(selections)} documentation files to `{config.output_dir}`.")
    print("You can now use these files as reference for AI tools like Cursor.")
    return ExitCode.SUCCESS


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="llm-docs",
        description="Copy bundled library documentation for your dependencies into .llm-docs/",
    )
    parser.add_argument(
        "--config",
        "-c",
        help="Path to config file (default: .llm-docs.yaml)",
    )
    parser.add_argument(
        "--yes",
        "-y",
        action="store_true",
        help="Select every available package without prompting",
    )
    parser.add_argument(
        "--variant",
        choices=[v.value for v in Variant],
        help="Documentation variant used with --yes (default from config)",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="Only show which dependencies have documentation",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    root = Path.cwd()
    try:
        config = find_config(args.config, root)
    except ConfigError as e:
        print(json.dumps(e.to_json()), file=sys.stderr)
        return ExitCode.CONFIG_ERROR

    prompt: SelectionPrompt
    if args.yes:
        prompt = AutoPrompt(Variant(args.variant) if args.variant else config.default_variant)
    else:
        prompt = ConsolePrompt()

    try:
        return run(root, config, prompt, list_only=args.list)
    except (KeyboardInterrupt, PromptCancelled):
        print("\nCancelled.", file=sys.stderr)
        return ExitCode.INTERRUPTED
    except Exception as e:
        logger.debug("Unhandled error", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return ExitCode.UNEXPECTED_ERROR


if __name__ == "__main__":
    sys.exit(main())
