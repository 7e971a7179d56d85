"""Shared fixtures for llm-docs tests."""

import json

import pytest

from llm_docs.doc_catalog import DocEntry


@pytest.fixture
def docs_dir(tmp_path):
    """Create a documentation corpus with a mapping and two packages."""
    docs = tmp_path / "corpus"
    docs.mkdir()

    (docs / "mapping.json").write_text(json.dumps({
        "zod": {"full": "zod-full.txt", "tiny": "zod-tiny.txt"},
        "dayjs": {"full": "dayjs-full.txt", "tiny": "dayjs-tiny.txt"},
    }))
    (docs / "zod-full.txt").write_text("# zod full\nz.object({...})\n")
    (docs / "zod-tiny.txt").write_text("# zod tiny\n")
    (docs / "dayjs-full.txt").write_text("# dayjs full\ndayjs().format()\n")
    (docs / "dayjs-tiny.txt").write_text("# dayjs tiny\n")

    return docs


@pytest.fixture
def catalog():
    """In-memory catalog matching the docs_dir corpus."""
    return {
        "zod": DocEntry(full="zod-full.txt", tiny="zod-tiny.txt"),
        "dayjs": DocEntry(full="dayjs-full.txt", tiny="dayjs-tiny.txt"),
    }


@pytest.fixture
def project(tmp_path, docs_dir):
    """A consuming project whose config points at the test corpus."""
    root = tmp_path / "project"
    root.mkdir()

    (root / "package.json").write_text(json.dumps({
        "name": "demo",
        "dependencies": {"zod": "^3.0.0", "express": "^4.18.0"},
        "devDependencies": {"left-pad": "^1.0.0", "dayjs": "^1.11.0"},
        "peerDependencies": {"zod": "^3.0.0"},
    }))
    (root / ".llm-docs.yaml").write_text(f"docs_dir: {docs_dir}\n")

    return root
