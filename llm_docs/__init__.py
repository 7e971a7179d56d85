"""llm-docs - copy bundled library documentation for AI coding assistants.

Reads package.json in the current directory, shows which dependencies have
documentation in the bundled corpus, and copies the chosen full or tiny
variant of each into .llm-docs/.

Usage:
    llm-docs               # Interactive selection
    llm-docs --yes --variant tiny
    llm-docs --list        # Show availability only
    python -m llm_docs
"""

__version__ = "1.0.0"
