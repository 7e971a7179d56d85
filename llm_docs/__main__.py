"""Module entry point for running llm_docs as a package.

Allows: python -m llm_docs [options]
"""

from llm_docs.cli import main
import sys

if __name__ == '__main__':
    sys.exit(main())
