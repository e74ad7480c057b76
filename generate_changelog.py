#!/usr/bin/env python
"""
Thin wrapper script to invoke the changelog_generator CLI.

Running ``python generate_changelog.py`` is equivalent to running the
``generate-changelog`` console script installed via ``pyproject.toml``.
"""

from changelog_generator.cli import main


if __name__ == "__main__":
    main(prog_name="generate-changelog")
