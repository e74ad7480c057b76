"""
Top-level package for changelog_generator.

This package exposes the main CLI entry point via the
``changelog_generator.cli`` module.
"""

__all__ = ["__version__"]

__version__ = "0.1.0"
