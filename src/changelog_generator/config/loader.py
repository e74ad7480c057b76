"""
Configuration loader for changelog_generator.

The tool reads an optional JSON file named ``.changelog.json`` from the
repository root. Every key is optional; missing keys take the defaults in
:data:`DEFAULT_CONFIG`, so a repository without the file produces the
standard ``CHANGELOG.md`` layout.

If the file exists but is malformed or holds values of the wrong type, a
:class:`ConfigError` is raised.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Dict, Optional

from changelog_generator.changelog.merger import DEFAULT_DESCRIPTION, DEFAULT_TITLE
from changelog_generator.changelog.renderer import DEFAULT_LABEL


logger = logging.getLogger(__name__)
# Attach a null handler to avoid "No handler" warnings or logging errors in
# environments where the root logger may be closed. Propagation is disabled
# until the CLI configures logging.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


CONFIG_FILENAME = ".changelog.json"

DEFAULT_CONFIG: Dict[str, str] = {
    "changelog_file": "CHANGELOG.md",
    "title": DEFAULT_TITLE,
    "description": DEFAULT_DESCRIPTION,
    "unreleased_label": DEFAULT_LABEL,
}


class ConfigError(Exception):
    """Raised when the configuration file is malformed or invalid."""

    pass


def load_config(repo_root: Optional[Path] = None) -> Dict[str, Any]:
    """Load the changelog configuration for ``repo_root``.

    Args:
        repo_root: Directory holding ``.changelog.json``. Defaults to the
                   current working directory.

    Returns:
        A dictionary with the keys of :data:`DEFAULT_CONFIG`:
        - changelog_file (str): Changelog path, relative to the working directory
        - title (str): Top-level header line of the document
        - description (str): Paragraph written under the title of a new changelog
        - unreleased_label (str): Bracketed label of new section headers

    Raises:
        ConfigError: If the file cannot be read, is not a JSON object, or
                     holds a non-string or empty value.
    """
    config: Dict[str, Any] = dict(DEFAULT_CONFIG)
    config_path = (repo_root or Path.cwd()) / CONFIG_FILENAME

    if not config_path.exists():
        logger.debug("No configuration file at %s; using defaults", config_path)
        return config

    try:
        content = config_path.read_text(encoding="utf-8")
        data = json.loads(content)
    except (OSError, json.JSONDecodeError) as exc:
        logger.error("Failed to read or parse configuration file: %s", exc)
        raise ConfigError(f"Invalid JSON in {config_path.name}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"{config_path.name} must contain a JSON object")

    for key, value in data.items():
        if key not in DEFAULT_CONFIG:
            logger.warning("Ignoring unknown configuration key '%s'", key)
            continue
        if not isinstance(value, str):
            raise ConfigError(f"'{key}' must be a string")
        if not value.strip():
            raise ConfigError(f"'{key}' must not be empty")
        config[key] = value

    logger.debug("Loaded configuration from: %s", config_path)
    logger.debug("Configuration data: %s", config)
    return config
