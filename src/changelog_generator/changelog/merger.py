"""
Insertion of a rendered section into the changelog file.

The changelog is expected to start with a top-level header block, for
example::

    # Changelog

    All notable changes to this project will be documented in this file.

    ## [Unreleased] - 2024-01-15
    ...

A new section is inserted right after the first blank-line-delimited
paragraph that starts with the title, ahead of every older section. If the
document does not start with the title the section is prepended instead.
Existing sections are never rewritten: when an entry for the same date is
already present only a warning is emitted.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from pathlib import Path


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())
    logger.propagate = False


DEFAULT_TITLE = "# Changelog"
DEFAULT_DESCRIPTION = "All notable changes to this project will be documented in this file."


@dataclass
class MergeResult:
    """Outcome of merging a section into a changelog file.

    Attributes
    ----------
    path : Path
        The changelog file.
    created : bool
        True if the file did not exist. A blank existing file also gets
        the default document but counts as updated.
    duplicate : bool
        True if the section header was already present in the file.
    content : str
        The full document after the merge.
    """

    path: Path
    created: bool
    duplicate: bool
    content: str


def default_document(title: str = DEFAULT_TITLE, description: str = DEFAULT_DESCRIPTION) -> str:
    """Return the content of a fresh changelog."""
    return f"{title}\n\n{description}\n\n"


def has_duplicate_entry(content: str, section: str) -> bool:
    """Return True if the section's header line already appears in ``content``."""
    first_line = section.split("\n", 1)[0]
    return bool(first_line) and first_line in content


def insert_section(content: str, section: str, title: str = DEFAULT_TITLE) -> str:
    """Insert ``section`` after the leading header block of ``content``.

    The header block is the shortest prefix starting with ``title`` and
    ending with a blank line. Without such a block the section is placed
    at the very start of the document.
    """
    if content.startswith(title):
        header_match = re.match(re.escape(title) + r".*?\n\n", content, re.DOTALL)
        if header_match:
            header_end = header_match.end()
            return content[:header_end] + section + content[header_end:]
        logger.debug("Header %r has no terminating blank line; prepending", title)
    else:
        logger.debug("Document does not start with %r; prepending", title)
    return section + content


def merge_section(
    section: str,
    path: Path,
    title: str = DEFAULT_TITLE,
    description: str = DEFAULT_DESCRIPTION,
    write: bool = True,
) -> MergeResult:
    """Merge ``section`` into the changelog at ``path``.

    Parameters
    ----------
    section : str
        The rendered section, starting with its dated header line.
    path : Path
        The changelog file. It is created if missing.
    title, description : str
        Used to recognise the header block and to build a new document.
    write : bool
        If False the merged document is computed but not written.

    Returns
    -------
    MergeResult
        What happened, including the merged content.

    Notes
    -----
    The file is rewritten in a single call, without a temporary file or a
    backup. Filesystem errors propagate to the caller.
    """
    created = not path.exists()
    if not created:
        # newline="" on read and write keeps existing line endings untouched
        with path.open("r", encoding="utf-8", newline="") as fh:
            content = fh.read()
    else:
        content = ""
    if not content.strip():
        logger.debug("Changelog %s missing or blank; starting a new document", path)
        content = default_document(title, description)

    duplicate = has_duplicate_entry(content, section)
    if duplicate:
        logger.warning(
            "An entry with header %r already exists in %s; review for duplicates",
            section.split("\n", 1)[0],
            path,
        )

    merged = insert_section(content, section, title)
    if write:
        with path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(merged)
        logger.debug("Wrote %d characters to %s", len(merged), path)
    return MergeResult(path=path, created=created, duplicate=duplicate, content=merged)
