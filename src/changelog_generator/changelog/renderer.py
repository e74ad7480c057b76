"""
Markdown rendering of a changelog section.

Commits are grouped by category, categories are emitted in the fixed
:data:`~changelog_generator.grouping.commit_model.CATEGORY_ORDER`, and
empty categories are left out. Given the same commits and the same date
the output is byte-identical.
"""

from __future__ import annotations

from datetime import date, datetime, timezone
from typing import Dict, Iterable, List, Optional

from changelog_generator.grouping.commit_model import (
    CATEGORY_ORDER,
    OTHER_TITLE,
    TYPE_MAP,
    ParsedCommit,
    category_key,
)


DEFAULT_LABEL = "Unreleased"


def group_commits(commits: Iterable[ParsedCommit]) -> Dict[str, List[ParsedCommit]]:
    """Group commits by category, keeping their relative order."""
    groups: Dict[str, List[ParsedCommit]] = {}
    for commit in commits:
        groups.setdefault(category_key(commit.type), []).append(commit)
    return groups


def section_header(day: date, label: str = DEFAULT_LABEL) -> str:
    return f"## [{label}] - {day.isoformat()}"


def category_header(key: str) -> str:
    category = TYPE_MAP.get(key)
    if category is None:
        return f"### {OTHER_TITLE}"
    return f"### {category.header}"


def format_entry(commit: ParsedCommit) -> str:
    """Format a commit as a markdown bullet."""
    scope = f"**{commit.scope}:** " if commit.scope else ""
    return f"- {scope}{commit.message} ({commit.hash})"


def render_section(
    commits: Iterable[ParsedCommit],
    today: Optional[date] = None,
    label: str = DEFAULT_LABEL,
) -> str:
    """Render a dated changelog section.

    Parameters
    ----------
    commits : Iterable[ParsedCommit]
        The commits to list.
    today : Optional[date]
        The date written in the section header. Defaults to the current
        UTC date.
    label : str
        The bracketed label of the section header.

    Returns
    -------
    str
        The section, ending with a blank line. Each category block is a
        ``###`` header followed by one bullet per commit.
    """
    if today is None:
        today = datetime.now(timezone.utc).date()

    groups = group_commits(commits)
    lines: List[str] = [section_header(today, label), ""]
    for key in CATEGORY_ORDER:
        entries = groups.get(key)
        if not entries:
            continue
        lines.append(category_header(key))
        lines.extend(format_entry(commit) for commit in entries)
        lines.append("")

    return "\n".join(lines) + "\n"
