"""
Data models for parsed commits and their changelog categories.

A :class:`ParsedCommit` is the structured form of one commit subject. The
:data:`TYPE_MAP` table decides how each Conventional Commit type is titled
in the changelog, and :data:`CATEGORY_ORDER` fixes the order in which the
categories are rendered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple


OTHER_TYPE = "other"
OTHER_TITLE = "Other Changes"


@dataclass(frozen=True)
class ParsedCommit:
    """Representation of a commit subject split into its parts.

    Attributes
    ----------
    type : str
        The Conventional Commit type (feat, fix, docs, etc.), or ``other``
        when the subject does not follow the convention.
    scope : Optional[str]
        The parenthesised scope, if any.
    message : str
        The description following the ``type(scope): `` prefix.
    hash : str
        The abbreviated commit hash.
    """

    type: str
    scope: Optional[str]
    message: str
    hash: str


@dataclass(frozen=True)
class TypeCategory:
    """Display information for a commit type."""

    emoji: str
    title: str

    @property
    def header(self) -> str:
        return f"{self.emoji} {self.title}"


TYPE_MAP: Dict[str, TypeCategory] = {
    "feat": TypeCategory("✨", "Features"),
    "fix": TypeCategory("🐛", "Bug Fixes"),
    "docs": TypeCategory("📚", "Documentation"),
    "perf": TypeCategory("⚡", "Performance"),
    "refactor": TypeCategory("♻️", "Refactoring"),
    "test": TypeCategory("🧪", "Testing"),
    "chore": TypeCategory("🔧", "Maintenance"),
    "build": TypeCategory("🏗️", "Build System"),
    "ci": TypeCategory("👷", "CI"),
}

# build and ci have no slot of their own and land in the catch-all.
CATEGORY_ORDER: Tuple[str, ...] = (
    "feat",
    "fix",
    "docs",
    "perf",
    "refactor",
    "test",
    "chore",
    OTHER_TYPE,
)


def category_key(commit_type: str) -> str:
    """Return the changelog category a commit type is listed under."""
    if commit_type in CATEGORY_ORDER:
        return commit_type
    return OTHER_TYPE
