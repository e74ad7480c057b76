"""
Parser for Conventional Commit subject lines.

The grammar is deliberately small: a type made of ASCII word characters, an
optional scope in parentheses, a colon and a space, then the message::

    feat(auth): add login flow
    fix: crash on null input

Anything else is kept verbatim as a message of type ``other``. The parser
never fails.
"""

from __future__ import annotations

import re
from typing import Iterable, List

from changelog_generator.grouping.commit_model import OTHER_TYPE, ParsedCommit
from changelog_generator.vcs.git_client import RawCommit


SUBJECT_PATTERN = re.compile(r"^(\w+)(?:\(([^)]+)\))?: (.+)$", re.ASCII)
EMPTY_MESSAGE = "(no commit message)"


def parse_commit(commit: RawCommit) -> ParsedCommit:
    """Parse the subject of ``commit`` into a :class:`ParsedCommit`.

    Parameters
    ----------
    commit : RawCommit
        A commit as read from the Git log.

    Returns
    -------
    ParsedCommit
        ``type``, ``scope`` and ``message`` taken from the subject when it
        matches ``type(scope): message``; otherwise type ``other``, no
        scope, and the unchanged subject as the message.
    """
    match = SUBJECT_PATTERN.match(commit.subject)
    if not match:
        return ParsedCommit(
            type=OTHER_TYPE,
            scope=None,
            message=commit.subject or EMPTY_MESSAGE,
            hash=commit.hash,
        )

    commit_type, scope, message = match.groups()
    return ParsedCommit(type=commit_type, scope=scope, message=message, hash=commit.hash)


def parse_commits(commits: Iterable[RawCommit]) -> List[ParsedCommit]:
    """Parse every commit, keeping the input order."""
    return [parse_commit(commit) for commit in commits]
