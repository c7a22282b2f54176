"""
Regular expressions that recognize GitHub references.

All patterns are case-insensitive and ASCII-only, so ``\\w`` means
``[A-Za-z0-9_]`` the way it does on GitHub.
"""

import re
from dataclasses import dataclass
from typing import FrozenSet, Pattern

# GitHub stopped linking these to their blog post about mentions
DENIED_MENTIONS: FrozenSet[str] = frozenset({'mention', 'mentions'})

MIN_SHA_LENGTH = 7

# Alphanumerics or hyphens, at most 39 characters. Leading and trailing
# hyphens are accepted since GitHub allowed them on older accounts.
USER_GROUP = r'[\da-z][-\da-z]{0,38}'
PROJECT_GROUP = r'(?:\.git[\w-]|\.(?!git)|[\w-])+'
REPO_GROUP = '(' + USER_GROUP + ')/(' + PROJECT_GROUP + ')'

FLAGS = re.IGNORECASE | re.ASCII

LINK_PATTERN = re.compile(
    r'^https?://github\.com/' + REPO_GROUP +
    r'/(commit|compare|issues|pull)/([a-f\d]+(?:\.{3}[a-f\d]+)?/?(?=[#?]|\Z))',
    FLAGS
)

REFERENCE_PATTERN = re.compile(
    '(' + USER_GROUP + ')(?:/(' + PROJECT_GROUP + r'))?(?:#([1-9]\d*)|@([a-f\d]{7,40}))',
    FLAGS
)

MENTION_PATTERN = re.compile(
    '@(' + USER_GROUP + '(?:/' + USER_GROUP + ')?)',
    FLAGS
)


@dataclass(frozen=True)
class PatternLibrary:
    """
    The three patterns used by the linkifier.

    Attributes:
        link: Anchored; matches a github.com commit/compare/issues/pull URL.
            Groups: user, project, page, payload.
        reference: Matches ``user[/project]#N`` and ``user[/project]@sha``.
            Groups: user, project, issue number, hash.
        mention: Matches ``@user`` and ``@org/team``. Group: user.
    """
    link: Pattern = LINK_PATTERN
    reference: Pattern = REFERENCE_PATTERN
    mention: Pattern = MENTION_PATTERN


DEFAULT_PATTERNS = PatternLibrary()


def abbreviate(sha: str) -> str:
    """Shorten a commit hash to its first seven characters."""
    return sha[:MIN_SHA_LENGTH]
