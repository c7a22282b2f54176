"""
Boundary checks that decide whether a raw pattern match is a real reference.

Only the single characters directly before and after a match are consulted.
"""

import logging
import re
from typing import FrozenSet, NamedTuple

from .patterns import DENIED_MENTIONS

logger = logging.getLogger('github_linkify')


class MatchContext(NamedTuple):
    """
    Where a candidate match sits.

    Attributes:
        full_input: The complete text being scanned
        offset: Index of the match in full_input
    """
    full_input: str
    offset: int

    def char_before(self) -> str:
        if self.offset <= 0:
            return ''
        return self.full_input[self.offset - 1]

    def char_after(self, length: int) -> str:
        # Empty string past the end
        return self.full_input[self.offset + length:self.offset + length + 1]


class MatchValidator:
    """
    Accepts or rejects mention and reference matches.
    """
    # Mentions cannot touch identifiers, code, or paths
    MENTION_BEFORE = re.compile(r'[\w`]', re.ASCII)
    MENTION_AFTER = re.compile(r'[/\w`]', re.ASCII)
    # References must start a token, or follow an opening bracket or '@'
    REFERENCE_BEFORE = re.compile(r'[^\t\n\r (@\[{]')
    WORD_CHAR = re.compile(r'\w', re.ASCII)

    def __init__(self, denied_mentions: FrozenSet[str] = DENIED_MENTIONS):
        self.denied_mentions = frozenset(denied_mentions)

    def is_valid_mention(self, value: str, username: str, context: MatchContext) -> bool:
        """
        Check a mention match.

        Args:
            value: The matched text, including '@'
            username: The captured user name
            context: Position of the match

        Returns:
            True if the match should be linked
        """
        if self.MENTION_BEFORE.match(context.char_before()):
            logger.debug("Mention %s rejected: preceded by %r", value, context.char_before())
            return False

        if self.MENTION_AFTER.match(context.char_after(len(value))):
            logger.debug("Mention %s rejected: followed by %r", value, context.char_after(len(value)))
            return False

        if username in self.denied_mentions:
            logger.debug("Mention %s rejected: reserved name", value)
            return False

        return True

    def is_valid_reference(self, value: str, context: MatchContext) -> bool:
        """
        Check an issue or commit reference match.

        Args:
            value: The matched text
            context: Position of the match

        Returns:
            True if the match should be linked
        """
        if self.REFERENCE_BEFORE.match(context.char_before()):
            logger.debug("Reference %s rejected: preceded by %r", value, context.char_before())
            return False

        if self.WORD_CHAR.match(context.char_after(len(value))):
            logger.debug("Reference %s rejected: followed by %r", value, context.char_after(len(value)))
            return False

        return True
