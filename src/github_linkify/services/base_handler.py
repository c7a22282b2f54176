import re
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional, Pattern

from ..core.nodes import Node
from .match_validator import MatchContext, MatchValidator
from .url_builder import UrlBuilder

logger = logging.getLogger('github_linkify')


class BaseReferenceHandler(ABC):
    """
    Base class for handlers that turn pattern matches in text into links.

    Handlers run in priority order (lowest first). Each one owns a pattern;
    the text scanner feeds it every match and splices in whatever nodes
    ``handle`` returns.
    """
    PATTERN: Optional[Pattern] = None
    LINK_TYPE = 'reference'

    def __init__(self, url_builder: UrlBuilder, validator: MatchValidator, priority: int = 10):
        self.url_builder = url_builder
        self.validator = validator
        self.priority = priority

    def get_priority(self) -> int:
        return self.priority

    def can_handle(self, text: str) -> bool:
        """Return True if the text contains at least one candidate match."""
        return bool(self.PATTERN and self.PATTERN.search(text))

    @abstractmethod
    def handle(self, match: re.Match, context: Dict[str, Any]) -> Optional[List[Node]]:
        """
        Build replacement nodes for a match.

        Args:
            match: Pattern match inside a single text node
            context: Per-transform context; may hold a 'link_details' list

        Returns:
            Replacement nodes, or None to leave the text as it is
        """

    @staticmethod
    def match_context(match: re.Match) -> MatchContext:
        return MatchContext(full_input=match.string, offset=match.start())

    def record(self, context: Dict[str, Any], original: str, url: str, reason: str = 'linked') -> None:
        """Append a link detail entry if the caller asked for them."""
        if 'link_details' in context:
            context['link_details'].append({
                'original': original,
                'rewritten': url,
                'type': self.LINK_TYPE,
                'reason': reason
            })
