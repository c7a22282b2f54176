import re
import logging
from typing import Any, Dict, List, Optional

from ..core.nodes import LinkNode, Node, StrongNode, TextNode
from .base_handler import BaseReferenceHandler
from .match_validator import MatchValidator
from .patterns import DEFAULT_PATTERNS, PatternLibrary
from .url_builder import MentionValue, UrlBuilder

logger = logging.getLogger('github_linkify')


class MentionHandler(BaseReferenceHandler):
    """
    Handler for ``@user`` and ``@org/team`` mentions.
    """
    LINK_TYPE = 'mention'

    def __init__(self, url_builder: UrlBuilder, validator: MatchValidator,
                 patterns: PatternLibrary = DEFAULT_PATTERNS, mention_strong: bool = True):
        self.PATTERN = patterns.mention
        super().__init__(url_builder, validator, priority=2)
        self.mention_strong = mention_strong

    def handle(self, match: re.Match, context: Dict[str, Any]) -> Optional[List[Node]]:
        value = match.group(0)
        username = match.group(1)

        if not self.validator.is_valid_mention(value, username, self.match_context(match)):
            return None

        url = self.url_builder.build(MentionValue(user=username))
        if not url:
            self.record(context, value, value, reason='suppressed')
            return None

        node: Node = TextNode(value)
        if self.mention_strong:
            node = StrongNode(children=[node])

        logger.debug("Mention %s linked to %s", value, url)
        self.record(context, value, url)
        return [LinkNode(url=url, title=None, children=[node])]
