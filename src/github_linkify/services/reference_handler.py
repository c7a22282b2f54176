import re
import logging
from typing import Any, Dict, List, Optional

from ..core.nodes import InlineCodeNode, LinkNode, Node, TextNode
from .base_handler import BaseReferenceHandler
from .match_validator import MatchValidator
from .patterns import DEFAULT_PATTERNS, PatternLibrary, abbreviate
from .url_builder import CommitValue, IssueValue, UrlBuilder

logger = logging.getLogger('github_linkify')


class ReferenceHandler(BaseReferenceHandler):
    """
    Handler for ``user[/project]#N`` and ``user[/project]@sha`` references.

    The link text is only ``#N`` or ``@`` followed by the abbreviated hash
    as inline code; the user and project are not repeated.
    """
    LINK_TYPE = 'reference'

    def __init__(self, url_builder: UrlBuilder, validator: MatchValidator,
                 patterns: PatternLibrary = DEFAULT_PATTERNS, repository=None):
        self.PATTERN = patterns.reference
        super().__init__(url_builder, validator, priority=1)
        # RepositoryInfo whose project fills in references that name only a user
        self.repository = repository

    def handle(self, match: re.Match, context: Dict[str, Any]) -> Optional[List[Node]]:
        value = match.group(0)
        if not self.validator.is_valid_reference(value, self.match_context(match)):
            return None

        user, project, no, sha = match.group(1, 2, 3, 4)
        if not project and self.repository is not None:
            project = self.repository.project

        if no:
            url = self.url_builder.build(IssueValue(user=user, project=project, no=no))
        else:
            url = self.url_builder.build(CommitValue(user=user, project=project, hash=sha))

        if not url:
            self.record(context, value, value, reason='suppressed')
            return None

        if no:
            children: List[Node] = [TextNode('#' + no)]
        else:
            children = [TextNode('@'), InlineCodeNode(abbreviate(sha))]

        logger.debug("Reference %s linked to %s", value, url)
        self.record(context, value, url)
        return [LinkNode(url=url, title=None, children=children)]
