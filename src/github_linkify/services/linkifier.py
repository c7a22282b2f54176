import logging
from typing import Any, Dict, List, Optional

from ..config.linkify_config import LinkifyConfig
from ..core.nodes import Node
from .base_handler import BaseReferenceHandler
from .link_normalizer import LinkNormalizer
from .match_validator import MatchValidator
from .mention_handler import MentionHandler
from .patterns import DEFAULT_PATTERNS, DENIED_MENTIONS, PatternLibrary
from .reference_handler import ReferenceHandler
from .text_scanner import TextScanner
from .url_builder import UrlBuilder

logger = logging.getLogger('github_linkify')


class GitHubLinkifier:
    """
    Links GitHub references in a markdown tree.

    Runs two passes over each tree:

    1. Text scan: ``user/project#N`` and ``user/project@sha`` references,
       then ``@user`` mentions, become links.
    2. Link normalization: bare links to GitHub commits, comparisons, issues
       and pull requests get a compact label.

    The tree is modified in place. Link details and counts for the most
    recent transform are kept on the instance for reporting.
    """

    def __init__(self, config: Optional[LinkifyConfig] = None,
                 patterns: PatternLibrary = DEFAULT_PATTERNS):
        self.config = config or LinkifyConfig()
        self.patterns = patterns

        url_builder = UrlBuilder(self.config.build_url)
        validator = MatchValidator(DENIED_MENTIONS)

        handlers: List[BaseReferenceHandler] = [
            MentionHandler(url_builder, validator, patterns, mention_strong=self.config.mention_strong),
            ReferenceHandler(url_builder, validator, patterns, repository=self.config.repository),
        ]
        self.scanner = TextScanner(handlers)
        self.normalizer = LinkNormalizer(patterns)

        self.link_details: List[Dict[str, Any]] = []
        self.references_linked = 0
        self.mentions_linked = 0
        self.links_normalized = 0

    def transform(self, tree: Node) -> Node:
        """
        Link references and relabel GitHub autolinks.

        Args:
            tree: Root of the markdown tree

        Returns:
            The same tree, modified in place
        """
        self.link_details = []
        context = {'link_details': self.link_details}

        self.scanner.scan(tree, context)
        self.normalizer.normalize(tree, context)

        linked = [d for d in self.link_details if d['reason'] != 'suppressed']
        self.references_linked = sum(1 for d in linked if d['type'] == 'reference')
        self.mentions_linked = sum(1 for d in linked if d['type'] == 'mention')
        self.links_normalized = sum(1 for d in linked if d['type'] == 'autolink')

        logger.info("References linked: %d, mentions linked: %d, links relabeled: %d",
                    self.references_linked, self.mentions_linked, self.links_normalized)
        return tree

    __call__ = transform


def linkify(tree: Node, config: Optional[LinkifyConfig] = None) -> Node:
    """Link GitHub references in a tree with the given (or default) configuration."""
    return GitHubLinkifier(config).transform(tree)
