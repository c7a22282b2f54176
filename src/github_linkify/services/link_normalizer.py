"""
Relabel bare links to GitHub commits, comparisons, issues and pull requests.

A link whose only child is text equal to its URL (an autolink such as
``<https://github.com/user/project/commit/abcdef1234>``) gets a compact
label: ``user@`abcdef1``` for commits and comparisons, ``user#1`` for
issues and pull requests. Links with a custom label are left alone.
"""

import re
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from ..core.nodes import InlineCodeNode, LinkNode, Node, TextNode
from ..core.tree import visit
from .patterns import DEFAULT_PATTERNS, PatternLibrary, abbreviate

logger = logging.getLogger('github_linkify')

# Commit hashes are 4 to 40 characters. Matched case-sensitively.
COMPARE_PAYLOAD_PATTERN = re.compile(r'^[a-f\d]{4,40}\.{3}[a-f\d]{4,40}\Z')
# Issue and pull request numbers are decimal only
HEX_LETTER_PATTERN = re.compile(r'[a-f]', re.IGNORECASE)
MAX_PROJECT_LENGTH = 99

COMMENT_SUFFIX = ' (comment)'


@dataclass
class ParsedLink:
    """
    A GitHub URL recognized by the link pattern.

    Attributes:
        user: Repository owner
        project: Repository name
        page: One of 'commit', 'compare', 'issues', 'pull'
        reference: Abbreviated hash, abbreviated ``base...head``, or number
        has_comment_suffix: True if the URL ends in a non-empty '#' anchor
    """
    user: str
    project: str
    page: str
    reference: str
    has_comment_suffix: bool = False


def is_bare_autolink(node: LinkNode) -> bool:
    """Return True if the link's only child is text equal to its URL."""
    return (
        len(node.children) == 1
        and isinstance(node.children[0], TextNode)
        and node.children[0].value == node.url
    )


def parse_link(node: LinkNode, patterns: PatternLibrary = DEFAULT_PATTERNS) -> Optional[ParsedLink]:
    """
    Parse a link node that points at a GitHub commit, comparison, issue or pull request.

    Args:
        node: Link to inspect
        patterns: Pattern library holding the link pattern

    Returns:
        ParsedLink, or None if the link is not a bare GitHub autolink or fails validation
    """
    url = node.url or ''
    match = patterns.link.match(url)

    if not match:
        return None

    if not is_bare_autolink(node):
        logger.debug("Link to %s has a custom label, leaving it", url)
        return None

    user, project, page, payload = match.group(1, 2, 3, 4)
    page_kind = page.lower()

    if page_kind == 'commit' and not 4 <= len(payload) <= 40:
        logger.debug("Commit hash length out of range in %s", url)
        return None

    if page_kind == 'compare' and not COMPARE_PAYLOAD_PATTERN.match(payload):
        logger.debug("Malformed compare range in %s", url)
        return None

    if page_kind in ('issues', 'pull') and HEX_LETTER_PATTERN.search(payload):
        logger.debug("Non-decimal issue number in %s", url)
        return None

    if len(project) > MAX_PROJECT_LENGTH:
        logger.debug("Project name too long in %s", url)
        return None

    if page_kind == 'compare':
        base, compare = payload.split('...')
        reference = abbreviate(base) + '...' + abbreviate(compare)
    else:
        reference = abbreviate(payload)

    end = match.end()
    has_comment_suffix = url[end:end + 1] == '#' and end + 1 < len(url)

    return ParsedLink(
        user=user,
        project=project,
        page=page_kind,
        reference=reference,
        has_comment_suffix=has_comment_suffix
    )


def build_display(link: ParsedLink) -> List[Node]:
    """Build the compact label for a parsed link."""
    comment = COMMENT_SUFFIX if link.has_comment_suffix else ''

    if link.page in ('issues', 'pull'):
        return [TextNode(link.user + '#' + link.reference + comment)]

    children: List[Node] = [TextNode(link.user + '@'), InlineCodeNode(link.reference)]
    if comment:
        children.append(TextNode(comment))
    return children


class LinkNormalizer:
    """
    Visits every link in a tree and relabels bare GitHub autolinks.
    """

    def __init__(self, patterns: PatternLibrary = DEFAULT_PATTERNS):
        self.patterns = patterns

    def normalize(self, tree: Node, context: Optional[Dict[str, Any]] = None) -> Node:
        """
        Relabel bare GitHub autolinks in place.

        Args:
            tree: Root node
            context: Optional per-transform context; may hold a 'link_details' list

        Returns:
            The same tree
        """
        context = context if context is not None else {}

        def relabel(node: LinkNode, parents: List[Node]) -> None:
            link = parse_link(node, self.patterns)
            if link is None:
                return

            node.children = build_display(link)
            logger.debug("Relabeled link %s", node.url)

            if 'link_details' in context:
                context['link_details'].append({
                    'original': node.url,
                    'rewritten': node.url,
                    'type': 'autolink',
                    'reason': 'relabeled'
                })

        visit(tree, 'link', relabel)
        return tree
