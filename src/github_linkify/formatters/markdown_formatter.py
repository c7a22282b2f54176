"""
Markdown text adapter for the linkifier.

Parses markdown with mistune into its AST, converts the tokens to the
linkifier's node model, runs the linkifier, and renders the result back to
markdown with mistune's MarkdownRenderer.
"""

import logging
from typing import Any, Dict, List, Optional, Tuple

import mistune
from mistune.core import BlockState
from mistune.renderers.markdown import MarkdownRenderer

from ..core.nodes import (
    InlineCodeNode, LinkNode, LinkReferenceNode, Node, OtherNode, StrongNode, TextNode, is_parent
)
from ..services.linkifier import GitHubLinkifier

logger = logging.getLogger('github_linkify')

# Token kinds whose children are not document text (image alt text)
OPAQUE_KINDS = ('image',)


def tokens_to_tree(tokens: List[Dict[str, Any]]) -> OtherNode:
    """Convert mistune AST tokens into a root node."""
    return OtherNode(kind='root', children=[_token_to_node(token) for token in tokens])


def _token_to_node(token: Dict[str, Any]) -> Node:
    kind = token['type']

    if kind == 'text':
        return TextNode(token.get('raw', ''))

    if kind == 'codespan':
        return InlineCodeNode(token.get('raw', ''))

    if kind == 'strong':
        return StrongNode(children=_convert_children(token))

    if kind == 'link':
        if 'label' in token or 'ref' in token:
            payload = {k: v for k, v in token.items() if k not in ('type', 'children')}
            return LinkReferenceNode(children=_convert_children(token), payload=payload)

        attrs = token.get('attrs', {})
        return LinkNode(url=attrs.get('url', ''), title=attrs.get('title'),
                        children=_convert_children(token))

    if 'children' in token and kind not in OPAQUE_KINDS:
        payload = {k: v for k, v in token.items() if k not in ('type', 'children')}
        return OtherNode(kind=kind, children=_convert_children(token), payload=payload)

    payload = {k: v for k, v in token.items() if k != 'type'}
    return OtherNode(kind=kind, children=None, payload=payload)


def _convert_children(token: Dict[str, Any]) -> List[Node]:
    return [_token_to_node(child) for child in token.get('children', [])]


def tree_to_tokens(root: Node) -> List[Dict[str, Any]]:
    """Convert a root node back into mistune AST tokens."""
    return [_node_to_token(child) for child in root.children]


def _node_to_token(node: Node) -> Dict[str, Any]:
    if isinstance(node, TextNode):
        return {'type': 'text', 'raw': node.value}

    if isinstance(node, InlineCodeNode):
        return {'type': 'codespan', 'raw': node.value}

    if isinstance(node, StrongNode):
        return {'type': 'strong', 'children': [_node_to_token(c) for c in node.children]}

    if isinstance(node, LinkNode):
        attrs = {'url': node.url}
        if node.title:
            attrs['title'] = node.title
        return {'type': 'link', 'children': [_node_to_token(c) for c in node.children], 'attrs': attrs}

    if isinstance(node, LinkReferenceNode):
        token = {'type': 'link', 'children': [_node_to_token(c) for c in node.children]}
        token.update(node.payload)
        return token

    token = {'type': node.kind}
    token.update(node.payload)
    if is_parent(node):
        token['children'] = [_node_to_token(c) for c in node.children]
    return token


class MarkdownFormatter:
    """
    Links GitHub references in markdown text.
    """

    def __init__(self, linkifier: Optional[GitHubLinkifier] = None):
        self.linkifier = linkifier or GitHubLinkifier()
        # Only plugins that produce core token types, so MarkdownRenderer can render them
        self.markdown = mistune.create_markdown(renderer=None, plugins=['url'])
        self.renderer = MarkdownRenderer()

    def parse(self, text: str) -> Tuple[OtherNode, BlockState]:
        """
        Parse markdown into a node tree.

        Returns:
            Tuple of (root node, parser state needed for rendering)
        """
        tokens, state = self.markdown.parse(text)
        return tokens_to_tree(tokens), state

    def render(self, tree: Node, state: BlockState) -> str:
        """Render a node tree back to markdown."""
        return self.renderer(tree_to_tokens(tree), state)

    def format(self, text: str) -> str:
        """
        Link GitHub references in markdown text.

        Args:
            text: Markdown source

        Returns:
            Markdown with references linked
        """
        if not text:
            logger.debug("Empty text provided to format, returning as is")
            return text

        tree, state = self.parse(text)
        self.linkifier.transform(tree)
        return self.render(tree, state)
