"""
Helpers for building small markdown trees in tests.
"""

from github_linkify.core.nodes import LinkNode, TextNode, paragraph, root


def make_tree(*children):
    """Wrap inline nodes (or strings) in root > paragraph."""
    nodes = [TextNode(c) if isinstance(c, str) else c for c in children]
    return root(paragraph(*nodes))


def inline(tree):
    """Return the inline children of the first paragraph."""
    return tree.children[0].children


def autolink(url):
    """Create a bare autolink whose text equals its URL."""
    return LinkNode(url=url, title=None, children=[TextNode(url)])
