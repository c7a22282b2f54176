"""
Generic tree utilities: visiting nodes by type and splicing pattern matches.
"""

import re
from typing import Callable, Iterable, List, Optional, Pattern, Sequence, Tuple

from .nodes import LINK_KINDS, Node, TextNode, is_parent


Visitor = Callable[[Node, List[Node]], None]
# Receives a match found in a text node; returns replacement nodes or None to keep the text
ReplaceFunction = Callable[[re.Match], Optional[List[Node]]]


def visit(tree: Node, node_type: str, visitor: Visitor) -> None:
    """
    Call visitor for every node of the given type, depth-first in document order.

    Args:
        tree: Node to start from (included in the walk)
        node_type: Node type to report
        visitor: Called with (node, ancestors)
    """
    stack: List[Tuple[Node, List[Node]]] = [(tree, [])]
    while stack:
        node, parents = stack.pop()
        if node.type == node_type:
            visitor(node, parents)
        if is_parent(node):
            ancestry = parents + [node]
            for child in reversed(node.children):
                stack.append((child, ancestry))


def find_and_replace(tree: Node, replacements: Sequence[Tuple[Pattern, ReplaceFunction]],
                     ignore: Iterable[str] = LINK_KINDS) -> Node:
    """
    Replace pattern matches in text nodes with new nodes.

    Each (pattern, replace) pair runs as its own pass over the whole tree, in
    order. Nodes produced by a pass are never re-scanned by that pass, and
    subtrees whose type is in ``ignore`` are never entered, so later passes
    skip anything an earlier pass turned into a link.

    Args:
        tree: Root of the tree; its children lists are replaced in place
        replacements: Ordered (pattern, replace) pairs
        ignore: Node types whose subtrees are left alone

    Returns:
        The same tree
    """
    ignored = frozenset(ignore)
    for pattern, replace in replacements:
        if tree.type in ignored or not is_parent(tree):
            break
        _replace_in_parent(tree, pattern, replace, ignored)
    return tree


def _replace_in_parent(parent: Node, pattern: Pattern, replace: ReplaceFunction,
                       ignored: frozenset) -> None:
    new_children: List[Node] = []
    for child in parent.children:
        if isinstance(child, TextNode):
            new_children.extend(split_text(child, pattern, replace))
            continue
        if child.type not in ignored and is_parent(child):
            _replace_in_parent(child, pattern, replace, ignored)
        new_children.append(child)
    parent.children = new_children


def split_text(node: TextNode, pattern: Pattern, replace: ReplaceFunction) -> List[Node]:
    """
    Split one text node around accepted matches.

    The matched text is the node's own value: replace functions see
    ``match.string`` and ``match.start()`` relative to this node only.

    Returns:
        The new sibling sequence; ``[node]`` when nothing was replaced
    """
    value = node.value
    nodes: List[Node] = []
    start = 0
    changed = False

    for match in pattern.finditer(value):
        replacement = replace(match)
        if replacement is None:
            continue

        if match.start() > start:
            nodes.append(TextNode(value[start:match.start()]))
        nodes.extend(replacement)
        start = match.end()
        changed = True

    if not changed:
        return [node]

    if start < len(value):
        nodes.append(TextNode(value[start:]))
    return nodes
