"""
Node model for the markdown syntax tree.

The tree is a closed set of variants. Only the inline kinds the linkifier
reads or writes get their own class; every other kind (root, paragraph,
emphasis, heading, ...) is an OtherNode that carries its payload opaquely.
"""

from dataclasses import dataclass, field
from typing import Any, ClassVar, Dict, List, Optional, Union


@dataclass
class TextNode:
    value: str
    type: ClassVar[str] = 'text'


@dataclass
class InlineCodeNode:
    value: str
    type: ClassVar[str] = 'inlineCode'


@dataclass
class StrongNode:
    children: List['Node'] = field(default_factory=list)
    type: ClassVar[str] = 'strong'


@dataclass
class LinkNode:
    """
    A direct link.

    Attributes:
        url: Link destination
        title: Optional link title (links created by the linkifier have none)
        children: Display content
    """
    url: str
    title: Optional[str] = None
    children: List['Node'] = field(default_factory=list)
    type: ClassVar[str] = 'link'


@dataclass
class LinkReferenceNode:
    """A reference-style link (``[text][label]``); its payload is kept as parsed."""
    children: List['Node'] = field(default_factory=list)
    payload: Dict[str, Any] = field(default_factory=dict)
    type: ClassVar[str] = 'linkReference'


@dataclass
class OtherNode:
    """
    Any node kind the linkifier does not interpret.

    Attributes:
        kind: Node kind as reported by the parser (e.g. 'root', 'paragraph')
        children: Child nodes, or None for leaf kinds
        payload: Remaining parser fields, passed through untouched
    """
    kind: str
    children: Optional[List['Node']] = None
    payload: Dict[str, Any] = field(default_factory=dict)

    @property
    def type(self) -> str:
        return self.kind


Node = Union[TextNode, InlineCodeNode, StrongNode, LinkNode, LinkReferenceNode, OtherNode]

# Kinds whose subtrees already point somewhere
LINK_KINDS = ('link', 'linkReference')


def is_parent(node: Node) -> bool:
    """Return True if the node can hold children."""
    return getattr(node, 'children', None) is not None


def root(*children: Node) -> OtherNode:
    """Create a root node holding the given children."""
    return OtherNode(kind='root', children=list(children))


def paragraph(*children: Node) -> OtherNode:
    """Create a paragraph node holding the given children."""
    return OtherNode(kind='paragraph', children=list(children))


def to_string(node: Node) -> str:
    """Concatenate the text content of a node and its descendants."""
    value = getattr(node, 'value', None)
    if isinstance(value, str):
        return value
    if is_parent(node):
        return ''.join(to_string(child) for child in node.children)
    return ''
