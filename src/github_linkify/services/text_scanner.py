import logging
from functools import partial
from typing import Any, Dict, List, Optional

from ..core.nodes import LINK_KINDS, Node
from ..core.tree import find_and_replace
from .base_handler import BaseReferenceHandler

logger = logging.getLogger('github_linkify')


class TextScanner:
    """
    Links references found in the text nodes of a tree.

    Handlers run as separate passes in priority order, so references are
    linked before mentions. Existing links, and links created by an earlier
    pass, are never scanned.
    """

    def __init__(self, handlers: List[BaseReferenceHandler]):
        # Sort once at initialization
        self.handlers = sorted(handlers, key=lambda h: h.get_priority())
        logger.debug("TextScanner initialized with %d handlers", len(self.handlers))

    def scan(self, tree: Node, context: Optional[Dict[str, Any]] = None) -> Node:
        """
        Replace references in the tree's text with links.

        Args:
            tree: Root node; modified in place
            context: Optional per-transform context passed to every handler

        Returns:
            The same tree
        """
        context = context if context is not None else {}
        replacements = [
            (handler.PATTERN, partial(handler.handle, context=context))
            for handler in self.handlers
            if handler.PATTERN is not None
        ]
        return find_and_replace(tree, replacements, ignore=LINK_KINDS)
