"""
Link GitHub references (mentions, issues, commits) inside markdown trees.
"""

from .config.linkify_config import LinkifyConfig
from .services.linkifier import GitHubLinkifier, linkify

__all__ = ['GitHubLinkifier', 'LinkifyConfig', 'linkify']
__version__ = '0.1.0'
