"""
Shared pytest fixtures for github_linkify tests.

Provides default linkifier components.
"""

import pytest

from github_linkify.config.linkify_config import LinkifyConfig, RepositoryInfo
from github_linkify.services.linkifier import GitHubLinkifier
from github_linkify.services.match_validator import MatchValidator
from github_linkify.services.url_builder import UrlBuilder


@pytest.fixture
def url_builder():
    """UrlBuilder with the default strategy."""
    return UrlBuilder()


@pytest.fixture
def validator():
    """MatchValidator with the default denylist."""
    return MatchValidator()


@pytest.fixture
def repository():
    """Repository used as fallback project."""
    return RepositoryInfo(user='wooorm', project='remark-github')


@pytest.fixture
def linkifier():
    """GitHubLinkifier with default configuration."""
    return GitHubLinkifier(LinkifyConfig())


@pytest.fixture
def context():
    """Transform context collecting link details."""
    return {'link_details': []}
