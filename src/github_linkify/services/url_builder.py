"""
Build GitHub URLs for recognized references.

A reference is described by one of the value types below. The default
builder turns it into a github.com URL; callers can override this with a
strategy that receives the value and the default builder, and returns a
URL, delegates to the default, or returns False to leave the text unlinked.
"""

import logging
from dataclasses import dataclass
from typing import Callable, ClassVar, Optional, Union

logger = logging.getLogger('github_linkify')

GITHUB_BASE_URL = 'https://github.com'


@dataclass(frozen=True)
class MentionValue:
    user: str
    type: ClassVar[str] = 'mention'


@dataclass(frozen=True)
class CommitValue:
    user: str
    project: Optional[str]
    hash: str
    type: ClassVar[str] = 'commit'


@dataclass(frozen=True)
class CompareValue:
    user: str
    project: Optional[str]
    base: str
    compare: str
    type: ClassVar[str] = 'compare'


@dataclass(frozen=True)
class IssueValue:
    user: str
    project: Optional[str]
    no: str
    type: ClassVar[str] = 'issue'


ReferenceValue = Union[MentionValue, CommitValue, CompareValue, IssueValue]
BuildResult = Union[str, bool, None]
DefaultBuild = Callable[[ReferenceValue], BuildResult]
BuildUrlFunction = Callable[[ReferenceValue, DefaultBuild], BuildResult]


def default_build_url(value: ReferenceValue) -> BuildResult:
    """
    Build the github.com URL for a reference.

    Args:
        value: Reference to link

    Returns:
        The URL, or False for a repository reference without a project
    """
    if isinstance(value, MentionValue):
        return '/'.join([GITHUB_BASE_URL, value.user])

    if not value.project:
        logger.debug("No project for %s reference by %s, not linking", value.type, value.user)
        return False

    if isinstance(value, CommitValue):
        return '/'.join([GITHUB_BASE_URL, value.user, value.project, 'commit', value.hash])

    if isinstance(value, IssueValue):
        return '/'.join([GITHUB_BASE_URL, value.user, value.project, 'issues', value.no])

    return '/'.join([
        GITHUB_BASE_URL, value.user, value.project, 'compare',
        value.base + '...' + value.compare
    ])


class UrlBuildStrategy:
    """Strategy that always delegates to the default builder."""

    def build(self, value: ReferenceValue, default_build: DefaultBuild) -> BuildResult:
        return default_build(value)


class CallableUrlBuildStrategy(UrlBuildStrategy):
    """Adapts a ``(value, default_build)`` function to the strategy interface."""

    def __init__(self, func: BuildUrlFunction):
        self.func = func

    def build(self, value: ReferenceValue, default_build: DefaultBuild) -> BuildResult:
        return self.func(value, default_build)


def coerce_strategy(build_url) -> Optional[UrlBuildStrategy]:
    """
    Turn a configured ``build_url`` option into a strategy.

    Returns:
        A strategy, or None if the option is neither a strategy nor callable
    """
    if isinstance(build_url, UrlBuildStrategy):
        return build_url
    if callable(build_url):
        return CallableUrlBuildStrategy(build_url)
    return None


class UrlBuilder:
    """
    Resolves references to URLs through the configured strategy.
    """

    def __init__(self, strategy: Optional[UrlBuildStrategy] = None):
        self.strategy = strategy or UrlBuildStrategy()

    def build(self, value: ReferenceValue) -> Optional[str]:
        """
        Build the URL for a reference.

        Returns:
            The URL, or None if linking is suppressed for this reference
        """
        result = self.strategy.build(value, default_build_url)

        if result is False or result is None or result == '':
            logger.debug("Linking suppressed for %s", value)
            return None

        if not isinstance(result, str):
            logger.warning("URL builder returned %s for %s, expected a string or False",
                           type(result).__name__, value)
            return None

        return result
