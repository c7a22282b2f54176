"""
Configuration for the GitHub linkifier.

All options are optional. Malformed values are logged and replaced by their
defaults; only the loaders raise, and only for unreadable sources.
"""

import os
import re
import json
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv

from ..exceptions import ConfigurationError, ValidationError
from ..services.patterns import PROJECT_GROUP, USER_GROUP
from ..services.url_builder import UrlBuildStrategy, coerce_strategy

logger = logging.getLogger('github_linkify')

REPOSITORY_PATTERN = re.compile(
    r'^(?:(?:git\+)?https?://github\.com/|git://github\.com/|git@github\.com:|github:)?'
    '(' + USER_GROUP + ')/(' + PROJECT_GROUP + r')(?:\.git)?/?\Z',
    re.IGNORECASE | re.ASCII
)

ENV_REPOSITORY = 'GITHUB_LINKIFY_REPOSITORY'
ENV_ACTIONS_REPOSITORY = 'GITHUB_REPOSITORY'
ENV_MENTION_STRONG = 'GITHUB_LINKIFY_MENTION_STRONG'

FALSE_STRINGS = ('0', 'false', 'no', 'off')


@dataclass(frozen=True)
class RepositoryInfo:
    """
    Owner and name of a GitHub repository.

    Attributes:
        user: User or organization name
        project: Repository name
    """
    user: str
    project: str

    @classmethod
    def parse(cls, value: str) -> Optional['RepositoryInfo']:
        """
        Parse ``user/project`` or a GitHub repository URL.

        Returns:
            RepositoryInfo, or None if the value is not a GitHub repository
        """
        if not isinstance(value, str):
            return None

        match = REPOSITORY_PATTERN.match(value.strip())
        if not match:
            return None

        user, project = match.group(1, 2)
        return cls(user=user, project=project)

    def __str__(self) -> str:
        return f"{self.user}/{self.project}"


class LinkifyConfig:
    """
    Options for linking GitHub references.

    Options:
        repository: ``user/project`` whose project is used for references that
            name only a user (``user@sha``, ``user#1``)
        mention_strong: Wrap mention text in strong (default True; only an
            explicit False disables it)
        build_url: A UrlBuildStrategy, or a function ``(value, default_build)``
            returning a URL string or False to leave the reference unlinked
    """

    def __init__(self, config_dict: Optional[Dict] = None):
        """
        Initialize linkifier configuration.

        Args:
            config_dict: Option dictionary. camelCase keys (``mentionStrong``,
                ``buildUrl``) are accepted as aliases.
        """
        config = config_dict or {}

        self.repository = self._parse_repository(config.get('repository'))
        self.mention_strong = self._option(config, 'mention_strong', 'mentionStrong', True) is not False
        self.build_url = self._parse_build_url(self._option(config, 'build_url', 'buildUrl', None))

    @staticmethod
    def _option(config: Dict, name: str, alias: str, default: Any) -> Any:
        if name in config:
            return config[name]
        return config.get(alias, default)

    @staticmethod
    def _parse_repository(value) -> Optional[RepositoryInfo]:
        if value is None or value == '':
            return None

        if isinstance(value, RepositoryInfo):
            return value

        repository = RepositoryInfo.parse(value)
        if repository is None:
            logger.warning("Ignoring invalid repository option: %r", value)
        return repository

    @staticmethod
    def _parse_build_url(value) -> Optional[UrlBuildStrategy]:
        if value is None:
            return None

        strategy = coerce_strategy(value)
        if strategy is None:
            logger.warning("Ignoring build_url option of type %s, expected a callable",
                           type(value).__name__)
        return strategy

    def to_dict(self) -> Dict[str, Any]:
        """Return the JSON-representable options."""
        return {
            'repository': str(self.repository) if self.repository else None,
            'mention_strong': self.mention_strong
        }


class ConfigLoader:
    """
    Loads linkifier configuration from JSON files and the environment.
    """

    @staticmethod
    def load_from_dict(data: Dict[str, Any]) -> LinkifyConfig:
        """
        Load configuration from a dictionary.

        Raises:
            ValidationError: If data is not a dictionary
        """
        if not isinstance(data, dict):
            raise ValidationError(f"Configuration must be an object, got {type(data).__name__}")
        return LinkifyConfig(data)

    @staticmethod
    def load_from_file(config_path: str) -> LinkifyConfig:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration JSON file

        Returns:
            LinkifyConfig

        Raises:
            ConfigurationError: If the file is missing, unreadable or not valid JSON
            ValidationError: If the JSON document is not an object
        """
        config_path = Path(config_path)

        if not config_path.exists():
            raise ConfigurationError(f"Configuration file not found: {config_path}")

        if not config_path.is_file():
            raise ConfigurationError(f"Configuration path is not a file: {config_path}")

        try:
            with open(config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file: {e}")
        except PermissionError:
            raise ConfigurationError(f"Permission denied reading configuration file: {config_path}")
        except UnicodeDecodeError as e:
            raise ConfigurationError(f"Configuration file encoding error: {e}")

        logger.debug("Loaded configuration from %s", config_path)
        return ConfigLoader.load_from_dict(data)

    @staticmethod
    def load_from_env(dotenv_path: Optional[str] = None) -> LinkifyConfig:
        """
        Load configuration from environment variables (and a .env file if present).

        ``GITHUB_LINKIFY_REPOSITORY`` sets the repository, falling back to
        ``GITHUB_REPOSITORY`` as set by GitHub Actions.
        ``GITHUB_LINKIFY_MENTION_STRONG=false`` disables strong mentions.
        """
        load_dotenv(dotenv_path)

        data: Dict[str, Any] = {}

        repository = os.environ.get(ENV_REPOSITORY) or os.environ.get(ENV_ACTIONS_REPOSITORY)
        if repository:
            data['repository'] = repository

        mention_strong = os.environ.get(ENV_MENTION_STRONG)
        if mention_strong is not None and mention_strong.strip().lower() in FALSE_STRINGS:
            data['mention_strong'] = False

        return LinkifyConfig(data)

    @staticmethod
    def save_to_file(config: LinkifyConfig, config_path: str) -> None:
        """
        Save the JSON-representable options to a file.

        Raises:
            ConfigurationError: If the file cannot be written
        """
        config_path = Path(config_path)

        try:
            with open(config_path, 'w', encoding='utf-8') as f:
                json.dump(config.to_dict(), f, indent=2, ensure_ascii=False)
        except PermissionError:
            raise ConfigurationError(f"Permission denied writing configuration file: {config_path}")
        except OSError as e:
            raise ConfigurationError(f"Error writing configuration file: {e}")
