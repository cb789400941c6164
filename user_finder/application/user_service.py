"""Application service for fetching GitHub users with their repositories."""

import logging
from dataclasses import dataclass
from typing import Optional

import requests

from user_finder.application.user_cache import UserCache
from user_finder.domain.mapper import TextResponseMapper
from user_finder.domain.user import UserRecord
from user_finder.infrastructure.github_client import GitHubApiError, GitHubRestClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FetchResult:
    """Outcome of a fetch: a user on success, an error message otherwise."""

    user: Optional[UserRecord] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.user is not None


class UserService:
    """Service for fetching users and keeping them in the session cache."""

    EMPTY_USERNAME_MESSAGE = "Username cannot be empty!"

    def __init__(self, github_client: GitHubRestClient, mapper=None):
        """
        Initialize user service.

        Args:
            github_client: GitHub API client
            mapper: Response mapper; defaults to the substring extractor mapper
        """
        self.github_client = github_client
        self.mapper = mapper if mapper is not None else TextResponseMapper()

    def fetch_full_user(self, username: str) -> FetchResult:
        """
        Fetch a user and their repositories.

        Both requests must succeed; a failure on either one fails the
        whole fetch and no partial record is returned.

        Args:
            username: GitHub login to fetch

        Returns:
            FetchResult with the composed record or an error message
        """
        try:
            user_json = self.github_client.get_user(username)
            repos_json = self.github_client.get_user_repositories(username)
        except GitHubApiError as e:
            logger.error(f"Fetching '{username}' failed: {e}")
            return FetchResult(error=str(e))
        except requests.RequestException as e:
            logger.error(f"Fetching '{username}' failed: {e}")
            return FetchResult(error=f"Connection error: {e}")

        user = self.mapper.map_user(user_json)
        repositories = self.mapper.map_repositories(repos_json)
        logger.info(f"Fetched '{username}' with {len(repositories)} repositories")

        return FetchResult(user=user.with_repositories(repositories))

    def lookup(self, username: str, cache: UserCache) -> FetchResult:
        """
        Fetch a user and store the result in the cache.

        Args:
            username: Username as typed by the operator
            cache: Session cache to update on success

        Returns:
            FetchResult; the cache is untouched unless it succeeded
        """
        username = username.strip()
        if not username:
            return FetchResult(error=self.EMPTY_USERNAME_MESSAGE)

        result = self.fetch_full_user(username)
        if result.ok:
            cache.put(username, result.user)
        return result
