"""GitHub REST API client returning raw response bodies."""

import logging
from typing import Optional
from urllib.parse import quote

import requests

logger = logging.getLogger(__name__)


class GitHubApiError(Exception):
    """Raised when the GitHub API answers with a status other than 200."""

    def __init__(self, status_code: int, reason: str):
        self.status_code = status_code
        self.reason = reason
        super().__init__(f"API error: {status_code} {reason}")


class GitHubRestClient:
    """Client for the GitHub REST user endpoints."""

    DEFAULT_BASE_URL = "https://api.github.com"
    ACCEPT_HEADER = "application/vnd.github.v3+json"
    USER_AGENT = "github-user-finder"
    DEFAULT_TIMEOUT_SECONDS = 10

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        """
        Initialize GitHub REST client.

        Args:
            base_url: API root. If None, uses the public GitHub API.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = (base_url or self.DEFAULT_BASE_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else self.DEFAULT_TIMEOUT_SECONDS
        self.headers = {
            "Accept": self.ACCEPT_HEADER,
            "User-Agent": self.USER_AGENT,
        }

    def _get(self, path: str) -> str:
        """
        Issue a GET request and return the body text.

        Raises:
            GitHubApiError: If the response status is not 200
            requests.RequestException: If the request itself fails
        """
        url = f"{self.base_url}{path}"
        logger.info(f"GET {url}")
        response = requests.get(url, headers=self.headers, timeout=self.timeout)

        if response.status_code != 200:
            logger.warning(f"GET {url} returned {response.status_code} {response.reason}")
            raise GitHubApiError(response.status_code, response.reason or "")

        return response.text

    def get_user(self, username: str) -> str:
        """Fetch the raw user payload."""
        return self._get(f"/users/{quote(username, safe='')}")

    def get_user_repositories(self, username: str) -> str:
        """Fetch the raw repository list payload (first page only)."""
        return self._get(f"/users/{quote(username, safe='')}/repos")
