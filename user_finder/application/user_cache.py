"""In-memory cache of fetched users."""

import logging
from typing import Dict, List, Optional, Tuple

from user_finder.domain.repository import RepositorySummary
from user_finder.domain.user import UserRecord

logger = logging.getLogger(__name__)


class UserCache:
    """Mapping from lowercased username to the last fetched record."""

    def __init__(self):
        self._users: Dict[str, UserRecord] = {}

    def __len__(self) -> int:
        return len(self._users)

    def put(self, username: str, user: UserRecord):
        """Store a record, replacing any earlier fetch of the same username."""
        key = username.lower()
        if key in self._users:
            logger.info(f"Replacing cached user '{key}'")
        self._users[key] = user

    def get(self, username: str) -> Optional[UserRecord]:
        return self._users.get(username.lower())

    def users(self) -> List[UserRecord]:
        """Cached records in insertion order."""
        return list(self._users.values())

    def search_users(self, query: str) -> List[UserRecord]:
        """Records whose cache key contains the query, case-insensitively."""
        needle = query.strip().lower()
        return [user for key, user in self._users.items() if needle in key]

    def search_repositories(self, query: str) -> List[Tuple[UserRecord, RepositorySummary]]:
        """(owner, repository) pairs whose repository name contains the query."""
        needle = query.strip().lower()
        matches = []
        for user in self._users.values():
            for repo in user.repositories:
                if needle in repo.name.lower():
                    matches.append((user, repo))
        return matches
