"""Domain entities for GitHub users."""

from dataclasses import dataclass, replace
from typing import Iterable, List, Tuple

from user_finder.domain.repository import RepositorySummary


@dataclass(frozen=True)
class UserRecord:
    """Immutable user entity with the repositories fetched alongside it."""

    login: str = ""
    followers: int = 0
    following: int = 0
    created_at: str = ""
    repositories: Tuple[RepositorySummary, ...] = ()

    def with_repositories(self, repositories: Iterable[RepositorySummary]) -> "UserRecord":
        """Return a copy of this record with the given repositories attached."""
        return replace(self, repositories=tuple(repositories))

    def displayed_repositories(self) -> List[RepositorySummary]:
        """
        Repositories as shown to the operator.

        Entries with a blank name are hidden and the rest are sorted
        case-insensitively by name. The stored tuple keeps API order.
        """
        visible = [repo for repo in self.repositories if repo.name.strip()]
        return sorted(visible, key=lambda repo: repo.name.lower())
