"""Domain entities for GitHub repositories."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class RepositorySummary:
    """Immutable repository entity as listed for a user."""

    name: str
    description: Optional[str] = None
    language: Optional[str] = None
    stars: int = 0
    forks: int = 0
