"""Console rendering of users and repositories."""

from typing import List, Tuple

from user_finder.domain.repository import RepositorySummary
from user_finder.domain.user import UserRecord


def format_user(user: UserRecord) -> str:
    """Render a user with the repositories shown to the operator."""
    lines = [
        "",
        f"User: {user.login}",
        f"Followers: {user.followers}",
        f"Following: {user.following}",
        f"Created: {user.created_at}",
    ]

    repositories = user.displayed_repositories()
    lines.append("")
    lines.append(f"Repositories ({len(repositories)}):")
    for i, repo in enumerate(repositories, start=1):
        lines.append(f"{i}. {repo.name} ({repo.language if repo.language is not None else 'No language'})")

    return "\n".join(lines)


def format_cached_users(users: List[UserRecord]) -> str:
    """Render the numbered list of cached users."""
    if not users:
        return "No users in cache"

    lines = ["", "Cached users:"]
    for i, user in enumerate(users, start=1):
        lines.append(f"{i}. {user.login} ({user.followers} followers)")
    return "\n".join(lines)


def format_repository_match(match: Tuple[UserRecord, RepositorySummary]) -> str:
    """Render one repository search hit with its owner."""
    user, repo = match
    return "\n".join([
        "",
        f"Repository: {repo.name}",
        f"Owner: {user.login}",
        f"Language: {repo.language if repo.language is not None else 'Unknown'}",
        f"Stars: {repo.stars}, Forks: {repo.forks}",
    ])
