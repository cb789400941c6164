"""Mapping of GitHub REST response bodies to domain entities."""

import json
import logging
from typing import Any, Dict, List, Optional

from user_finder.domain.field_extractor import extract_scalar, to_int, to_optional
from user_finder.domain.repository import RepositorySummary
from user_finder.domain.user import UserRecord

logger = logging.getLogger(__name__)


class TextResponseMapper:
    """
    Mapper built on the substring field extractor.

    Repository lists are scanned as a flat stream of ``{...}`` spans,
    each running from a ``{`` to the first ``}`` after it. A repository
    object that nests another object (``owner``, ``license``) is split
    at the nested closing brace, so fields after it fall into the next
    span or are missed and default to empty/zero.
    """

    name = "text"

    def map_user(self, raw: str) -> UserRecord:
        """Map a user payload; missing fields default silently."""
        return UserRecord(
            login=extract_scalar(raw, "login") or "",
            followers=to_int(extract_scalar(raw, "followers")),
            following=to_int(extract_scalar(raw, "following")),
            created_at=extract_scalar(raw, "created_at") or "",
        )

    def map_repositories(self, raw: str) -> List[RepositorySummary]:
        """Map a repository list payload in response order."""
        repositories = []
        cursor = 0

        while True:
            span_start = raw.find("{", cursor)
            if span_start == -1:
                break
            span_end = raw.find("}", span_start)
            if span_end == -1:
                break

            span = raw[span_start:span_end + 1]
            repositories.append(self._map_repository(span))
            cursor = span_end + 1

        logger.debug(f"Mapped {len(repositories)} repository spans")
        return repositories

    @staticmethod
    def _map_repository(span: str) -> RepositorySummary:
        return RepositorySummary(
            name=to_optional(extract_scalar(span, "name")) or "",
            description=to_optional(extract_scalar(span, "description")),
            language=to_optional(extract_scalar(span, "language")),
            stars=to_int(to_optional(extract_scalar(span, "stargazers_count"))),
            forks=to_int(to_optional(extract_scalar(span, "forks_count"))),
        )


class JsonResponseMapper:
    """
    Mapper built on the ``json`` module.

    Only top-level keys of each object are read, so nested objects no
    longer shift fields between repositories and escaped characters in
    strings are decoded. Payloads that fail to parse map to an empty
    record or an empty list.
    """

    name = "json"

    def map_user(self, raw: str) -> UserRecord:
        """Map a user payload; missing fields default silently."""
        data = self._load(raw)
        if not isinstance(data, dict):
            return UserRecord()

        return UserRecord(
            login=self._string(data.get("login")) or "",
            followers=self._integer(data.get("followers")),
            following=self._integer(data.get("following")),
            created_at=self._string(data.get("created_at")) or "",
        )

    def map_repositories(self, raw: str) -> List[RepositorySummary]:
        """Map a repository list payload in response order."""
        data = self._load(raw)
        if not isinstance(data, list):
            if data is not None:
                logger.warning(f"Expected a repository array, got {type(data).__name__}")
            return []

        repositories = []
        for item in data:
            if not isinstance(item, dict):
                continue
            repositories.append(self._map_repository(item))
        return repositories

    def _map_repository(self, item: Dict[str, Any]) -> RepositorySummary:
        return RepositorySummary(
            name=self._string(item.get("name")) or "",
            description=self._string(item.get("description")),
            language=self._string(item.get("language")),
            stars=self._integer(item.get("stargazers_count")),
            forks=self._integer(item.get("forks_count")),
        )

    @staticmethod
    def _load(raw: str) -> Any:
        try:
            return json.loads(raw)
        except (ValueError, RecursionError) as e:
            logger.warning(f"Response body is not valid JSON: {e}")
            return None

    @staticmethod
    def _string(value: Any) -> Optional[str]:
        return value if isinstance(value, str) else None

    @staticmethod
    def _integer(value: Any) -> int:
        # bool is an int subclass
        if isinstance(value, bool):
            return 0
        if isinstance(value, int):
            return to_int(str(value))
        if isinstance(value, str):
            return to_int(value.strip())
        return 0


MAPPERS = {
    TextResponseMapper.name: TextResponseMapper,
    JsonResponseMapper.name: JsonResponseMapper,
}


def get_mapper(mode: str):
    """
    Return a mapper instance by name.

    Raises:
        ValueError: If the name is not a known mapper
    """
    try:
        return MAPPERS[mode]()
    except KeyError:
        raise ValueError(
            f"Unknown parser mode '{mode}'. Expected one of: {', '.join(sorted(MAPPERS))}"
        ) from None


_default_mapper = TextResponseMapper()


def map_user(raw: str) -> UserRecord:
    """Map a user payload with the substring extractor."""
    return _default_mapper.map_user(raw)


def map_repositories(raw: str) -> List[RepositorySummary]:
    """Map a repository list payload with the substring extractor."""
    return _default_mapper.map_repositories(raw)
