"""
Pytest tests for response mappers.

Run from the project root:
    pytest tests/test_mapper.py -v
"""

import pytest

from user_finder.domain.mapper import (
    JsonResponseMapper,
    TextResponseMapper,
    get_mapper,
    map_repositories,
    map_user,
)
from user_finder.domain.repository import RepositorySummary
from user_finder.domain.user import UserRecord


USER_JSON = '{"login":"octocat","followers":100,"following":9,"created_at":"2011-01-25"}'

REPOS_JSON = (
    '[{"name":"Hello-World","description":null,"language":"C",'
    '"stargazers_count":80,"forks_count":9}]'
)

# Shaped like the real API: the owner object precedes the fields of interest
NESTED_REPOS_JSON = (
    '[{"name":"Hello-World","owner":{"login":"octocat","id":1},'
    '"description":"My first repo","language":"C","stargazers_count":80,"forks_count":9},'
    '{"name":"Spoon-Knife","owner":{"login":"octocat","id":1},'
    '"description":null,"language":"HTML","stargazers_count":12,"forks_count":40}]'
)


# ============================================================================
# Text (substring) mapper
# ============================================================================

def test_map_user_reads_all_fields():
    assert map_user(USER_JSON) == UserRecord(
        login="octocat",
        followers=100,
        following=9,
        created_at="2011-01-25",
        repositories=(),
    )


def test_map_user_empty_object_defaults():
    user = map_user("{}")
    assert user.login == ""
    assert user.followers == 0
    assert user.following == 0
    assert user.created_at == ""
    assert user.repositories == ()


def test_map_user_unparsable_counts_default_to_zero():
    user = map_user('{"login":"a","followers":"many","following":null}')
    assert user.followers == 0
    assert user.following == 0


def test_map_repositories_single_entry():
    repos = map_repositories(REPOS_JSON)
    assert repos == [
        RepositorySummary(name="Hello-World", description=None, language="C", stars=80, forks=9)
    ]


def test_map_overlong_counts_default_to_zero():
    """Huge numeric tokens in a payload map to 0 instead of raising."""
    digits = "1" * 5000
    user = map_user('{"login":"x","followers":' + digits + "}")
    assert user.login == "x"
    assert user.followers == 0

    repos = map_repositories('[{"name":"x","stargazers_count":' + digits + "}]")
    assert repos == [RepositorySummary(name="x")]


def test_map_repositories_keeps_response_order():
    raw = '[{"name":"b","stargazers_count":1},{"name":"A"},{"name":"c"}]'
    assert [repo.name for repo in map_repositories(raw)] == ["b", "A", "c"]


def test_map_repositories_empty_inputs():
    assert map_repositories("[]") == []
    assert map_repositories("") == []
    assert map_repositories('[{"name":"x"') == []


def test_map_repositories_missing_fields_default():
    repos = map_repositories('[{"id":1}]')
    assert repos == [RepositorySummary(name="")]


def test_map_repositories_nested_object_splits_spans():
    """The naive scan splits a repository at its nested owner object."""
    repos = map_repositories(NESTED_REPOS_JSON)

    # fields after the owner object fall outside each span
    assert repos == [
        RepositorySummary(name="Hello-World"),
        RepositorySummary(name="Spoon-Knife"),
    ]


def test_map_repositories_object_after_nested_close_becomes_own_span():
    """A second nested object after the first one yields an extra entry."""
    raw = (
        '[{"name":"x","owner":{"id":1},"license":{"key":"mit","name":"MIT License"},'
        '"stargazers_count":5}]'
    )
    repos = map_repositories(raw)
    assert [repo.name for repo in repos] == ["x", "MIT License"]
    assert all(repo.stars == 0 for repo in repos)


# ============================================================================
# JSON mapper
# ============================================================================

def test_json_mapper_user():
    mapper = JsonResponseMapper()
    assert mapper.map_user(USER_JSON) == map_user(USER_JSON)
    assert mapper.map_user("{}") == UserRecord()


def test_json_mapper_user_null_login_is_empty():
    assert JsonResponseMapper().map_user('{"login":null}').login == ""


def test_json_mapper_repositories_match_text_mapper_on_flat_input():
    assert JsonResponseMapper().map_repositories(REPOS_JSON) == map_repositories(REPOS_JSON)


def test_json_mapper_handles_nested_objects():
    repos = JsonResponseMapper().map_repositories(NESTED_REPOS_JSON)
    assert repos == [
        RepositorySummary(
            name="Hello-World", description="My first repo", language="C", stars=80, forks=9
        ),
        RepositorySummary(
            name="Spoon-Knife", description=None, language="HTML", stars=12, forks=40
        ),
    ]


def test_json_mapper_keeps_commas_in_descriptions():
    raw = '[{"name":"x","description":"fast, small {tiny}"}]'
    assert JsonResponseMapper().map_repositories(raw)[0].description == "fast, small {tiny}"


def test_json_mapper_is_lenient():
    mapper = JsonResponseMapper()
    assert mapper.map_user("not json") == UserRecord()
    assert mapper.map_user("[]") == UserRecord()
    assert mapper.map_repositories("not json") == []
    assert mapper.map_repositories('{"message":"Not Found"}') == []
    assert mapper.map_repositories('[1, "x", {"name":"ok"}]') == [RepositorySummary(name="ok")]


def test_json_mapper_deeply_nested_payload_is_lenient():
    """Nesting beyond the decoder's recursion limit maps to empty results."""
    mapper = JsonResponseMapper()
    assert mapper.map_repositories("[" * 200000) == []
    assert mapper.map_user("[" * 200000) == UserRecord()


def test_json_mapper_overlong_counts_default_to_zero():
    digits = "1" * 5000
    user = JsonResponseMapper().map_user('{"followers":"' + digits + '"}')
    assert user.followers == 0


def test_json_mapper_coerces_counts():
    mapper = JsonResponseMapper()
    user = mapper.map_user('{"followers":"12","following":true}')
    assert user.followers == 12
    assert user.following == 0
    repo = mapper.map_repositories('[{"stargazers_count":1.5,"forks_count":null}]')[0]
    assert repo.stars == 0
    assert repo.forks == 0


# ============================================================================
# get_mapper()
# ============================================================================

def test_get_mapper_by_name():
    assert isinstance(get_mapper("text"), TextResponseMapper)
    assert isinstance(get_mapper("json"), JsonResponseMapper)


def test_get_mapper_unknown_name():
    with pytest.raises(ValueError, match="Unknown parser mode"):
        get_mapper("xml")
