import pytest

from bootstrap_user_diff.stable_id import resolve_stable_id


@pytest.mark.parametrize("user,expected", [
    (None, None),
    ({}, None),
    ({"stableID": "s1"}, "s1"),
    ({"stableID": "  s1  "}, "s1"),
    ({"customIDs": {"stableID": "c1"}}, "c1"),
    ({"customIDs": {"stableID": " c1\t"}}, "c1"),
    ({"stableID": "s1", "customIDs": {"stableID": "c1"}}, "s1"),
    ({"stableID": "   ", "customIDs": {"stableID": "c1"}}, "c1"),
    ({"stableID": 12, "customIDs": {"stableID": "c1"}}, "c1"),
    ({"stableID": "", "customIDs": {"stableID": ""}}, None),
    ({"customIDs": "c1"}, None),
    ({"customIDs": {"stableID": None}}, None),
    ({"customIDs": {"other": "x"}}, None),
    ({"userID": "u1"}, None),
])
def test_resolve_stable_id(user, expected):
    assert resolve_stable_id(user) == expected
