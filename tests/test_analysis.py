"""End-to-end scenarios through analyze_payload."""

import json

import pytest

from bootstrap_user_diff.analysis import (
    analyze_payload, analyze_payload_cached, parse_payload_text,
)
from bootstrap_user_diff.config import DEFAULT_INPUT
from bootstrap_user_diff.diffing import DiffEntry, DiffStatus
from bootstrap_user_diff.json_model import MISSING


def payload_text(client, metadata):
    event = dict(client)
    event["bootstrapMetadata"] = json.dumps(metadata)
    return json.dumps(event)


class TestParsePayloadText:

    @pytest.mark.parametrize("text", [None, "", "   \n\t"])
    def test_blank_is_waiting(self, text):
        result = parse_payload_text(text)
        assert result.data is None
        assert result.error is None

    def test_invalid_json(self):
        result = parse_payload_text("{not json")
        assert result.data is None
        assert result.error.startswith("Unable to parse JSON: ")

    def test_deep_nesting_is_parse_error(self):
        result = parse_payload_text("[" * 100000 + "]" * 100000)
        assert result.data is None
        assert result.error.startswith("Unable to parse JSON: ")

    def test_infinity_rejected(self):
        assert parse_payload_text('{"a": Infinity}').error is not None


class TestScenarios:

    def test_metadata_field_missing(self):
        result = analyze_payload('{"userID":"u1"}')
        assert result.client_user == {"userID": "u1"}
        assert result.bootstrap.error == "No bootstrapMetadata field found on this payload."
        assert result.display_rows == []
        assert result.can_diff is False

    def test_bootstrap_only_stable_id(self):
        text = '{"userID":"u1","bootstrapMetadata":"{\\"user\\":{\\"userID\\":\\"u1\\",\\"stableID\\":\\"s1\\"}}"}'
        result = analyze_payload(text)
        assert result.bootstrap.bootstrap_user == {"userID": "u1", "stableID": "s1"}
        added = [row for row in result.display_rows if row.status is DiffStatus.ADDED]
        assert added == [DiffEntry("stableID", DiffStatus.ADDED, MISSING, "s1")]
        assert result.client_stable_id is None
        assert result.bootstrap_stable_id == "s1"

    def test_custom_ids_stable_id_mismatch(self):
        text = payload_text(
            {"userID": "u1", "customIDs": {"stableID": "s1"}},
            {"user": {"userID": "u1", "customIDs": {"stableID": "s2"}}},
        )
        result = analyze_payload(text)
        assert result.display_rows == [
            DiffEntry("customIDs.stableID", DiffStatus.CHANGED, "s1", "s2"),
        ]

    def test_identical_users(self):
        user = {"userID": "u1", "country": "US", "customIDs": {"stableID": "s1"}}
        result = analyze_payload(payload_text(user, {"user": user}))
        assert result.diff == []
        assert result.display_rows == []

    def test_mangled_escape_reports_parse_error(self):
        text = payload_text({"userID": "u1"}, {"user": {"userID": 'say "hi"'}})
        result = analyze_payload(text)
        assert result.bootstrap.error.startswith("Unable to parse bootstrapMetadata: ")
        assert result.bootstrap.bootstrap_user is None
        assert result.bootstrap.raw_string is not None
        assert result.display_rows == []


class TestAnalyzePayload:

    def test_invalid_json_clears_everything(self):
        result = analyze_payload("{oops")
        assert result.error.startswith("Unable to parse JSON")
        assert result.client_user is None
        assert result.bootstrap.error is None
        assert result.bootstrap.bootstrap_user is None
        assert result.client_stable_id is None
        assert result.diff == []

    def test_non_object_payload(self):
        result = analyze_payload("[1, 2]")
        assert result.error is None
        assert result.client_user is None
        assert result.bootstrap.error is None

    def test_deep_nesting_does_not_raise(self):
        result = analyze_payload("[" * 100000 + "]" * 100000)
        assert result.error.startswith("Unable to parse JSON")
        assert result.display_rows == []

    def test_list_numbers_compare_by_value(self):
        text = payload_text(
            {"userID": "u1", "custom": {"x": [100]}},
            {"user": {"userID": "u1", "custom": {"x": [1e2]}}},
        )
        assert analyze_payload(text).diff == []

    def test_removed_fields_not_shown(self):
        text = payload_text({"userID": "u1", "email": "a@b.c"}, {"user": {"userID": "u1"}})
        result = analyze_payload(text)
        assert [row.status for row in result.diff] == [DiffStatus.REMOVED]
        assert result.display_rows == []

    def test_ignored_environment(self):
        text = payload_text(
            {"user": {"userID": "u1"}},
            {"user": {"userID": "u1", "statsigEnvironment": {"tier": "production"}}},
        )
        assert analyze_payload(text).diff == []

    def test_custom_ignore_list(self):
        text = payload_text({"userID": "u1"}, {"user": {"userID": "u1", "country": "US"}})
        assert analyze_payload(text, ignored_paths=("country",)).display_rows == []

    def test_sample_event(self):
        result = analyze_payload(DEFAULT_INPUT)
        assert result.client_user["userID"] == "a-user"
        assert result.bootstrap.bootstrap_user == {"userID": "a-user"}
        assert result.client_stable_id == "11f65358-95af-4a61-977f-bcbb34b2dc77"
        assert result.bootstrap_stable_id is None
        assert result.display_rows == [
            DiffEntry("customIDs.stableID", DiffStatus.CHANGED, "11f65358-95af-4a61-977f-bcbb34b2dc77", None),
        ]

    def test_cached_returns_same_result(self):
        assert analyze_payload_cached(DEFAULT_INPUT) is analyze_payload_cached(DEFAULT_INPUT)
        assert analyze_payload_cached(DEFAULT_INPUT) == analyze_payload(DEFAULT_INPUT)
