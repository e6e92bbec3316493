"""
Tests for webcfg.config.accessors module.

Tests the typed lookup primitives including:
- Missing keys and None values
- Values of the wrong shape
- Matching values returned without copying
"""

from __future__ import annotations

import pytest

from webcfg.config.accessors import as_mapping, as_sequence, as_string

DOC = {
    "json_schema": "http://json-schema.org/draft-04/schema#",
    "webpage_client": {"base_url": "localhost:8700"},
    "form_data": ["first_name", "last_name"],
    "empty": None,
    "typed": 42,
}


class TestMissingKeys:
    """Tests for keys that are not present."""

    @pytest.mark.parametrize("key", ["CaptainAngua", "empty"])
    def test_defaults(self, key):
        assert as_string(DOC, key) == ""
        assert as_sequence(DOC, key) == []
        assert as_mapping(DOC, key) == {}

    def test_missing_logged(self, recording_logger):
        as_string(DOC, "CaptainAngua", recording_logger)

        assert recording_logger.messages("debug") == [
            "No value found for key 'CaptainAngua'"
        ]

    def test_non_mapping_container(self):
        assert as_mapping("not a mapping", "key") == {}  # type: ignore[arg-type]
        assert as_string(None, "key") == ""  # type: ignore[arg-type]


class TestShapeMismatch:
    """Tests for keys holding a value of another shape."""

    def test_ask_for_map_but_string(self):
        assert as_mapping(DOC, "json_schema") == {}

    def test_ask_for_list_but_string(self):
        assert as_sequence(DOC, "json_schema") == []

    def test_ask_for_string_but_map(self):
        assert as_string(DOC, "webpage_client") == ""

    def test_ask_for_map_but_list(self):
        assert as_mapping(DOC, "form_data") == {}

    def test_ask_for_string_but_int(self):
        assert as_string(DOC, "typed") == ""

    def test_mismatch_logs_type_name(self, recording_logger):
        as_mapping(DOC, "json_schema", recording_logger)
        as_sequence(DOC, "webpage_client", recording_logger)

        debug = recording_logger.messages("debug")
        assert "type was 'str'" in debug[0]
        assert "type was 'dict'" in debug[1]


class TestMatchingShape:
    """Tests for values of the requested shape."""

    def test_string(self):
        assert as_string(DOC, "json_schema") == DOC["json_schema"]

    def test_mapping_returned_by_reference(self):
        assert as_mapping(DOC, "webpage_client") is DOC["webpage_client"]

    def test_sequence_returned_by_reference(self):
        assert as_sequence(DOC, "form_data") is DOC["form_data"]

    def test_empty_default_is_fresh(self):
        first = as_mapping(DOC, "CaptainAngua")
        first["added"] = "x"

        assert as_mapping(DOC, "CaptainAngua") == {}
        assert "CaptainAngua" not in DOC

    def test_nothing_logged_on_hit(self, recording_logger):
        as_string(DOC, "json_schema", recording_logger)

        assert recording_logger.records == []
