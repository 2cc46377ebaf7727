"""
Tests for the connect helper functions.
"""

import pytest

from connect_proxy.connect.util import get_map_value_or_string


@pytest.mark.unit
class TestGetMapValueOrString:
    """Test map lookups with a fallback value."""

    def test_returns_value_when_key_present(self):
        assert get_map_value_or_string({"timeout": "30s"}, "timeout", "10s") == "30s"

    def test_returns_fallback_when_key_missing(self):
        assert get_map_value_or_string({"timeout": "30s"}, "retries", "3") == "3"

    @pytest.mark.parametrize("key", ["", "timeout", "connector.class"])
    def test_empty_mapping_always_returns_fallback(self, key):
        assert get_map_value_or_string({}, key, "fallback") == "fallback"

    def test_none_mapping_is_treated_as_empty(self):
        assert get_map_value_or_string(None, "timeout", "10s") == "10s"

    def test_stored_value_is_not_normalized(self):
        mapping = {"name": "  padded value  ", "empty": ""}

        assert get_map_value_or_string(mapping, "name", "x") == "  padded value  "
        assert get_map_value_or_string(mapping, "empty", "x") == ""

    def test_fallback_returned_verbatim(self):
        assert get_map_value_or_string({"a": "1"}, "b", "") == ""
        assert get_map_value_or_string({"a": "1"}, "b", " spaced ") == " spaced "

    def test_empty_string_key(self):
        assert get_map_value_or_string({"": "blank-key"}, "", "fallback") == "blank-key"

    def test_mapping_is_not_modified(self):
        mapping = {"timeout": "30s"}

        get_map_value_or_string(mapping, "retries", "3")

        assert mapping == {"timeout": "30s"}
