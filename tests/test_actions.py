"""Tests for profile parsing and entity name normalization."""

import pytest

from sanitizer.actions import (
    HASH,
    SUPPRESS,
    EntityProfile,
    HashAction,
    NestedAction,
    SuppressAction,
    parse_action,
    parse_entity_profile,
    parse_profile,
)
from sanitizer.errors import ProfileError, SanitizationError
from sanitizer.naming import normalize_entity_name


class TestParseAction:

    def test_hash(self):
        assert parse_action("hash") is HASH

    @pytest.mark.parametrize("raw", ["suppress", "redact", "hashed", "Hash", "HASH", " hash", None, True, 0, ["a", "b"], [{"a": "hash"}, "b"], []])
    def test_everything_else_suppresses(self, raw):
        assert isinstance(parse_action(raw), SuppressAction)

    def test_mapping_is_nested(self):
        action = parse_action({"city": "hash", "line1": "suppress"})

        assert isinstance(action, NestedAction)
        assert action.profile.get("city") is HASH
        assert action.profile.get("line1") is SUPPRESS

    def test_list_of_mappings_is_merged(self):
        action = parse_action([{"a": "hash"}, {"b": "suppress"}, {"a": "suppress"}])

        assert isinstance(action, NestedAction)
        assert action.profile.get("a") is SUPPRESS
        assert action.profile.get("b") is SUPPRESS

    def test_field_names_are_strings(self):
        profile = parse_entity_profile({1: "hash"})

        assert "1" in profile
        assert isinstance(profile.get("1"), HashAction)


class TestParseProfile:

    def test_empty_document(self):
        assert parse_profile(None) is None

    def test_entity_keys_normalized(self):
        profile = parse_profile({"SalesOrder": {"note": "suppress"}})

        assert list(profile) == ["sales_order"]
        assert isinstance(profile["sales_order"], EntityProfile)
        assert len(profile["sales_order"]) == 1

    def test_document_must_be_mapping(self):
        with pytest.raises(ProfileError):
            parse_profile(["contact"])

    def test_entity_profile_must_be_mapping(self):
        with pytest.raises(ProfileError):
            parse_profile({"contact": "hash"})

    def test_empty_entity_profile(self):
        with pytest.raises(ProfileError):
            parse_profile({"contact": None})


class TestNormalizeEntityName:

    @pytest.mark.parametrize("name,expected", [
        ("Contact", "contact"),
        ("contact", "contact"),
        ("SomeEntity", "some_entity"),
        ("some_entity", "some_entity"),
        ("HTTPRequest", "http_request"),
        ("Invoice2Line", "invoice2_line"),
        ("sales-order", "sales_order"),
        ("Sales Order", "sales_order"),
        ("Admin::User", "admin/user"),
        ("  Contact  ", "contact"),
    ])
    def test_normalization(self, name, expected):
        assert normalize_entity_name(name) == expected

    def test_idempotent(self):
        name = normalize_entity_name("SomeHTTPEntity")
        assert normalize_entity_name(name) == name

    def test_non_string(self):
        with pytest.raises(SanitizationError):
            normalize_entity_name(None)
