"""Tests for the content-type compressibility classifier."""

import pytest

from compressible.classifier import (
    Classification,
    MatchReason,
    classify,
    is_compressible,
    parse_essence,
)
from compressible.mime_db import (
    COMPRESSIBLE_TYPES,
    INCOMPRESSIBLE_TYPES,
)


class TestParseEssence:
    def test_plain_type(self):
        assert parse_essence("text/plain") == "text/plain"

    def test_strips_parameters(self):
        assert parse_essence("text/html; charset=utf-8") == "text/html"
        assert parse_essence("image/jpeg; param=1") == "image/jpeg"

    def test_trims_and_lowercases(self):
        assert parse_essence("  Application/JSON  ") == "application/json"
        assert parse_essence("TEXT/PLAIN ;charset=UTF-8") == "text/plain"

    def test_invalid_inputs(self):
        assert parse_essence("") is None
        assert parse_essence("   ") is None
        assert parse_essence("text") is None
        assert parse_essence("text/") is None
        assert parse_essence("/plain") is None
        assert parse_essence("text/plain/extra") is None
        assert parse_essence("te xt/plain") is None
        assert parse_essence("as;ldfkjas;ldfkja;lsdfj") is None

    def test_non_string(self):
        assert parse_essence(None) is None
        assert parse_essence(42) is None


class TestKnownTypes:
    @pytest.mark.parametrize(
        "content_type",
        ["text/plain", "text/html", "application/json", "application/javascript", "image/svg+xml"],
    )
    def test_compressible(self, content_type):
        assert is_compressible(content_type) is True

    @pytest.mark.parametrize(
        "content_type",
        ["image/jpeg", "image/png", "image/gif", "video/mp4", "audio/mpeg", "application/zip"],
    )
    def test_incompressible(self, content_type):
        assert is_compressible(content_type) is False

    def test_every_table_entry_is_compressible(self):
        assert all(is_compressible(ct) for ct in COMPRESSIBLE_TYPES)

    def test_every_incompressible_entry_is_not(self):
        assert not any(is_compressible(ct) for ct in INCOMPRESSIBLE_TYPES)

    def test_tables_do_not_overlap(self):
        assert COMPRESSIBLE_TYPES.isdisjoint(INCOMPRESSIBLE_TYPES)

    def test_mime_db_entries_kept_verbatim(self):
        assert len(COMPRESSIBLE_TYPES) == 539
        assert "text/calender" in COMPRESSIBLE_TYPES
        assert "application/x-web-app-manifest+json" in COMPRESSIBLE_TYPES
        assert "x-shader/x-vertex" in COMPRESSIBLE_TYPES

    def test_non_text_exact_entries(self):
        assert is_compressible("font/ttf") is True
        assert is_compressible("image/bmp") is True
        assert is_compressible("application/wasm") is True


class TestNormalization:
    def test_case_insensitive(self):
        assert is_compressible("TEXT/PLAIN") == is_compressible("text/plain")
        assert is_compressible("Image/JPEG") == is_compressible("image/jpeg")

    def test_parameters_ignored(self):
        assert is_compressible("text/html; charset=utf-8") == is_compressible("text/html")
        assert is_compressible("image/jpeg; param=1") is False

    def test_surrounding_whitespace(self):
        assert is_compressible("  application/json ") is True


class TestGenericRules:
    def test_text_prefix(self):
        result = classify("text/x-something-new")
        assert result.compressible is True
        assert result.reason == MatchReason.PREFIX

    def test_json_suffix(self):
        result = classify("application/vnd.example+json")
        assert result.compressible is True
        assert result.reason == MatchReason.SUFFIX

    def test_listed_suffix_type_matches_exactly(self):
        assert is_compressible("application/vnd.api+json") is True
        assert classify("application/vnd.api+json").reason == MatchReason.EXACT

    def test_xml_suffix(self):
        assert is_compressible("application/vnd.example.widget+xml") is True

    def test_incompressible_overrides_suffix(self):
        result = classify("video/vnd.example+xml")
        assert result.compressible is False
        assert result.reason == MatchReason.INCOMPRESSIBLE
        assert is_compressible("audio/x-thing+json") is False

    def test_exact_match_reason(self):
        assert classify("application/json").reason == MatchReason.EXACT

    def test_other_structured_suffixes_not_matched(self):
        assert is_compressible("application/vnd.example+zip") is False
        assert is_compressible("application/vnd.example+cbor") is False


class TestDefaultToFalse:
    def test_unknown_type(self):
        result = classify("application/x-made-up-type")
        assert result.compressible is False
        assert result.reason == MatchReason.UNKNOWN

    def test_empty_string(self):
        assert is_compressible("") is False
        assert classify("").reason == MatchReason.INVALID

    def test_garbage(self):
        assert is_compressible("as;ldfkjas;ldfkja;lsdfj") is False
        assert is_compressible("not a mime type") is False

    def test_non_string_does_not_raise(self):
        assert is_compressible(None) is False
        assert is_compressible(b"text/plain") is False


class TestPurity:
    def test_idempotent(self):
        for ct in ["text/plain", "image/png", "", "application/vnd.api+json"]:
            assert is_compressible(ct) == is_compressible(ct)
            assert classify(ct) == classify(ct)

    def test_classification_keeps_original_input(self):
        result = classify("Text/HTML; charset=utf-8")
        assert result == Classification(
            content_type="Text/HTML; charset=utf-8",
            essence="text/html",
            compressible=True,
            reason=MatchReason.EXACT,
        )

    def test_tables_are_immutable(self):
        assert isinstance(COMPRESSIBLE_TYPES, frozenset)
        assert isinstance(INCOMPRESSIBLE_TYPES, frozenset)
