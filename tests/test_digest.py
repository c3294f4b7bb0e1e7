"""Tests for UUID normalization and validation gates."""

import pytest

from uuid7ts.digest import CanonicalDigest, normalize, parse_digest
from uuid7ts.errors import (
    FormatError,
    InvalidInputError,
    UUIDv7Error,
    VersionMismatchError,
)

UUID_V7 = "017f7f58-9abc-7abc-8123-0123456789ab"
DIGEST = "017f7f589abc7abc81230123456789ab"


class TestNormalize:

    def test_strips_hyphens_and_lowercases(self):
        assert normalize("017F7F58-9ABC-7ABC-8123-0123456789AB") == DIGEST

    def test_keeps_whitespace(self):
        assert normalize(" 017f7f58 ") == " 017f7f58 "

    def test_strips_hyphens_anywhere(self):
        assert normalize("0-1-7-f") == "017f"

    def test_never_raises_on_odd_lengths(self):
        assert normalize("") == ""
        assert normalize("---") == ""


class TestParseDigest:

    def test_returns_canonical_digest(self):
        parsed = parse_digest(UUID_V7)
        assert isinstance(parsed, CanonicalDigest)
        assert parsed.raw == UUID_V7
        assert parsed.digest == DIGEST
        assert parsed.version_nibble == "7"
        assert parsed.timestamp_hex == "017f7f589abc"
        assert parsed.timestamp_field == 0x017F7F589ABC

    def test_accepts_unhyphenated_and_uppercase(self):
        assert parse_digest(DIGEST.upper()).digest == DIGEST

    @pytest.mark.parametrize("value", [None, 123, b"017f7f589abc7abc81230123456789ab", ["x"], ""])
    def test_input_gate(self, value):
        with pytest.raises(InvalidInputError, match="^uuid must be a non-empty string$"):
            parse_digest(value)

    @pytest.mark.parametrize("value", [
        "017f7f58-9abc-7abc-8123-0123456789a",      # 31 hex
        "017f7f58-9abc-7abc-8123-0123456789abc",    # 33 hex
        "017f7f58-9abc-7abc-8123-0123456789ag",     # non-hex
        " 017f7f58-9abc-7abc-8123-0123456789ab",    # leading space
        "017f7f58 9abc 7abc 8123 0123456789ab",     # spaces as separators
        "{017f7f58-9abc-7abc-8123-0123456789ab}",   # braces
        "-",
    ])
    def test_format_gate(self, value):
        with pytest.raises(FormatError, match="^invalid UUID format$"):
            parse_digest(value)

    def test_format_gate_ignores_separator_placement(self):
        assert parse_digest("017f-7f589abc7abc8123-0123456789ab").digest == DIGEST

    @pytest.mark.parametrize("nibble", ["0", "1", "4", "6", "8", "f"])
    def test_version_gate(self, nibble):
        uuid = f"017f7f58-9abc-{nibble}abc-8123-0123456789ab"
        with pytest.raises(VersionMismatchError) as exc_info:
            parse_digest(uuid)
        assert exc_info.value.nibble == nibble
        assert str(exc_info.value) == (
            f"expected UUID v7 (version nibble = 7), got version nibble = {nibble}"
        )

    def test_version_nibble_reported_lowercase(self):
        with pytest.raises(VersionMismatchError, match="got version nibble = a$"):
            parse_digest("017F7F58-9ABC-AABC-8123-0123456789AB")

    def test_format_checked_before_version(self):
        with pytest.raises(FormatError):
            parse_digest("017f7f58-9abc-6abc-8123-0123456789")

    def test_errors_share_base_class(self):
        for value in ("", "nope", "017f7f58-9abc-4abc-8123-0123456789ab"):
            with pytest.raises(UUIDv7Error):
                parse_digest(value)
            with pytest.raises(ValueError):
                parse_digest(value)
