"""Unit tests for domain value types."""

import pytest
from pydantic import ValidationError

from assess.domain.value import (
    InvitationToken,
    MagicLinkToken,
    normalize_email,
)


class TestSecureToken:
    """Tests for the random token value objects."""

    def test_generate_is_64_lowercase_hex(self):
        token = MagicLinkToken.generate()

        assert len(token.root) == 64
        assert set(token.root) <= set("0123456789abcdef")

    def test_generate_returns_subclass(self):
        """generate() builds the class it is called on."""
        assert isinstance(InvitationToken.generate(), InvitationToken)

    def test_accepts_valid_token(self):
        token = MagicLinkToken("0123456789abcdef" * 4)

        assert str(token) == "0123456789abcdef" * 4

    @pytest.mark.parametrize(
        "value",
        ["", "abc", "A" * 64, "g" * 64, "a" * 63, "a" * 65, " " + "a" * 63],
    )
    def test_rejects_malformed_strings(self, value):
        with pytest.raises(ValidationError):
            MagicLinkToken(value)

    @pytest.mark.parametrize("value", [None, 123, b"a" * 64])
    def test_rejects_non_strings(self, value):
        """Strict validation refuses to coerce other types."""
        with pytest.raises(ValidationError):
            MagicLinkToken(value)

    def test_preview_exposes_only_prefix(self):
        token = MagicLinkToken("f" * 64)

        assert token.preview == "ffffffff..."

    def test_tokens_are_immutable(self):
        token = MagicLinkToken.generate()

        with pytest.raises(ValidationError):
            token.root = "0" * 64


class TestNormalizeEmail:
    """Tests for normalize_email."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("jane@co.com", "jane@co.com"),
            ("Jane@CO.com", "jane@co.com"),
            ("  jane@co.com\n", "jane@co.com"),
        ],
    )
    def test_normalize(self, raw, expected):
        assert normalize_email(raw) == expected
