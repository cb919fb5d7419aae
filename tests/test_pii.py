"""Tests for PII masking utilities."""

import pytest
from src.utils.pii import (
    _mask_pii_presidio,
    _mask_pii_regex,
    hash_card_number,
    mask_card_number,
    mask_pii,
    redact_for_logging,
)


class TestMaskCardNumber:
    """Tests for card number masking."""

    def test_masks_all_but_last_four(self):
        assert mask_card_number("4111111111111234") == "****1234"

    def test_grouped_number(self):
        assert mask_card_number("4111-1111-1111-1234") == "****1234"

    def test_short_number(self):
        assert mask_card_number("1234") == "****1234"

    def test_empty(self):
        assert mask_card_number("") == ""


class TestHashCardNumber:
    """Tests for card number hashing."""

    def test_stable_and_short(self):
        assert hash_card_number("4111111111111111") == hash_card_number("4111111111111111")
        assert len(hash_card_number("4111111111111111")) == 12

    def test_does_not_contain_number(self):
        assert "4111111111111111" not in hash_card_number("4111111111111111")


class TestMaskPiiRegex:
    """Tests for regex-based masking."""

    def test_masks_card_number(self):
        text = "Card 4111111111111111 rejected"
        result = _mask_pii_regex(text)
        assert "4111111111111111" not in result
        assert "[REDACTED_CARD]" in result

    def test_masks_card_with_dashes(self):
        result = _mask_pii_regex("Card: 4111-1111-1111-1111")
        assert "[REDACTED_CARD]" in result

    def test_masks_card_with_spaces(self):
        result = _mask_pii_regex("Card: 4111 1111 1111 1111")
        assert "[REDACTED_CARD]" in result

    def test_masks_account_number(self):
        result = _mask_pii_regex("account 12345678 locked")
        assert "12345678" not in result
        assert "[REDACTED_NUMBER]" in result

    def test_keeps_short_numbers(self):
        text = "Cannot release 100 PL in 2 notes"
        assert _mask_pii_regex(text) == text


class TestMaskPiiPresidio:
    """Tests for Presidio-based masking."""

    def test_masks_person_names(self):
        text = "Account of John Smith is frozen"
        result = _mask_pii_presidio(text)
        assert "John Smith" not in result
        assert "[REDACTED_PERSON]" in result

    def test_masks_email(self):
        text = "Contact john.doe@example.com about the hold"
        result = _mask_pii_presidio(text)
        assert "john.doe@example.com" not in result
        assert "[REDACTED_EMAIL]" in result

    def test_no_pii_returns_unchanged(self):
        text = "Ledger connection refused"
        assert _mask_pii_presidio(text) == text


class TestMaskPiiHybrid:
    """Tests for the hybrid mask_pii function."""

    def test_hybrid_masks_card_and_name(self):
        text = "Charge for John Smith on card 4111-1111-1111-1111 failed"
        result = mask_pii(text)
        assert "John Smith" not in result
        assert "4111-1111-1111-1111" not in result

    def test_presidio_disabled(self):
        text = "Charge for John Smith on card 4111-1111-1111-1111 failed"
        result = mask_pii(text, use_presidio=False)
        assert "4111-1111-1111-1111" not in result
        assert "John Smith" in result

    def test_empty_returns_empty(self):
        assert mask_pii("") == ""
        assert mask_pii(None) is None


class TestRedactForLogging:
    """Tests for dictionary redaction."""

    def test_redacts_sensitive_fields(self):
        result = redact_for_logging({
            "pin": 1234,
            "authorization_code": 111,
            "amount": 100,
        })
        assert result == {
            "pin": "[REDACTED]",
            "authorization_code": "[REDACTED]",
            "amount": 100,
        }

    def test_card_number_masked(self):
        result = redact_for_logging({"card_number": "4111111111111234"})
        assert result["card_number"] == "****1234"

    @pytest.mark.parametrize("container", ["dict", "list"])
    def test_nested(self, container):
        inner = {"token": "abc", "user_id": "u1"}
        data = {"outer": inner} if container == "dict" else {"outer": [inner]}
        result = redact_for_logging(data)
        redacted = result["outer"] if container == "dict" else result["outer"][0]
        assert redacted == {"token": "[REDACTED]", "user_id": "u1"}
