"""Tests for the value objects."""

import pytest
from pydantic import ValidationError

from src.models import AuthenticationToken, Banknote, Card, Currency, Money, Payment


class TestMoney:
    """Tests for the Money model."""

    def test_negative_amount_is_representable(self):
        money = Money(amount=-100, currency=Currency.PL)
        assert money.amount == -100

    def test_default_currency(self):
        assert Money(amount=10).currency == Currency.PL

    def test_immutable(self):
        money = Money(amount=100)
        with pytest.raises(ValidationError):
            money.amount = 200

    def test_equality_by_value(self):
        assert Money(amount=100, currency=Currency.PL) == Money(amount=100, currency=Currency.PL)
        assert Money(amount=100, currency=Currency.PL) != Money(amount=100, currency=Currency.EUR)

    def test_str(self):
        assert str(Money(amount=100, currency=Currency.EUR)) == "100 EUR"


class TestCard:
    """Tests for the Card model."""

    def test_masked_number(self):
        card = Card(card_number="4111 1111 1111 1234", pin=1111)
        assert card.masked_number == "****1234"

    def test_repr_hides_number_and_pin(self):
        card = Card(card_number="4111111111111234", pin=9876)
        text = repr(card)
        assert "4111111111111234" not in text
        assert "9876" not in text
        assert str(card) == text

    def test_immutable(self):
        card = Card(card_number="4111111111111234", pin=9876)
        with pytest.raises(ValidationError):
            card.pin = 1


class TestAuthenticationToken:
    """Tests for the AuthenticationToken model."""

    def test_hashable(self):
        """Test tokens can be compared and used as dict keys."""
        token = AuthenticationToken(authorization_code=111, user_id="111")
        assert {token: True}[AuthenticationToken(authorization_code=111, user_id="111")]


class TestBanknote:
    """Tests for the Banknote model."""

    @pytest.mark.parametrize("value", [0, -10])
    def test_value_must_be_positive(self, value):
        with pytest.raises(ValidationError):
            Banknote(value=value)


class TestPayment:
    """Tests for the Payment model."""

    def test_total(self):
        payment = Payment(notes=(Banknote(value=50), Banknote(value=20), Banknote(value=20)))
        assert payment.total == 90

    def test_empty_payment(self):
        payment = Payment()
        assert payment.total == 0
        assert payment.to_display_dict() == {"total": 0, "currency": None, "notes": {}}

    def test_count_by_value(self):
        payment = Payment(notes=(Banknote(value=20), Banknote(value=100), Banknote(value=20)))
        assert payment.count_by_value() == {100: 1, 20: 2}
        assert list(payment.count_by_value()) == [100, 20]

    def test_to_display_dict(self):
        payment = Payment(notes=(Banknote(value=100, currency=Currency.EUR),))
        assert payment.to_display_dict() == {
            "total": 100,
            "currency": "EUR",
            "notes": {"100": 1},
        }
