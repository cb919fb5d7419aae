"""Banknote and payment models."""

from collections import Counter

from pydantic import BaseModel, ConfigDict, Field

from src.models.money import Currency


class Banknote(BaseModel):
    """A single physical note."""

    model_config = ConfigDict(frozen=True)

    value: int = Field(gt=0, description="Face value of the note")
    currency: Currency = Field(default=Currency.PL, description="Currency of the note")


class Payment(BaseModel):
    """Banknotes handed to the customer after a successful withdrawal."""

    model_config = ConfigDict(frozen=True)

    notes: tuple[Banknote, ...] = Field(
        default=(), description="Dispensed notes, largest first"
    )

    @property
    def total(self) -> int:
        return sum(note.value for note in self.notes)

    def count_by_value(self) -> dict[int, int]:
        """Number of notes per face value, largest value first."""
        counts = Counter(note.value for note in self.notes)
        return dict(sorted(counts.items(), reverse=True))

    def to_display_dict(self) -> dict:
        """Return a dictionary suitable for a receipt or log entry."""
        currency = self.notes[0].currency.value if self.notes else None
        return {
            "total": self.total,
            "currency": currency,
            "notes": {str(value): count for value, count in self.count_by_value().items()},
        }
