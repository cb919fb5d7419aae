"""Card and authentication token models."""

from pydantic import BaseModel, ConfigDict, Field

from src.utils.pii import mask_card_number


class Card(BaseModel):
    """A payment card presented at the ATM."""

    model_config = ConfigDict(frozen=True)

    card_number: str = Field(description="Full card number")
    pin: int = Field(description="PIN entered by the card holder")

    @property
    def masked_number(self) -> str:
        """Card number with all but the last 4 digits hidden."""
        return mask_card_number(self.card_number)

    def __repr__(self) -> str:
        return f"Card(card_number='{self.masked_number}')"

    __str__ = __repr__


class AuthenticationToken(BaseModel):
    """Token issued by the card authorizer for a single transaction."""

    model_config = ConfigDict(frozen=True)

    authorization_code: int = Field(description="Code issued by the authorizer")
    user_id: str = Field(description="Account holder the card belongs to")
