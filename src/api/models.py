"""Requests and Response models"""

from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_serializer
from pydantic.alias_generators import to_camel

# JSON bodies use camelCase (ageRating), Python code uses snake_case (age_rating)
CAMEL_CASE = ConfigDict(alias_generator=to_camel, populate_by_name=True)


# --- REQUEST MODELS ---
class GameFields(BaseModel):
    """Every client-editable field of a Game.

    NOTE no length/range constraints here: those rules live in src/api/validation.py so that
    all failures of a request can be reported together, with their own messages.
    """

    model_config = CAMEL_CASE

    name: str = ""
    genre: str = ""
    age_rating: str = ""
    price: Decimal = Decimal("0")
    description: str = ""
    author: str = ""


class CreateGameRequest(GameFields):
    pass


class UpdateGameRequest(GameFields):
    """Full replacement of a game's fields. Omitted fields are reset to their defaults."""


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    model_config = CAMEL_CASE

    id: int
    name: str
    genre: str
    age_rating: str
    price: Decimal
    description: str
    author: str

    @field_serializer("price", when_used="json")
    def serialize_price(self, price: Decimal) -> float:
        return float(price.quantize(Decimal("0.01")))


class ErrorResponse(BaseModel):
    """Envelope used for every non-2xx response."""

    success: bool = False
    message: str
    errors: Optional[dict[str, list[str]]] = None


class HealthResponse(BaseModel):
    status: str
