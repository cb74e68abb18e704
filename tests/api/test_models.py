"""Unit tests for src/api/models.py"""

from decimal import Decimal

from src.api.models import CreateGameRequest, ErrorResponse, GameResponse, UpdateGameRequest


# -- Request models --
def test_request_accepts_camel_case() -> None:
    """Wire format uses camelCase field names."""
    request = CreateGameRequest.model_validate(
        {"name": "Game 1", "ageRating": "PEGI 18", "price": 59.99}
    )
    assert request.age_rating == "PEGI 18"
    assert request.price == Decimal("59.99")


def test_request_defaults() -> None:
    """Everything but the name may be omitted (and name is checked by the validation rules)."""
    request = UpdateGameRequest.model_validate({})
    assert request.name == ""
    assert request.genre == ""
    assert request.age_rating == ""
    assert request.price == Decimal("0")
    assert request.description == ""
    assert request.author == ""


# -- Response models --
def test_response_serialization() -> None:
    response = GameResponse(
        id=1,
        name="Game 1",
        genre="Action",
        age_rating="M",
        price=Decimal("59.99"),
        description="",
        author="Studio 1",
    )
    assert response.model_dump(mode="json", by_alias=True) == {
        "id": 1,
        "name": "Game 1",
        "genre": "Action",
        "ageRating": "M",
        "price": 59.99,
        "description": "",
        "author": "Studio 1",
    }


def test_response_price_has_two_decimals() -> None:
    response = GameResponse(
        id=1,
        name="Cheap",
        genre="",
        age_rating="",
        price=Decimal("10"),
        description="",
        author="",
    )
    assert response.model_dump(mode="json")["price"] == 10.0
    assert response.price == Decimal("10")


def test_error_envelope() -> None:
    envelope = ErrorResponse(message="Game with id 1 was not found.")
    assert envelope.model_dump(exclude_none=True) == {
        "success": False,
        "message": "Game with id 1 was not found.",
    }
