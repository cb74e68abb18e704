"""Game endpoints. Translates HTTP verbs to GameService calls and return values to status codes."""

from typing import Annotated

from fastapi import APIRouter, Depends, Path, Request, Response, status

from src.api.dependencies import get_game_service
from src.api.models import CreateGameRequest, ErrorResponse, GameResponse, UpdateGameRequest
from src.api.validation import ensure_valid
from src.services.game_service import GameService

router = APIRouter(
    prefix="/games",
    tags=["games"],
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)

# {id} has to be a positive integer that fits a database INTEGER column,
# anything else never reaches the route function
MAX_GAME_ID = 2**63 - 1
GameId = Annotated[int, Path(ge=1, le=MAX_GAME_ID, description="Positive game ID")]
Service = Annotated[GameService, Depends(get_game_service)]

NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get("", response_model=list[GameResponse])
def list_games(service: Service) -> list[GameResponse]:
    return service.list_games()


@router.get("/{game_id}", response_model=GameResponse, responses=NOT_FOUND)
def get_game(game_id: GameId, service: Service) -> GameResponse:
    return service.get_game(game_id)


@router.post(
    "",
    response_model=GameResponse,
    status_code=status.HTTP_201_CREATED,
)
def create_game(
    payload: CreateGameRequest, request: Request, response: Response, service: Service
) -> GameResponse:
    """Create a game. The Location header points at the new resource."""
    ensure_valid(payload)
    created = service.create_game(payload)
    response.headers["Location"] = str(request.url_for("get_game", game_id=created.id))
    return created


@router.put("/{game_id}", response_model=GameResponse, responses=NOT_FOUND)
def update_game(
    game_id: GameId, payload: UpdateGameRequest, service: Service
) -> GameResponse:
    """Replace every field of a game."""
    ensure_valid(payload)
    return service.update_game(game_id, payload)


@router.delete(
    "/{game_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
def delete_game(game_id: GameId, service: Service) -> None:
    service.delete_game(game_id)
