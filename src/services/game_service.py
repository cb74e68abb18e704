"""Orchestration of communication from API router to persistence layer (and the reverse direction)."""

import logging
from typing import Optional

from src.api.models import CreateGameRequest, GameFields, GameResponse, UpdateGameRequest
from src.core.exceptions import BadRequestError, NotFoundError
from src.db.repository import Repository
from src.db.schema import Game

RESOURCE_NAME = "Game"


class GameService:
    """Business rules for the Game resource: id checks, existence checks, mapping and logging."""

    def __init__(
        self, repository: Repository[Game], logger: Optional[logging.Logger] = None
    ) -> None:
        self.repo = repository
        self.logger = logger or logging.getLogger(__name__)

    # -- API routes logic ---
    def list_games(self) -> list[GameResponse]:
        """Every stored game."""
        return [self._create_game_response(game) for game in self.repo.get_all()]

    def get_game(self, game_id: int) -> GameResponse:
        """Single game by ID."""
        game = self._fetch_game(game_id)
        return self._create_game_response(game)

    def create_game(self, request: CreateGameRequest) -> GameResponse:
        """
        Store a new game.
        ----
        Field rules are checked at the API boundary before this gets called.
        """
        game = Game()
        self._apply_fields(game, request)
        stored_game = self.repo.add(game)

        self.logger.info(f"Created game with ID: {stored_game.id}")
        return self._create_game_response(stored_game)

    def update_game(self, game_id: int, request: UpdateGameRequest) -> GameResponse:
        """Overwrite every field of an existing game (ID excluded). There is no partial update."""
        game = self._fetch_game(game_id)
        self._apply_fields(game, request)
        updated_game = self.repo.update(game)

        self.logger.info(f"Updated game with ID: {game_id}")
        return self._create_game_response(updated_game)

    def delete_game(self, game_id: int) -> None:
        """Handle a request to delete a Game record."""
        game = self._fetch_game(game_id)
        self.repo.delete(game)

        self.logger.info(f"Deleted game with ID: {game_id}")

    # -- Internal helpers --
    def _fetch_game(self, game_id: int) -> Game:
        """Validate the ID, then attempt to find the game in the repository and raise error if it fails."""
        if game_id <= 0:
            raise BadRequestError("Game ID must be a positive value.")

        game = self.repo.get_by_id(game_id)
        if game is None:
            raise NotFoundError(RESOURCE_NAME, game_id)
        return game

    @staticmethod
    def _apply_fields(game: Game, fields: GameFields) -> None:
        """Copy every request field onto the entity. The ID is never touched."""
        game.name = fields.name
        game.genre = fields.genre
        game.age_rating = fields.age_rating
        game.price = fields.price
        game.description = fields.description
        game.author = fields.author

    @staticmethod
    def _create_game_response(game: Game) -> GameResponse:
        """Convert a stored Game into a GameResponse."""
        return GameResponse(
            id=game.id,
            name=game.name,
            genre=game.genre,
            age_rating=game.age_rating,
            price=game.price,
            description=game.description,
            author=game.author,
        )
