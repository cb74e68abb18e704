"""FastAPI dependencies wiring a request's database session to the service layer."""

from fastapi import Depends
from sqlalchemy.orm import Session

from src.db.database import get_db
from src.db.schema import Game
from src.db.sql_repository import SQLRepository
from src.services.game_service import GameService


def get_game_service(db: Session = Depends(get_db)) -> GameService:
    return GameService(SQLRepository(db, Game))
