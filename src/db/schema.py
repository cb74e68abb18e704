"""Database tables / schema"""

from decimal import Decimal

from sqlalchemy import Numeric, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column


class Base(DeclarativeBase):
    pass


class Game(Base):
    __tablename__ = "games"
    # never hand out the id of a deleted row again
    __table_args__ = {"sqlite_autoincrement": True}

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(200))
    genre: Mapped[str] = mapped_column(String(100), default="")
    age_rating: Mapped[str] = mapped_column(String(10), default="")
    price: Mapped[Decimal] = mapped_column(Numeric(18, 2), default=Decimal("0"))
    description: Mapped[str] = mapped_column(String(1000), default="")
    author: Mapped[str] = mapped_column(String(200), default="")

    def __repr__(self) -> str:
        return f"Game(id={self.id!r}, name={self.name!r})"
