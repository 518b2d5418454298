"""SQLAlchemy model mirroring the JSON song entries."""
from __future__ import annotations

from sqlalchemy import Column, Integer, String

from .session import Base


class Song(Base):
    __tablename__ = "songs"

    id = Column(Integer, primary_key=True, autoincrement=False)
    # keeps the JSON array order across full rewrites
    position = Column(Integer, nullable=False, index=True)
    title = Column(String(255), nullable=False)
    artist = Column(String(255), nullable=False)
    year = Column(Integer, nullable=False)
