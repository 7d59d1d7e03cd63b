"""Save and load boards by name in a SQL database (SQLAlchemy)."""

import datetime
import logging

from sqlalchemy import Column, DateTime, Integer, String, Text, create_engine
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import declarative_base, sessionmaker

from ..Board import Board


LOGGER = logging.getLogger(__name__)

DEFAULT_DATABASE_URL = "sqlite:///gomoku.db"

Base = declarative_base()


def _utcnow():
    return datetime.datetime.now(datetime.timezone.utc).replace(tzinfo=None)


class BoardRecord(Base):
    __tablename__ = "boards"

    name = Column(String, primary_key=True)
    rows = Column(Integer, nullable=False)
    columns = Column(Integer, nullable=False)
    board_data = Column(Text, nullable=False)
    created_at = Column(DateTime, nullable=False, default=_utcnow)


class BoardStore:
    def __init__(self, url=DEFAULT_DATABASE_URL, engine=None):
        self.engine = engine or create_engine(url)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def initialize(self):
        """Create the boards table if it does not exist yet."""
        Base.metadata.create_all(bind=self.engine)
        LOGGER.info("Database ready at %s", self.engine.url)

    @staticmethod
    def _check_name(name):
        if not name or not name.strip():
            raise ValueError("board name must not be blank")
        return name.strip()

    def save(self, name, board):
        """Insert or overwrite the board stored under `name`."""
        name = self._check_name(name)
        try:
            with self.SessionLocal() as db:
                record = db.get(BoardRecord, name)
                if record is None:
                    record = BoardRecord(name=name)
                    db.add(record)
                record.rows = board.rows
                record.columns = board.columns
                record.board_data = board.serialize()
                record.created_at = _utcnow()
                db.commit()
        except SQLAlchemyError:
            LOGGER.exception("Failed to save board '%s'", name)
            return False
        LOGGER.info("Board '%s' saved", name)
        return True

    def load(self, name):
        """Return the stored Board, or None if missing or unreadable."""
        name = self._check_name(name)
        try:
            with self.SessionLocal() as db:
                record = db.get(BoardRecord, name)
                if record is None:
                    LOGGER.warning("No board found with name '%s'", name)
                    return None
                rows, columns, data = record.rows, record.columns, record.board_data
        except SQLAlchemyError:
            LOGGER.exception("Failed to load board '%s'", name)
            return None
        board = Board.from_serialized(rows, columns, data)
        LOGGER.info("Board '%s' loaded (%dx%d)", name, rows, columns)
        return board

    def list_names(self):
        """Saved board names, most recently saved first."""
        try:
            with self.SessionLocal() as db:
                names = [
                    name
                    for (name,) in db.query(BoardRecord.name).order_by(
                        BoardRecord.created_at.desc(), BoardRecord.name
                    )
                ]
        except SQLAlchemyError:
            LOGGER.exception("Failed to list boards")
            return []
        LOGGER.info("Retrieved %d board names", len(names))
        return names

    def delete(self, name):
        name = self._check_name(name)
        try:
            with self.SessionLocal() as db:
                deleted = db.query(BoardRecord).filter(BoardRecord.name == name).delete()
                db.commit()
        except SQLAlchemyError:
            LOGGER.exception("Failed to delete board '%s'", name)
            return False
        if not deleted:
            LOGGER.warning("No board found with name '%s' to delete", name)
            return False
        LOGGER.info("Board '%s' deleted", name)
        return True
