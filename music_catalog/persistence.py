from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

import sqlalchemy as sa
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker

from music_catalog.logging import logger
from music_catalog.models import Album, Artist, Base
from music_catalog.settings import SETTINGS

T = TypeVar("T", bound=Base)


def normalize_database_url(url: str) -> str:
    # Seeding uses the sync psycopg3 driver; testcontainers and libpq-style URLs name psycopg2 or no driver.
    url = url.replace("postgresql+psycopg2://", "postgresql+psycopg://")
    if url.startswith("postgresql://"):
        url = url.replace("postgresql://", "postgresql+psycopg://", 1)
    return url


def create_engine(database_url: str | None = None) -> Engine:
    return sa.create_engine(normalize_database_url(database_url or SETTINGS.database_url), future=True)


def create_sessionmaker(engine: Engine) -> sessionmaker[Session]:
    return sessionmaker(engine, expire_on_commit=False)


def create(session: Session, entity_type: type[T], attributes: Mapping[str, Any]) -> T:
    """
    Persist one record and return it with its database-assigned id.

    Whatever the ORM or driver raises (constraint violations, lost connections) propagates as is.
    """
    record = entity_type(**attributes)
    session.add(record)
    session.flush()
    logger.debug("record_created", table=entity_type.__tablename__, id=record.id)
    return record


def count(session: Session, entity_type: type[Base]) -> int:
    return session.execute(sa.select(sa.func.count()).select_from(entity_type)).scalar_one()


def truncate(session: Session) -> None:
    # Albums reference artists, so they go first.
    session.execute(sa.delete(Album))
    session.execute(sa.delete(Artist))
