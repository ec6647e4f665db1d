from __future__ import annotations

from datetime import UTC, datetime

import sqlalchemy as sa
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


def _now() -> datetime:
    return datetime.now(tz=UTC)


class Base(DeclarativeBase):
    pass


class Artist(Base):
    __tablename__ = "artists"

    id: Mapped[int] = mapped_column(sa.Integer(), primary_key=True)
    name: Mapped[str] = mapped_column(sa.Text(), nullable=False)
    genre: Mapped[str] = mapped_column(sa.Text(), nullable=False)
    created_at: Mapped[datetime] = mapped_column(sa.DateTime(timezone=True), nullable=False, default=_now)
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), nullable=False, default=_now, onupdate=_now
    )

    albums: Mapped[list[Album]] = relationship(back_populates="artist")

    def __repr__(self) -> str:
        return f"<Artist {self.id}: {self.name}>"


class Album(Base):
    __tablename__ = "albums"
    __table_args__ = (sa.Index("idx_albums_artist_id", "artist_id"),)

    id: Mapped[int] = mapped_column(sa.Integer(), primary_key=True)
    name: Mapped[str] = mapped_column(sa.Text(), nullable=False)
    release_year: Mapped[int] = mapped_column(sa.Integer(), nullable=False)
    artist_id: Mapped[int] = mapped_column(sa.Integer(), sa.ForeignKey("artists.id"), nullable=False)
    created_at: Mapped[datetime] = mapped_column(sa.DateTime(timezone=True), nullable=False, default=_now)
    updated_at: Mapped[datetime] = mapped_column(
        sa.DateTime(timezone=True), nullable=False, default=_now, onupdate=_now
    )

    artist: Mapped[Artist] = relationship(back_populates="albums")

    def __repr__(self) -> str:
        return f"<Album {self.id}: {self.name} ({self.release_year})>"
