from __future__ import annotations

import argparse
import json
import os
from dataclasses import dataclass

from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session

from music_catalog import migrations
from music_catalog.logging import configure_logging, logger
from music_catalog.models import Album, Artist
from music_catalog.persistence import count, create, create_engine, create_sessionmaker, truncate
from music_catalog.settings import SETTINGS


@dataclass(frozen=True)
class AlbumSpec:
    name: str
    release_year: int


@dataclass(frozen=True)
class ArtistSpec:
    name: str
    genre: str
    albums: list[AlbumSpec]


CATALOG: list[ArtistSpec] = [
    ArtistSpec(
        name="Ke$ha",
        genre="pop",
        albums=[
            AlbumSpec(name="Animal", release_year=2010),
            AlbumSpec(name="Rainbow", release_year=2017),
        ],
    ),
    ArtistSpec(
        name="Frank Sinatra",
        genre="jazz",
        albums=[
            AlbumSpec(name="Frankly Sentimental", release_year=1949),
            AlbumSpec(name="Dedicated to You", release_year=1950),
        ],
    ),
    ArtistSpec(
        name="Caravan Palace",
        genre="electric-swing",
        albums=[
            AlbumSpec(name="Panic", release_year=2012),
            AlbumSpec(name="<|°_°|>", release_year=2015),
        ],
    ),
]


def seed_catalog(session: Session) -> None:
    """
    Create the demo artists, then their albums.

    There is no existence check: every call adds another full copy of the catalog.
    """
    artists = [create(session, Artist, {"name": a.name, "genre": a.genre}) for a in CATALOG]

    for spec, artist in zip(CATALOG, artists):
        for album in spec.albums:
            create(session, Album, {"name": album.name, "release_year": album.release_year, "artist": artist})


def catalog_counts(session: Session) -> dict[str, int]:
    return {"artists": count(session, Artist), "albums": count(session, Album)}


def run_seed(*, database_url: str | None = None, reset: bool = False) -> None:
    engine = create_engine(database_url)
    try:
        with create_sessionmaker(engine).begin() as session:
            if reset:
                truncate(session)
                logger.info("catalog_reset")
            logger.info("seed_started", artists=len(CATALOG))
            seed_catalog(session)
            logger.info("seed_completed", counts=catalog_counts(session))
    finally:
        engine.dispose()


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Load the demo artist/album catalog.")
    parser.add_argument("--database-url", default=os.getenv("DATABASE_URL") or SETTINGS.database_url)
    parser.add_argument("--setup", action="store_true", help="Apply migrations (alembic upgrade head) before seeding.")
    parser.add_argument("--reset", action="store_true", help="Delete existing artists and albums before seeding.")
    parser.add_argument(
        "--log-level",
        type=str.lower,
        choices=["debug", "info", "warning", "error"],
        default=SETTINGS.log_level.lower(),
    )
    args = parser.parse_args(argv)

    configure_logging(args.log_level, json_logs=SETTINGS.log_json)

    if args.setup:
        migrations.upgrade(args.database_url)
    run_seed(database_url=args.database_url, reset=args.reset)

    engine = create_engine(args.database_url)
    try:
        with create_sessionmaker(engine)() as session:
            counts = catalog_counts(session)
    finally:
        engine.dispose()

    masked = make_url(args.database_url).render_as_string(hide_password=True)
    print(json.dumps({"database_url": masked, "counts": counts}, indent=2, default=str))


if __name__ == "__main__":
    main()
