from __future__ import annotations

import sys
from pathlib import Path

import pytest


# Ensure the repo root is importable (so `import music_catalog` works without an install).
REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT))


@pytest.fixture()
def database_url(tmp_path: Path) -> str:
    return f"sqlite:///{tmp_path / 'music_app.sqlite3'}"


@pytest.fixture()
def empty_db(database_url: str) -> str:
    from music_catalog.models import Base
    from music_catalog.persistence import create_engine

    engine = create_engine(database_url)
    Base.metadata.create_all(engine)
    engine.dispose()
    return database_url


@pytest.fixture()
def session(empty_db: str):
    from music_catalog.persistence import create_engine, create_sessionmaker

    engine = create_engine(empty_db)
    with create_sessionmaker(engine)() as s:
        yield s
    engine.dispose()


@pytest.fixture(scope="session")
def postgres_url() -> str:
    from docker.errors import DockerException
    from testcontainers.postgres import PostgresContainer

    try:
        container = PostgresContainer("postgres:16").start()
    except DockerException as exc:
        pytest.skip(f"docker unavailable: {exc}")
    try:
        # testcontainers hands back a psycopg2 URL; the engine factory normalizes it to psycopg3.
        yield container.get_connection_url()
    finally:
        container.stop()


@pytest.fixture()
def migrated_postgres(postgres_url: str) -> str:
    from music_catalog import migrations

    migrations.upgrade(postgres_url)
    yield postgres_url
    migrations.downgrade(postgres_url)
