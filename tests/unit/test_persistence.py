from __future__ import annotations

import pytest
from sqlalchemy.exc import IntegrityError


def test_create_assigns_ids_and_returns_handle(session) -> None:
    from music_catalog.models import Album, Artist
    from music_catalog.persistence import create

    artist = create(session, Artist, {"name": "Ke$ha", "genre": "pop"})
    assert artist.id is not None

    album = create(session, Album, {"name": "Animal", "release_year": 2010, "artist": artist})
    assert album.id is not None
    assert album.artist_id == artist.id
    assert artist.albums == [album]


def test_create_sets_timestamps(session) -> None:
    from music_catalog.models import Artist
    from music_catalog.persistence import create

    artist = create(session, Artist, {"name": "Frank Sinatra", "genre": "jazz"})
    assert artist.created_at is not None
    assert artist.updated_at is not None


def test_create_propagates_integrity_error(session) -> None:
    from music_catalog.models import Artist
    from music_catalog.persistence import create

    with pytest.raises(IntegrityError):
        create(session, Artist, {"name": "Nameless", "genre": None})


def test_create_rejects_unknown_attribute(session) -> None:
    from music_catalog.models import Artist
    from music_catalog.persistence import create

    with pytest.raises(TypeError):
        create(session, Artist, {"name": "Caravan Palace", "genre": "electric-swing", "label": "Wagram"})


def test_count_and_truncate(session) -> None:
    from music_catalog.models import Album, Artist
    from music_catalog.persistence import count, create, truncate

    artist = create(session, Artist, {"name": "Caravan Palace", "genre": "electric-swing"})
    create(session, Album, {"name": "Panic", "release_year": 2012, "artist": artist})
    assert count(session, Artist) == 1
    assert count(session, Album) == 1

    truncate(session)
    assert count(session, Artist) == 0
    assert count(session, Album) == 0


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("postgresql://u:p@h:5432/db", "postgresql+psycopg://u:p@h:5432/db"),
        ("postgresql+psycopg2://u:p@h/db", "postgresql+psycopg://u:p@h/db"),
        ("postgresql+psycopg://u:p@h/db", "postgresql+psycopg://u:p@h/db"),
        ("sqlite:///music.db", "sqlite:///music.db"),
    ],
)
def test_normalize_database_url(raw: str, expected: str) -> None:
    from music_catalog.persistence import normalize_database_url

    assert normalize_database_url(raw) == expected
