"""Pytest configuration and fixtures."""

import sqlite3
from datetime import datetime, timezone
from pathlib import Path

import pytest

from podexport.library.locations import PodcastsLibrary
from podexport.models.episode import CachedFile, MetadataRecord


def create_podcasts_db(db_path: Path, podcasts):
    """
    Create a minimal MTLibrary.sqlite.

    Args:
        db_path: Database file to create.
        podcasts: List of (podcast title, [(cleaned title, uuid, pubdate seconds), ...]).
    """
    db_path.parent.mkdir(parents=True, exist_ok=True)
    with sqlite3.connect(db_path) as conn:
        conn.executescript("""
            CREATE TABLE ZMTPODCAST (Z_PK INTEGER PRIMARY KEY, ZTITLE TEXT);
            CREATE TABLE ZMTEPISODE (
                Z_PK INTEGER PRIMARY KEY,
                ZPODCAST INTEGER,
                ZCLEANEDTITLE TEXT,
                ZUUID TEXT,
                ZPUBDATE REAL
            );
        """)
        for pk, (podcast_title, episodes) in enumerate(podcasts, start=1):
            conn.execute("INSERT INTO ZMTPODCAST (Z_PK, ZTITLE) VALUES (?, ?)", (pk, podcast_title))
            for title, uuid, pubdate in episodes:
                conn.execute(
                    "INSERT INTO ZMTEPISODE (ZPODCAST, ZCLEANEDTITLE, ZUUID, ZPUBDATE) VALUES (?, ?, ?, ?)",
                    (pk, title, uuid, pubdate)
                )
        conn.commit()
    conn.close()


@pytest.fixture
def library(tmp_path):
    """Empty Podcasts group container with its cache folder."""
    podcasts_library = PodcastsLibrary(tmp_path / "243LU875E5.groups.com.apple.podcasts")
    podcasts_library.cache_dir.mkdir(parents=True)
    return podcasts_library


@pytest.fixture
def populated_library(library):
    """Podcasts container with a database and three cached episodes."""
    create_podcasts_db(library.database_path, [
        ("Tech Weekly", [
            ("Episode One", "abc123", 0),
            ("Episode Two", "def456", 86400 * 10 + 3600),
        ]),
        ("Daily News", [
            ("Morning Briefing", "ghi789", None),
        ]),
        ("Empty Show", []),
    ])
    for uuid in ("abc123", "def456", "ghi789", "xyz789"):
        (library.cache_dir / f"{uuid}.mp3").write_bytes(f"audio {uuid}".encode())
    return library


@pytest.fixture
def published_at():
    """A corrected publish date."""
    return datetime(2021, 6, 1, 8, 30, tzinfo=timezone.utc)


@pytest.fixture
def make_cached(tmp_path):
    """Factory creating a cached audio file and its CachedFile."""
    cache_dir = tmp_path / "cache"
    cache_dir.mkdir(exist_ok=True)

    def _make(identifier: str, content: bytes = b"fake audio") -> CachedFile:
        path = cache_dir / f"{identifier}.mp3"
        path.write_bytes(content)
        return CachedFile(identifier=identifier, source_path=path)

    return _make


@pytest.fixture
def no_tags():
    """Tag reader for files without readable tags."""
    return lambda path: None


@pytest.fixture
def sample_record(published_at):
    """Library record for the cached file abc123."""
    return MetadataRecord(
        identifier="abc123",
        group_name="Tech Weekly",
        cleaned_title="Episode One",
        published_at=published_at,
    )


@pytest.fixture
def create_db():
    """Factory creating a minimal Podcasts database."""
    return create_podcasts_db
