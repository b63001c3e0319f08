"""Read-only access to the Podcasts SQLite library."""

import sqlite3
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional

from loguru import logger

from podexport.config.settings import PODCASTS_SELECT_SQL, PUBLISHED_AT_FORMAT
from podexport.library.exceptions import MetadataSourceError
from podexport.models.episode import MetadataRecord


def parse_published_at(value: Optional[str]) -> Optional[datetime]:
    """
    Parse a corrected publish date returned by the library query.

    Args:
        value: 'YYYY-MM-DD HH:MM:SS' string in UTC, or None.

    Returns:
        Timezone-aware datetime, or None if missing or malformed.
    """
    if not value:
        return None
    try:
        return datetime.strptime(value, PUBLISHED_AT_FORMAT).replace(tzinfo=timezone.utc)
    except ValueError:
        logger.debug(f"Unparseable publish date: {value!r}")
        return None


class MetadataDB:
    """
    Reader for the Podcasts app episode library.

    The database belongs to the Podcasts app, so it is opened read-only
    and never modified.

    Attributes:
        db_path: Path to MTLibrary.sqlite.
        conn: Active database connection, or None if closed.
    """

    def __init__(self, db_path: Path) -> None:
        """
        Open the library.

        Args:
            db_path: Path to the SQLite database file.

        Raises:
            MetadataSourceError: If the database can't be opened.
        """
        self.db_path = db_path
        self.conn: Optional[sqlite3.Connection] = None
        self._connect()

    def _connect(self) -> None:
        """Establish a read-only connection."""
        if not self.db_path.is_file():
            raise MetadataSourceError(f"Podcasts database not found: {self.db_path}")
        try:
            self.conn = sqlite3.connect(f"{self.db_path.resolve().as_uri()}?mode=ro", uri=True)
        except sqlite3.Error as e:
            raise MetadataSourceError(f"Could not open podcasts database {self.db_path}") from e

    def fetch_records(self) -> List[MetadataRecord]:
        """
        Run the podcast/episode join.

        Rows without an episode identifier (podcasts with no episodes)
        are dropped.

        Returns:
            List of MetadataRecord in query order.

        Raises:
            MetadataSourceError: If the query fails.
        """
        if not self.conn:
            raise MetadataSourceError("Podcasts database is closed")

        cursor = self.conn.cursor()
        try:
            cursor.execute(PODCASTS_SELECT_SQL)
            rows = cursor.fetchall()
        except sqlite3.Error as e:
            raise MetadataSourceError(f"Could not query podcasts database {self.db_path}") from e

        records = [
            MetadataRecord(
                identifier=uuid,
                group_name=podcast,
                cleaned_title=title,
                published_at=parse_published_at(date),
            )
            for podcast, title, uuid, date in rows
            if uuid
        ]
        logger.debug(f"{len(records)} episode records read from {self.db_path.name}")
        return records

    def close(self) -> None:
        """Close the database connection."""
        if self.conn:
            self.conn.close()
            self.conn = None

    def __enter__(self) -> "MetadataDB":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()


def load_metadata_records(db_path: Path) -> List[MetadataRecord]:
    """
    Load episode metadata, degrading to an empty list on failure.

    Exports still work without the database: every file then falls
    back to its embedded title tag or its identifier.

    Args:
        db_path: Path to MTLibrary.sqlite.

    Returns:
        List of MetadataRecord, empty if the database is unusable.
    """
    try:
        with MetadataDB(db_path) as db:
            return db.fetch_records()
    except MetadataSourceError as e:
        cause = f" ({e.__cause__})" if e.__cause__ else ""
        logger.warning(f"Could not fetch data from podcasts database: {e}{cause}")
        return []
