"""Tests for locating the Podcasts library."""

import pytest

from podexport.library.exceptions import LibraryNotFoundError
from podexport.library.locations import (
    PodcastsLibrary,
    find_podcasts_container,
    locate_library,
)


class TestPodcastsLibrary:
    """Tests for the PodcastsLibrary paths."""

    def test_database_path(self, tmp_path):
        """The database lives under Documents."""
        library = PodcastsLibrary(tmp_path)
        assert library.database_path == tmp_path / "Documents" / "MTLibrary.sqlite"

    def test_cache_dir(self, tmp_path):
        """Episodes live under Library/Cache."""
        library = PodcastsLibrary(tmp_path)
        assert library.cache_dir == tmp_path / "Library" / "Cache"


class TestFindPodcastsContainer:
    """Tests for find_podcasts_container function."""

    def test_finds_container(self, tmp_path):
        """Returns the folder containing the Podcasts marker."""
        (tmp_path / "group.com.apple.notes").mkdir()
        (tmp_path / "243LU875E5.groups.com.apple.podcasts").mkdir()

        result = find_podcasts_container(tmp_path)

        assert result == tmp_path / "243LU875E5.groups.com.apple.podcasts"

    def test_no_match_raises(self, tmp_path):
        """Raises when no container matches."""
        (tmp_path / "group.com.apple.notes").mkdir()

        with pytest.raises(LibraryNotFoundError):
            find_podcasts_container(tmp_path)

    def test_missing_folder_raises_with_cause(self, tmp_path):
        """Raises with the OS error chained when the folder is missing."""
        with pytest.raises(LibraryNotFoundError) as exc_info:
            find_podcasts_container(tmp_path / "missing")

        assert isinstance(exc_info.value.__cause__, OSError)


class TestLocateLibrary:
    """Tests for locate_library function."""

    def test_uses_override(self, tmp_path):
        """An explicit directory is used as is."""
        assert locate_library(tmp_path) == PodcastsLibrary(tmp_path)

    def test_missing_override_raises(self, tmp_path):
        """A missing override directory raises."""
        with pytest.raises(LibraryNotFoundError):
            locate_library(tmp_path / "missing")

    def test_auto_detects(self, tmp_path, monkeypatch):
        """Without override the group containers are searched."""
        container = tmp_path / "243LU875E5.groups.com.apple.podcasts"
        container.mkdir()
        monkeypatch.setattr(
            "podexport.library.locations.find_podcasts_container",
            lambda: container,
        )

        assert locate_library().base_dir == container
