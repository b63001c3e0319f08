"""Tests for display functions."""

from io import StringIO
from pathlib import Path
from unittest.mock import MagicMock

from rich.console import Console

from podexport.config import CLIArgs, ExportOptions
from podexport.models.episode import ExportPlan, ExportReport, ResolvedEpisode
from podexport.ui.console import ConsoleUI
from podexport.ui.display import (
    ROOT_FOLDER_LABEL,
    display_configuration,
    display_summary,
    display_tree,
    format_file_count,
    generate_tree_structure,
)


def episode(identifier, group, name):
    return ResolvedEpisode(
        identifier=identifier,
        source_path=Path(f"/cache/{identifier}.mp3"),
        group_folder_name=group,
        export_file_name=name,
    )


def text_console(quiet=False):
    output = StringIO()
    return ConsoleUI(quiet=quiet, console=Console(file=output, width=120, color_system=None)), output


class TestFormatFileCount:
    """Tests for format_file_count function."""

    def test_singular(self):
        assert format_file_count(1) == "1 file"

    def test_plural(self):
        assert format_file_count(0) == "0 files"
        assert format_file_count(3) == "3 files"


class TestGenerateTreeStructure:
    """Tests for generate_tree_structure function."""

    def test_groups_by_folder(self):
        """Files are grouped under their podcast folder."""
        plan = ExportPlan([
            episode("a", "Tech Weekly", "One.mp3"),
            episode("b", "", "b.mp3"),
            episode("c", "Tech Weekly", "Two.mp3"),
        ])

        assert generate_tree_structure(plan) == {
            "Tech Weekly": ["One.mp3", "Two.mp3"],
            "": ["b.mp3"],
        }

    def test_empty_plan(self):
        assert generate_tree_structure(ExportPlan()) == {}


class TestDisplayTree:
    """Tests for display_tree function."""

    def test_shows_folders_and_files(self):
        """Folders and their files are printed."""
        console, output = text_console()

        display_tree(console, {"Tech Weekly": ["One.mp3"], "": ["b.mp3"]}, "/out")

        text = output.getvalue()
        assert "/out" in text
        assert "Tech Weekly" in text
        assert "One.mp3" in text
        assert ROOT_FOLDER_LABEL in text

    def test_truncates_long_folders(self):
        """Only the first files are listed."""
        console, output = text_console()
        files = [f"{i:02d}.mp3" for i in range(15)]

        display_tree(console, {"Show": files}, "/out", max_files_per_folder=10)

        text = output.getvalue()
        assert "09.mp3" in text
        assert "10.mp3" not in text
        assert "and 5 more" in text


class TestDisplayConfiguration:
    """Tests for display_configuration function."""

    def test_displays_normal_mode(self):
        """Displays configuration in normal mode."""
        console = MagicMock()
        options = ExportOptions(output_root=Path("/out"))

        display_configuration(CLIArgs(), options, console)

        console.print_panel.assert_called_once()
        content = console.print_panel.call_args[0][0]
        assert "Normal" in content
        assert "all episodes" in content

    def test_displays_simulation_mode(self):
        """Displays SIMULATION and the patterns in dry run."""
        console = MagicMock()
        options = ExportOptions(output_root=Path("/out"), patterns=["news"], dry_run=True)

        display_configuration(CLIArgs(dry_run=True), options, console)

        content = console.print_panel.call_args[0][0]
        assert "SIMULATION" in content
        assert "news" in content


class TestDisplaySummary:
    """Tests for display_summary function."""

    def test_shows_counts(self):
        """Prints the planned, copied and skipped counts."""
        console, output = text_console()
        plan = ExportPlan([episode("a", "", "a.mp3")], total_candidates=3)
        report = ExportReport(output_root=Path("/out"), planned=1, copied=0, skipped=1)

        display_summary(console, plan, report)

        text = output.getvalue()
        assert "Cached episodes: 3" in text
        assert "Exported: 0" in text
        assert "Skipped (already present): 1" in text
        assert "'/out'" in text

    def test_summary_shown_when_quiet(self):
        """The summary is printed even in quiet mode."""
        console, output = text_console(quiet=True)
        report = ExportReport(output_root=Path("/out"), planned=1, copied=1)

        display_summary(console, ExportPlan([episode("a", "", "a.mp3")], total_candidates=1), report)

        assert "Exported: 1" in output.getvalue()

    def test_dry_run_wording(self):
        """Dry run reports what would be exported."""
        console, output = text_console()
        report = ExportReport(output_root=Path("/out"), planned=2, copied=2)

        display_summary(console, ExportPlan(total_candidates=2), report, dry_run=True)

        text = output.getvalue()
        assert "Would export: 2" in text
        assert "SIMULATION" in text
