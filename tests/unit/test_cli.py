"""Tests for CLI argument parsing."""

from datetime import date
from pathlib import Path

import pytest

from podexport.config.cli import (
    CLIArgs,
    args_to_cli_args,
    create_parser,
    get_output_dir_path,
    parse_arguments,
)
from podexport.config.settings import DEFAULT_OUTPUT_DIR


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self):
        """Creates an ArgumentParser."""
        parser = create_parser()
        assert parser.prog == "podexport"

    def test_has_required_arguments(self):
        """Parser has all required arguments."""
        args = create_parser().parse_args([])

        for name in ('outputdir', 'datesubdir', 'pattern', 'updateutime', 'nospaces',
                     'quiet', 'report', 'no_open', 'dry_run', 'library_dir', 'workers', 'debug'):
            assert hasattr(args, name)


class TestParseArguments:
    """Tests for parse_arguments function."""

    def test_default_values(self):
        """Returns correct default values."""
        args = parse_arguments([])

        assert args.outputdir == str(DEFAULT_OUTPUT_DIR)
        assert args.datesubdir is True
        assert args.pattern == []
        assert args.updateutime is False
        assert args.nospaces is False
        assert args.dry_run is False

    def test_no_datesubdir(self):
        """--no-datesubdir disables the date folder."""
        assert parse_arguments(['--no-datesubdir']).datesubdir is False

    def test_datesubdir_short_flag(self):
        """-d keeps the date folder."""
        assert parse_arguments(['-d']).datesubdir is True

    def test_repeatable_pattern(self):
        """-p may be given several times."""
        args = parse_arguments(['-p', 'news', '--pattern', 'tech'])
        assert args.pattern == ['news', 'tech']

    def test_short_flags(self):
        """Short flags map to their options."""
        args = parse_arguments(['-o', '/tmp/out', '-u', '-q', '-r', '-j', '4'])

        assert args.outputdir == '/tmp/out'
        assert args.updateutime is True
        assert args.quiet is True
        assert args.report is True
        assert args.workers == 4

    def test_invalid_workers(self):
        """A non-integer worker count is rejected."""
        with pytest.raises(SystemExit):
            parse_arguments(['--workers', 'many'])


class TestArgsToCliArgs:
    """Tests for args_to_cli_args function."""

    def test_defaults(self):
        """Converts default arguments."""
        cli_args = args_to_cli_args(parse_arguments([]))

        assert isinstance(cli_args, CLIArgs)
        assert cli_args.output_dir == DEFAULT_OUTPUT_DIR
        assert cli_args.date_subdir is True
        assert cli_args.open_output is True
        assert cli_args.library_dir is None
        assert cli_args.has_filters is False

    def test_blank_patterns_dropped(self):
        """Empty patterns don't count as filters."""
        cli_args = args_to_cli_args(parse_arguments(['-p', '', '-p', 'news']))

        assert cli_args.patterns == ['news']
        assert cli_args.has_filters is True

    def test_only_blank_pattern_means_no_filter(self):
        """A lone empty pattern keeps every episode."""
        cli_args = args_to_cli_args(parse_arguments(['-p', '']))
        assert cli_args.has_filters is False

    def test_expands_home(self):
        """A leading tilde is expanded."""
        cli_args = args_to_cli_args(parse_arguments(['-o', '~/exports', '--library-dir', '~/lib']))

        assert cli_args.output_dir == Path('~/exports').expanduser()
        assert cli_args.library_dir == Path('~/lib').expanduser()

    def test_flags(self):
        """Boolean flags are carried over."""
        cli_args = args_to_cli_args(parse_arguments(['--nospaces', '-u', '--no-open', '--dry-run', '--debug']))

        assert cli_args.no_spaces is True
        assert cli_args.update_utime is True
        assert cli_args.open_output is False
        assert cli_args.dry_run is True
        assert cli_args.debug is True


class TestGetOutputDirPath:
    """Tests for get_output_dir_path function."""

    def test_date_subdir(self):
        """Appends the YYYY.MM.DD folder."""
        result = get_output_dir_path(Path('/out'), True, today=date(2024, 3, 7))
        assert result == Path('/out/2024.03.07')

    def test_no_date_subdir(self):
        """Returns the base directory unchanged."""
        assert get_output_dir_path(Path('/out'), False) == Path('/out')

    def test_defaults_to_today(self):
        """Uses the current date when none is given."""
        result = get_output_dir_path(Path('/out'), True)
        assert result.name == date.today().strftime('%Y.%m.%d')
