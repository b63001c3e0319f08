"""Display functions for podcast export output."""

from typing import Dict, List

from rich.tree import Tree

from podexport.config.cli import CLIArgs
from podexport.config.context import ExportOptions
from podexport.models.episode import ExportPlan, ExportReport
from podexport.ui.console import ConsoleUI

ROOT_FOLDER_LABEL = "(no podcast)"


def format_file_count(count: int) -> str:
    """
    Format a file count with pluralization.

    Examples:
        >>> format_file_count(1)
        '1 file'
        >>> format_file_count(3)
        '3 files'
    """
    return f"{count} file{'s' if count != 1 else ''}"


def generate_tree_structure(plan: ExportPlan) -> Dict[str, List[str]]:
    """
    Group the planned file names by destination folder.

    Args:
        plan: Export plan.

    Returns:
        Dict mapping folder names (empty for the output root) to file names.
    """
    tree_structure: Dict[str, List[str]] = {}
    for episode in plan:
        tree_structure.setdefault(episode.group_folder_name, []).append(episode.export_file_name)
    return tree_structure


def display_tree(
    console: ConsoleUI,
    tree_structure: Dict[str, List[str]],
    root_label: str,
    max_files_per_folder: int = 10
) -> None:
    """
    Display the planned export tree.

    Args:
        console: Console to print to.
        tree_structure: Dict mapping folder names to file lists.
        root_label: Label of the tree root (the output directory).
        max_files_per_folder: Maximum files to show per folder.
    """
    root_tree = Tree(f"📁 [bold cyan]{root_label}[/bold cyan]")

    for folder in sorted(tree_structure):
        files = sorted(tree_structure[folder])
        label = folder or ROOT_FOLDER_LABEL
        color = "cyan" if folder else "yellow"
        folder_node = root_tree.add(
            f"📁 [bold {color}]{label}[/bold {color}] [dim]({format_file_count(len(files))})[/dim]"
        )

        for file_name in files[:max_files_per_folder]:
            folder_node.add(f"🎧 [dim]{file_name}[/dim]")

        remaining = len(files) - max_files_per_folder
        if remaining > 0:
            folder_node.add(f"[dim]... and {remaining} more[/dim]")

    console.print(root_tree)


def display_configuration(cli_args: CLIArgs, options: ExportOptions, console: ConsoleUI) -> None:
    """
    Display the run configuration.

    Args:
        cli_args: Parsed CLI arguments.
        options: Resolved export options.
        console: Console UI instance.
    """
    mode = "[yellow]SIMULATION[/yellow]" if options.dry_run else "[green]Normal[/green]"
    patterns = ", ".join(options.patterns) if options.patterns else "all episodes"
    library = cli_args.library_dir or "auto-detected"

    console.print_panel(
        f"[bold]Export configuration[/bold]\n"
        f"Library: [cyan]{library}[/cyan]\n"
        f"Output: [cyan]{options.output_root}[/cyan]\n"
        f"Selection: {patterns}\n"
        f"Spaces replaced: {'yes' if options.replace_spaces else 'no'}\n"
        f"File times from publish date: {'yes' if options.update_timestamps else 'no'}\n"
        f"Mode: {mode}",
        title="Podcasts Export",
    )


def display_summary(console: ConsoleUI, plan: ExportPlan, report: ExportReport, dry_run: bool = False) -> None:
    """
    Display the final export summary.

    Args:
        console: Console UI instance.
        plan: Export plan that was executed.
        report: Export report.
        dry_run: Whether this was a dry run.
    """
    mode_text = " [dim](SIMULATION)[/dim]" if dry_run else ""
    exported_label = "Would export" if dry_run else "Exported"

    console.rule(f"[bold green]Summary{mode_text}[/bold green]")
    if plan.total_candidates != report.planned:
        console.print(f"[blue]Cached episodes:[/blue] {plan.total_candidates}")
    console.print(f"[blue]Planned:[/blue] {report.planned}")
    console.print(f"[green]{exported_label}:[/green] {report.copied}")
    if report.skipped > 0:
        console.print(f"[yellow]Skipped (already present):[/yellow] {report.skipped}")
    if report.failed > 0:
        console.print(f"[red]Failed:[/red] {report.failed}")
    console.print(f"[blue]Output:[/blue] '{report.output_root}'")
