#!/usr/bin/env python3
"""
Target Menu CLI

Builds a shortcut menu from a list of build target names (one per line), read
from a file or from stdin.

Commands:
    show    - Print the laid-out menu
    groups  - Print a summary table of the groups
    resolve - Print the target bound to a shortcut

Examples:\n

    make -qp | awk -F: '/^[a-z][^$#\\/\\t=]*:/ {print $1}' | build_menu.py show

    build_menu.py show targets.txt --preset layout_wide     # Wide layout

    build_menu.py groups targets.txt                        # Group summary

    build_menu.py resolve bd targets.txt                    # Which target is "bd"?
"""

from pathlib import Path
from typing import List, Optional

import typer
from dotenv import load_dotenv
from typing_extensions import Annotated

from tamer.contexts.layout import render_grid
from tamer.contexts.menu import build_menu, load_menu_config
from tamer.contexts.menu.logger import setup_menu_logger
from tamer.utils.exceptions import ConfigurationError
from tamer.utils.report_formatter import Column, TableFormatter, format_share

load_dotenv()

app = typer.Typer(
    help="Organize build targets into a shortcut menu",
    add_completion=False,
    invoke_without_command=True,
)

TargetsFile = Annotated[
    Optional[Path],
    typer.Argument(
        help="File with one target name per line (default: stdin)",
        exists=True,
        dir_okay=False,
    ),
]
ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", help="YAML file with menu settings", exists=True, dir_okay=False),
]
PresetOption = Annotated[
    Optional[List[str]],
    typer.Option("--preset", "-p", help="Preset to apply (repeatable, e.g. layout_wide)"),
]
VerboseOption = Annotated[
    bool,
    typer.Option("--verbose", "-v", help="Show debug logging on stderr"),
]


@app.callback()
def main(ctx: typer.Context):
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


def _read_names(targets_file: Optional[Path]) -> List[str]:
    if targets_file is None:
        text = typer.get_text_stream("stdin").read()
    else:
        text = targets_file.read_text(encoding="utf-8")
    return [line.strip() for line in text.splitlines()]


def _build(targets_file, config_path, presets, overrides, log_dir=None, verbose=False):
    """Load settings and names, then build the menu; exits with code 1 on bad settings."""
    setup_menu_logger(log_dir, presets=presets or [], verbose=verbose)

    try:
        config = load_menu_config(config_path, presets=presets or [], overrides=overrides)
        return build_menu(_read_names(targets_file), config)
    except ConfigurationError as e:
        typer.secho(f"Configuration error: {e}", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)


@app.command("show")
def show_command(
    targets_file: TargetsFile = None,
    config_path: ConfigOption = None,
    presets: PresetOption = None,
    width: Annotated[
        Optional[int],
        typer.Option("--width", "-w", help="Available width in characters", min=1),
    ] = None,
    columns: Annotated[
        Optional[int],
        typer.Option("--columns", "-c", help="Maximum number of columns", min=1),
    ] = None,
    spread: Annotated[
        Optional[bool],
        typer.Option("--spread/--no-spread", help="Spread columns over the full width"),
    ] = None,
    prefix_keys: Annotated[
        Optional[bool],
        typer.Option(
            "--prefix-keys/--no-prefix-keys",
            help="Prefix target shortcuts with their group shortcut",
        ),
    ] = None,
    heading: Annotated[
        Optional[str],
        typer.Option("--heading", help="Heading shown above the menu"),
    ] = None,
    log_dir: Annotated[
        Optional[Path],
        typer.Option("--log-dir", help="Write a debug log to this directory", file_okay=False),
    ] = None,
    verbose: VerboseOption = False,
):
    """
    Print the target menu.

    Examples:\n

        $ build_menu.py show targets.txt                   # Default layout

        $ build_menu.py show targets.txt -w 120 -c 3       # At most 3 columns in 120 chars

        $ build_menu.py show targets.txt --no-prefix-keys  # Single-key target shortcuts
    """
    overrides = {
        "width": width,
        "column_limit": columns,
        "spread_columns": spread,
        "prefix_target_keys": prefix_keys,
        "heading": heading,
    }
    menu = _build(targets_file, config_path, presets, overrides, log_dir, verbose)

    if menu.grid.is_empty:
        typer.secho("No targets found", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    typer.echo(render_grid(menu.grid))


@app.command("groups")
def groups_command(
    targets_file: TargetsFile = None,
    config_path: ConfigOption = None,
    presets: PresetOption = None,
    verbose: VerboseOption = False,
):
    """
    Print a summary table of the groups.

    Examples:\n

        $ build_menu.py groups targets.txt

        $ build_menu.py groups targets.txt -p grouping_eager
    """
    menu = _build(targets_file, config_path, presets, overrides=None, verbose=verbose)
    grouped = menu.grouped
    total = len(grouped.all_targets())

    if not total:
        typer.secho("No targets found", fg=typer.colors.YELLOW, err=True)
        raise typer.Exit(code=1)

    formatter = TableFormatter(
        [Column("Key"), Column("Group"), Column("Targets", ">"), Column("Share", ">")]
    )
    for group in grouped:
        formatter.add_row(
            [
                menu.group_keys[group.name].key,
                group.name,
                len(group),
                format_share(len(group), total),
            ]
        )
    formatter.add_summary(f"{total} targets in {len(grouped)} groups")

    typer.echo(formatter.render())


@app.command("resolve")
def resolve_command(
    shortcut: Annotated[str, typer.Argument(help="Shortcut sequence, e.g. 'bd'")],
    targets_file: TargetsFile = None,
    config_path: ConfigOption = None,
    presets: PresetOption = None,
    verbose: VerboseOption = False,
):
    """
    Print the target bound to a shortcut.

    Examples:\n

        $ build_menu.py resolve bd targets.txt

        $ build_menu.py resolve r targets.txt -p keys_bare
    """
    menu = _build(targets_file, config_path, presets, overrides=None, verbose=verbose)
    target = menu.resolve(shortcut)

    if target is None:
        typer.secho(f"No target bound to '{shortcut}'", fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    typer.echo(target)


if __name__ == "__main__":
    app()
