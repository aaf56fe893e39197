"""Rules commands for inspecting and editing manufacturing rules.

This module provides the `rules` command group. Every subcommand works on
the rules document at ``--rules`` (default ``config/bom-rules.json``).
"""

import json
from pathlib import Path
from typing import Annotated

import typer

from casework.application.config import DEFAULT_RULES_PATH, RuleStore, RulesError

rules_app = typer.Typer(
    name="rules",
    help="Inspect and edit the manufacturing rules document.",
)

RulesPathOption = Annotated[
    Path,
    typer.Option("--rules", "-r", help="Path to the rules JSON document"),
]


def _echo_json(data: object) -> None:
    typer.echo(json.dumps(data, indent=2, ensure_ascii=False))


def _display_rules_error(error: RulesError) -> None:
    typer.echo(f"Error: {error}", err=True)


@rules_app.command(name="show")
def show_rules(
    section: Annotated[
        str | None,
        typer.Option("--section", "-s", help="Only show one top-level section"),
    ] = None,
    rules_path: RulesPathOption = DEFAULT_RULES_PATH,
) -> None:
    """Show the effective rules (document merged over defaults).

    Example:
        casework rules show --section construction
    """
    store = RuleStore(rules_path)
    if section is None:
        _echo_json(store.get().to_dict())
        return
    try:
        _echo_json(store.get_section(section))
    except RulesError as e:
        _display_rules_error(e)
        raise typer.Exit(code=1)


@rules_app.command(name="update")
def update_rules(
    patch_file: Annotated[
        Path,
        typer.Argument(help="JSON file with the partial rules to merge"),
    ],
    section: Annotated[
        str | None,
        typer.Option("--section", "-s", help="Apply the patch to one section"),
    ] = None,
    rules_path: RulesPathOption = DEFAULT_RULES_PATH,
) -> None:
    """Deep-merge a partial rules document and save the result.

    Examples:
        casework rules update patch.json
        casework rules update door-gap.json --section construction
    """
    try:
        patch = json.loads(patch_file.read_text(encoding="utf-8"))
    except OSError as e:
        typer.echo(f"Error: Could not read file: {e}", err=True)
        raise typer.Exit(code=1)
    except json.JSONDecodeError as e:
        typer.echo(f"Error: Invalid JSON in {patch_file}: {e}", err=True)
        raise typer.Exit(code=1)

    if not isinstance(patch, dict):
        typer.echo("Error: Patch must be a JSON object", err=True)
        raise typer.Exit(code=1)

    store = RuleStore(rules_path)
    try:
        store.update(patch, section=section)
    except RulesError as e:
        _display_rules_error(e)
        raise typer.Exit(code=1)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo(f"Updated: {store.path}")


@rules_app.command(name="reset")
def reset_rules(rules_path: RulesPathOption = DEFAULT_RULES_PATH) -> None:
    """Overwrite the rules document with the built-in defaults."""
    store = RuleStore(rules_path)
    try:
        store.reset()
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Reset: {store.path}")


@rules_app.command(name="reload")
def reload_rules(rules_path: RulesPathOption = DEFAULT_RULES_PATH) -> None:
    """Re-read the rules document and report the key settings."""
    rules = RuleStore(rules_path).reload()
    typer.echo(f"Door gap: {rules.construction.door_gap:g} mm")
    typer.echo(f"Body thickness: {rules.materials.body.thickness:g} mm")
    typer.echo(
        f"Sheet size: {rules.materials.sheet_size.width:g} x "
        f"{rules.materials.sheet_size.height:g} mm"
    )


@rules_app.command(name="path")
def rules_path_command(rules_path: RulesPathOption = DEFAULT_RULES_PATH) -> None:
    """Print the rules document location."""
    typer.echo(str(rules_path.resolve()))
