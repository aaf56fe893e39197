"""Typer CLI for cabinet BOM and drawing generation."""

import json
import logging
from pathlib import Path
from typing import Annotated

import typer

from casework.application import (
    GenerationOptions,
    GenerationOutput,
    ServiceFactory,
    normalize_view_name,
)
from casework.application.config import (
    DEFAULT_RULES_PATH,
    ConfigError,
    config_to_design,
    load_design,
)
from casework.cli.commands import handle_multi_format_export, rules_app
from casework.infrastructure.exporters import BomExporter
from casework.infrastructure.exporters.bom import OUTPUT_FORMATS

app = typer.Typer(
    name="casework",
    help="Generate cabinet bills of materials and 2D drawings from design documents.",
)

# Register rules subcommand group
app.add_typer(rules_app, name="rules")

DesignArgument = Annotated[
    Path,
    typer.Argument(help="Path to the JSON design document"),
]
RulesPathOption = Annotated[
    Path,
    typer.Option("--rules", "-r", help="Path to the rules JSON document"),
]


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Enable debug logging"),
    ] = False,
) -> None:
    """Generate cabinet bills of materials and 2D drawings."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


def _display_config_error(error: ConfigError) -> None:
    typer.echo(f"Error: {error}", err=True)
    if error.error_type == "json_parse":
        for detail in error.details:
            typer.echo(
                f"  Line {detail.get('line', '?')}, column {detail.get('column', '?')}",
                err=True,
            )


def _generate(
    design_file: Path,
    rules_path: Path,
    options: GenerationOptions,
) -> GenerationOutput:
    """Load a design document and run the full generation pipeline."""
    try:
        config = load_design(design_file)
    except ConfigError as e:
        _display_config_error(e)
        raise typer.Exit(code=1)

    command = ServiceFactory(rules_path=rules_path).create_generate_command()
    try:
        return command.execute(config_to_design(config), options)
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _write_or_echo(content: str, output_file: Path | None) -> None:
    if output_file is None:
        typer.echo(content)
        return
    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        output_file.write_text(content, encoding="utf-8")
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"Written: {output_file}")


@app.command()
def bom(
    design_file: DesignArgument,
    output_format: Annotated[
        str,
        typer.Option("--format", "-f", help="Output format: text, csv, json"),
    ] = "text",
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write to a file instead of stdout"),
    ] = None,
    rules_path: RulesPathOption = DEFAULT_RULES_PATH,
) -> None:
    """Generate the bill of materials for a design.

    Examples:
        casework bom kitchen.json
        casework bom kitchen.json --format csv --output kitchen.csv
    """
    if output_format not in OUTPUT_FORMATS:
        typer.echo(
            f"Error: Unknown format '{output_format}'. "
            f"Expected one of: {', '.join(OUTPUT_FORMATS)}",
            err=True,
        )
        raise typer.Exit(code=1)

    result = _generate(
        design_file,
        rules_path,
        GenerationOptions(include_manufacturing=False, include_installation=False),
    )
    _write_or_echo(BomExporter(output_format=output_format).format(result.bom), output_file)


@app.command()
def drawing(
    design_file: DesignArgument,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the drawing JSON to a file"),
    ] = None,
    no_manufacturing: Annotated[
        bool,
        typer.Option("--no-manufacturing", help="Skip the manufacturing layout"),
    ] = False,
    no_installation: Annotated[
        bool,
        typer.Option("--no-installation", help="Skip the installation layout"),
    ] = False,
    rules_path: RulesPathOption = DEFAULT_RULES_PATH,
) -> None:
    """Generate the 2D drawing model for a design as JSON."""
    result = _generate(
        design_file,
        rules_path,
        GenerationOptions(
            include_manufacturing=not no_manufacturing,
            include_installation=not no_installation,
        ),
    )
    _write_or_echo(
        json.dumps(result.drawing.to_dict(), indent=2, ensure_ascii=False), output_file
    )


@app.command()
def render(
    design_file: DesignArgument,
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-d", help="Directory for the SVG files"),
    ],
    scale: Annotated[
        float,
        typer.Option("--scale", help="Pixels per millimeter"),
    ] = 0.5,
    views: Annotated[
        str | None,
        typer.Option(
            "--views",
            help="Comma-separated views: front, side, plan, manufacturing, installation",
        ),
    ] = None,
    rules_path: RulesPathOption = DEFAULT_RULES_PATH,
) -> None:
    """Render the drawing views of a design to SVG files.

    Examples:
        casework render kitchen.json --output-dir ./out
        casework render kitchen.json --output-dir ./out --views front,side --scale 1.0
    """
    selected: tuple[str, ...] | None = None
    if views:
        try:
            selected = tuple(normalize_view_name(v) for v in views.split(",") if v.strip())
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)

    result = _generate(
        design_file,
        rules_path,
        GenerationOptions(render_svg=True, scale=scale, views=selected),
    )

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for view, content in result.svgs.items():
            if not content:
                continue
            path = output_dir / f"{view}.svg"
            path.write_text(content, encoding="utf-8")
            written.append(path)
    except OSError as e:
        typer.echo(f"Error: Could not write file: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Rendered views:")
    for path in written:
        typer.echo(f"  {path}")


@app.command()
def export(
    design_file: DesignArgument,
    output_dir: Annotated[
        Path,
        typer.Option("--output-dir", "-d", help="Output directory for exported files"),
    ],
    output_formats: Annotated[
        str,
        typer.Option(
            "--formats",
            help="Comma-separated export formats: bom,json,svg,dxf (or 'all')",
        ),
    ] = "all",
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = "casework",
    rules_path: RulesPathOption = DEFAULT_RULES_PATH,
) -> None:
    """Export a design to one or more file formats.

    Examples:
        casework export kitchen.json --output-dir ./out
        casework export kitchen.json --formats bom,dxf --output-dir ./out --project-name kitchen
    """
    result = _generate(design_file, rules_path, GenerationOptions(render_svg=True))
    handle_multi_format_export(output_formats, output_dir, project_name, result)


if __name__ == "__main__":
    app()
