"""Output handling functions for the casework CLI.

Writes generation outputs to disk through the exporter registry.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer

from casework.infrastructure.exporters import ExporterRegistry, ExportManager

if TYPE_CHECKING:
    from casework.application.dtos import GenerationOutput

__all__ = [
    "handle_multi_format_export",
    "parse_formats",
]


def parse_formats(output_formats_str: str) -> list[str]:
    """Parse a comma-separated format list or ``all``.

    Raises:
        typer.Exit: If any format is unknown.
    """
    available = ExporterRegistry.available_formats()
    if output_formats_str.strip().lower() == "all":
        return available

    formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)
    return formats


def handle_multi_format_export(
    output_formats_str: str,
    output_dir: Path,
    project_name: str,
    result: GenerationOutput,
) -> dict[str, Path]:
    """Export a generation output to several formats.

    Args:
        output_formats_str: Comma-separated format list or "all".
        output_dir: Output directory for exported files.
        project_name: Project name for file naming.
        result: The generation output to export.

    Returns:
        Mapping of format name to written file.
    """
    formats = parse_formats(output_formats_str)

    manager = ExportManager(output_dir)
    try:
        files = manager.export_all(formats, result, project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")

    return files
