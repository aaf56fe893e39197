"""CLI command implementations for the casework application.

This package contains subcommands for the casework CLI, including:
- rules: Inspect and edit the manufacturing rules document
- output handlers: Multi-format export through the exporter registry
"""

from casework.cli.commands.output_handlers import handle_multi_format_export, parse_formats
from casework.cli.commands.rules import rules_app

__all__ = ["handle_multi_format_export", "parse_formats", "rules_app"]
