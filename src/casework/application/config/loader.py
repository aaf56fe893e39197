"""Design document loader with error reporting.

Loads JSON design documents, reports file system, JSON and validation
problems as ``ConfigError`` with a JSON path for every validation failure.
"""

import json
from pathlib import Path
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from casework.application.config.schemas import DesignConfiguration


class ConfigError(Exception):
    """Raised when a design document cannot be loaded.

    Attributes:
        message: The primary error message
        error_type: One of file_not_found, permission_denied,
            file_read_error, json_parse, validation
        path: Path to the document (if loaded from a file)
        details: Line/column for JSON errors, one entry per failure for
            validation errors
    """

    def __init__(
        self,
        message: str,
        error_type: str = "unknown",
        path: Path | None = None,
        details: list[dict[str, Any]] | None = None,
    ) -> None:
        self.message = message
        self.error_type = error_type
        self.path = path
        self.details = details or []
        super().__init__(message)

    def __str__(self) -> str:
        return self.message


def format_json_path(loc: tuple[str | int, ...]) -> str:
    """Format a Pydantic location tuple as a JSON path string.

    Examples:
        >>> format_json_path(("cabinets", "lower", 0, "width_mm"))
        'cabinets.lower[0].width_mm'
        >>> format_json_path((2, "w"))
        '[2].w'
    """
    parts: list[str] = []
    for segment in loc:
        if isinstance(segment, int):
            if parts:
                parts[-1] = f"{parts[-1]}[{segment}]"
            else:
                parts.append(f"[{segment}]")
        else:
            parts.append(str(segment))
    return ".".join(parts)


def extract_validation_errors(error: PydanticValidationError) -> list[dict[str, Any]]:
    """Flatten a Pydantic ValidationError into path/message/value entries."""
    details: list[dict[str, Any]] = []
    for err in error.errors():
        details.append(
            {
                "path": format_json_path(err["loc"]),
                "message": err["msg"],
                "value": err.get("input"),
                "error_type": err["type"],
            }
        )
    return details


def format_validation_message(details: list[dict[str, Any]], title: str) -> str:
    lines = [title]
    for detail in details:
        value = detail.get("value")
        if value is not None and not isinstance(value, (dict, list)):
            lines.append(f"  - {detail['path']}: {detail['message']} (got: {value!r})")
        else:
            lines.append(f"  - {detail['path']}: {detail['message']}")
    return "\n".join(lines)


def load_design(path: Path) -> DesignConfiguration:
    """Load and validate a design document from a JSON file.

    Args:
        path: Path to the JSON design document

    Returns:
        A validated DesignConfiguration

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    if not path.exists():
        raise ConfigError(
            message=f"Design file not found: {path}",
            error_type="file_not_found",
            path=path,
        )

    try:
        content = path.read_text(encoding="utf-8")
    except PermissionError:
        raise ConfigError(
            message=f"Permission denied reading design file: {path}",
            error_type="permission_denied",
            path=path,
        )
    except OSError as e:
        raise ConfigError(
            message=f"Error reading design file: {path}: {e}",
            error_type="file_read_error",
            path=path,
        )

    try:
        data = json.loads(content)
    except json.JSONDecodeError as e:
        raise ConfigError(
            message=f"Invalid JSON in design file: {path} (line {e.lineno}, column {e.colno}): {e.msg}",
            error_type="json_parse",
            path=path,
            details=[{"line": e.lineno, "column": e.colno, "message": e.msg}],
        )

    try:
        return DesignConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise ConfigError(
            message=format_validation_message(details, "Design validation failed:"),
            error_type="validation",
            path=path,
            details=details,
        )


def load_design_from_dict(data: dict[str, Any]) -> DesignConfiguration:
    """Validate a design document that is already parsed.

    Used by the web API, where the request body is the design.

    Raises:
        ConfigError: If the data fails validation.
    """
    try:
        return DesignConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = extract_validation_errors(e)
        raise ConfigError(
            message=format_validation_message(details, "Design validation failed:"),
            error_type="validation",
            details=details,
        )
