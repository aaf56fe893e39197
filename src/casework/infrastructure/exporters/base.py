"""Base exporter framework with Protocol, Registry, and Manager."""

from __future__ import annotations

import logging
from abc import abstractmethod
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, Protocol, runtime_checkable

if TYPE_CHECKING:
    from casework.application.dtos import GenerationOutput


logger = logging.getLogger(__name__)


class UnsupportedFormatError(KeyError):
    """Raised when no exporter is registered for a format name."""

    def __init__(self, format_name: str, available: list[str]) -> None:
        self.format_name = format_name
        self.available = available
        super().__init__(format_name)

    def __str__(self) -> str:
        return (
            f"No exporter registered for format '{self.format_name}'. "
            f"Available formats: {', '.join(self.available) or 'none'}"
        )


@runtime_checkable
class Exporter(Protocol):
    """Protocol for all exporters.

    Exporters convert a GenerationOutput to a specific file format. Each
    exporter defines its format name and file extension and implements at
    least ``export``.

    Attributes:
        format_name: Registry name of the format (e.g., "dxf", "json").
        file_extension: File extension without leading dot.
    """

    format_name: ClassVar[str]
    file_extension: ClassVar[str]

    @abstractmethod
    def export(self, output: GenerationOutput, path: Path) -> None:
        """Export generation output to a file.

        Args:
            output: The generation output to export.
            path: Path where the file will be saved.
        """
        ...

    def export_string(self, output: GenerationOutput) -> str:
        """Export generation output as a string.

        Raises:
            NotImplementedError: If the format does not support string export.
        """
        raise NotImplementedError(
            f"Format '{self.format_name}' does not support string export"
        )


class ExporterRegistry:
    """Registry for exporter classes.

    Exporters register themselves with the ``@ExporterRegistry.register``
    decorator when their module is imported.

    Example:
        @ExporterRegistry.register("json")
        class JsonExporter:
            format_name = "json"
            file_extension = "json"
            ...
    """

    _exporters: ClassVar[dict[str, type[Exporter]]] = {}

    @classmethod
    def register(cls, format_name: str) -> type:
        """Decorator to register an exporter class under ``format_name``."""

        def decorator(exporter_class: type[Exporter]) -> type[Exporter]:
            if format_name in cls._exporters:
                logger.warning(
                    f"Overwriting existing exporter for format '{format_name}'"
                )
            cls._exporters[format_name] = exporter_class
            logger.debug(f"Registered exporter '{format_name}': {exporter_class.__name__}")
            return exporter_class

        return decorator

    @classmethod
    def get(cls, format_name: str) -> type[Exporter]:
        """Get an exporter class by format name.

        Raises:
            UnsupportedFormatError: If no exporter is registered for the format.
        """
        if format_name not in cls._exporters:
            raise UnsupportedFormatError(format_name, cls.available_formats())
        return cls._exporters[format_name]

    @classmethod
    def available_formats(cls) -> list[str]:
        """Sorted list of registered format names."""
        return sorted(cls._exporters.keys())

    @classmethod
    def is_registered(cls, format_name: str) -> bool:
        return format_name in cls._exporters

    @classmethod
    def clear(cls) -> None:
        """Clear all registered exporters.

        This is primarily useful for testing.
        """
        cls._exporters.clear()


class ExportManager:
    """Manages export operations to multiple formats.

    Attributes:
        output_dir: Directory where exported files will be saved.
    """

    def __init__(self, output_dir: Path) -> None:
        """Initialize the export manager.

        Args:
            output_dir: Directory where exported files will be saved.
                        Will be created if it doesn't exist.
        """
        self.output_dir = Path(output_dir)

    def export_all(
        self,
        formats: list[str],
        output: GenerationOutput,
        project_name: str = "casework",
    ) -> dict[str, Path]:
        """Export generation output to several formats.

        Every format is resolved before anything is written, so an unknown
        name leaves the output directory untouched.

        Args:
            formats: Format names to export (e.g., ["bom", "dxf"]).
            output: The generation output to export.
            project_name: Base name for output files.

        Returns:
            Mapping of format name to written file path.

        Raises:
            UnsupportedFormatError: If any format is not registered.
            OSError: If file operations fail.
        """
        exporter_classes = [(name, ExporterRegistry.get(name)) for name in formats]

        self.output_dir.mkdir(parents=True, exist_ok=True)

        results: dict[str, Path] = {}
        for format_name, exporter_class in exporter_classes:
            exporter = exporter_class()

            # {project_name}_{format}.{ext}
            filename = f"{project_name}_{format_name}.{exporter.file_extension}"
            filepath = self.output_dir / filename

            logger.info(f"Exporting to {format_name}: {filepath}")
            exporter.export(output, filepath)
            results[format_name] = filepath

        return results

    def export_single(
        self,
        format_name: str,
        output: GenerationOutput,
        project_name: str = "casework",
    ) -> Path:
        """Export generation output to one format and return the file path."""
        results = self.export_all([format_name], output, project_name)
        return results[format_name]
