"""Combined JSON exporter for the BOM and the drawing model."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from casework.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from casework.application.dtos import GenerationOutput


logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"


@ExporterRegistry.register("json")
class JsonExporter:
    """Exports ``{schema_version, bom, drawing}`` as one JSON document.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export(self, output: GenerationOutput, path: Path) -> None:
        content = self.export_string(output)
        path.write_text(content, encoding="utf-8")
        logger.info(f"Exported JSON to {path}")

    def export_string(self, output: GenerationOutput) -> str:
        data: dict[str, Any] = {
            "schema_version": SCHEMA_VERSION,
            "bom": output.bom.to_dict(),
            "drawing": output.drawing.to_dict(),
        }
        return json.dumps(data, indent=self.indent, ensure_ascii=False)
