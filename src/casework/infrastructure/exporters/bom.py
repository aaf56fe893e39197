"""Bill of materials exporter.

Formats the BOM already carried by a GenerationOutput as a text table, CSV
or JSON. The BOM itself is produced by the domain generator; this module
only lays it out.
"""

from __future__ import annotations

import csv
import io
import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from casework.domain import BomResult, PartCategory
from casework.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from casework.application.dtos import GenerationOutput


logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("text", "csv", "json")

CSV_HEADER = [
    "ID",
    "Category",
    "Name",
    "Material",
    "Width (mm)",
    "Height (mm)",
    "Depth (mm)",
    "Quantity",
    "Unit",
    "Cabinet",
]


def _mm(value: float) -> str:
    return f"{value:g}"


@ExporterRegistry.register("bom")  # type: ignore[arg-type]
class BomExporter:
    """Bill of materials exporter.

    Attributes:
        format_name: "bom"
        file_extension: "txt", "csv" or "json" depending on ``output_format``
    """

    format_name: ClassVar[str] = "bom"

    def __init__(self, output_format: str = "text") -> None:
        """Initialize the exporter.

        Args:
            output_format: Output format - "text", "csv", or "json".

        Raises:
            ValueError: If the output format is unknown.
        """
        if output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown BOM output format '{output_format}' "
                f"(expected one of: {', '.join(OUTPUT_FORMATS)})"
            )
        self.output_format = output_format
        self._file_extension = {
            "text": "txt",
            "csv": "csv",
            "json": "json",
        }[output_format]

    @property
    def file_extension(self) -> str:
        """Get the file extension for this output format."""
        return self._file_extension

    def export(self, output: GenerationOutput, path: Path) -> None:
        content = self.export_string(output)
        path.write_text(content, encoding="utf-8")
        logger.info(f"Exported BOM to {path}")

    def export_string(self, output: GenerationOutput) -> str:
        return self.format(output.bom)

    def format(self, bom: BomResult) -> str:
        """Format a BOM in the configured output format."""
        if self.output_format == "csv":
            return self.format_csv(bom)
        elif self.output_format == "json":
            return self.format_json(bom)
        return self.format_text(bom)

    def format_text(self, bom: BomResult) -> str:
        """Format BOM as human-readable text grouped by category."""
        lines: list[str] = []
        lines.append("=" * 60)
        lines.append("BILL OF MATERIALS")
        lines.append(f"{bom.category} / {bom.style}")
        lines.append("=" * 60)
        lines.append("")

        for category in PartCategory:
            items = bom.items_in(category)
            if not items:
                continue
            lines.append(category.value.upper())
            lines.append("-" * 40)
            for item in items:
                size = " x ".join(
                    _mm(v) for v in (item.width_mm, item.height_mm, item.depth_mm) if v
                )
                size_str = f" [{size}]" if size else ""
                lines.append(
                    f"  {item.id} {item.name} ({item.material}){size_str}: "
                    f"{item.quantity} {item.unit.value}"
                )
            lines.append("")

        summary = bom.summary
        lines.append("SUMMARY")
        lines.append("-" * 40)
        lines.append(f"  Items:          {summary.total_items}")
        lines.append(f"  Panels:         {summary.total_panels}")
        lines.append(f"  Hardware:       {summary.total_hardware}")
        lines.append(f"  Equipment:      {summary.total_equipment}")
        lines.append(f"  Sheet estimate: {summary.sheet_estimate}")
        lines.append("")

        return "\n".join(lines)

    def format_csv(self, bom: BomResult) -> str:
        output = io.StringIO()
        writer = csv.writer(output)
        writer.writerow(CSV_HEADER)
        for item in bom.items:
            writer.writerow(
                [
                    item.id,
                    item.part_category.value,
                    item.name,
                    item.material,
                    _mm(item.width_mm),
                    _mm(item.height_mm),
                    _mm(item.depth_mm),
                    item.quantity,
                    item.unit.value,
                    item.cabinet_ref or "",
                ]
            )
        return output.getvalue()

    def format_json(self, bom: BomResult) -> str:
        return json.dumps(bom.to_dict(), indent=2, ensure_ascii=False)
