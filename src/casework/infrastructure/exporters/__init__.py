"""Exporter framework for generation outputs.

This package provides:
- Exporter Protocol: Defines the interface for all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations

Registered exporters:
- bom: Bill of materials as text, CSV or JSON
- dxf: DXF R2010 drawing with one layer per view
- json: Combined BOM and drawing model
- svg: One SVG document per view

Usage:
    from casework.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()

    bom_exporter = ExporterRegistry.get("bom")(output_format="csv")
    csv_text = bom_exporter.export_string(output)

    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["bom", "dxf", "svg"], output, project_name="kitchen")
"""

from casework.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    UnsupportedFormatError,
)

# Importing the exporter modules registers them.
from casework.infrastructure.exporters.bom import BomExporter
from casework.infrastructure.exporters.dxf import DxfExporter
from casework.infrastructure.exporters.json_export import JsonExporter
from casework.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "BomExporter",
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonExporter",
    "SvgExporter",
    "UnsupportedFormatError",
]
