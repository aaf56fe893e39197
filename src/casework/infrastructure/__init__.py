"""Infrastructure layer - rendering and file formats."""

from .exporters import (
    BomExporter,
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    JsonExporter,
    SvgExporter,
    UnsupportedFormatError,
)
from .svg_renderer import DrawingSvgRenderer, render_drawing

__all__ = [
    "BomExporter",
    "DrawingSvgRenderer",
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonExporter",
    "SvgExporter",
    "UnsupportedFormatError",
    "render_drawing",
]
