"""Public conversion API (delegates to the application use-case)."""

from __future__ import annotations

from pathlib import Path

from svg_icon_converter.application.options import StylesFilter
from svg_icon_converter.application.results import ConversionResult
from svg_icon_converter.application.use_cases import build_conversion_options
from svg_icon_converter.application.use_cases import convert_icons as _convert_icons


def convert_icons(
    source_dir: Path,
    output_path: Path,
    icon_prefix: str = "app",
    styles_filter: StylesFilter | None = None,
    icon_set_name: str = "Custom SVG Icons",
) -> ConversionResult:
    """Convert every SVG file in ``source_dir`` into icon modules."""
    options = build_conversion_options(
        source_dir=source_dir,
        output_path=output_path,
        icon_prefix=icon_prefix,
        styles_filter=styles_filter,
        icon_set_name=icon_set_name,
    )
    return _convert_icons(options)
