"""Application-layer use-case and option objects."""

from __future__ import annotations

from pathlib import Path

from svg_icon_converter.application.options import ConversionOptions, StylesFilter
from svg_icon_converter.application.ports import ExportWriter, IconExtractor
from svg_icon_converter.application.results import ConversionResult


def build_conversion_options(
    *,
    source_dir: Path,
    output_path: Path,
    icon_prefix: str = "app",
    styles_filter: StylesFilter | None = None,
    icon_set_name: str = "Custom SVG Icons",
) -> ConversionOptions:
    """Build typed conversion options via lazy use-case import."""
    from svg_icon_converter.application.use_cases import (
        build_conversion_options as _impl,
    )

    return _impl(
        source_dir=source_dir,
        output_path=output_path,
        icon_prefix=icon_prefix,
        styles_filter=styles_filter,
        icon_set_name=icon_set_name,
    )


def convert_icons(
    options: ConversionOptions,
    *,
    extractor: IconExtractor | None = None,
    writer: ExportWriter | None = None,
) -> ConversionResult:
    """Convert an SVG directory via lazy use-case import."""
    from svg_icon_converter.application.use_cases import convert_icons as _impl

    return _impl(options, extractor=extractor, writer=writer)


__all__ = [
    "ConversionOptions",
    "ConversionResult",
    "build_conversion_options",
    "convert_icons",
]
