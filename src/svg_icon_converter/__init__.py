"""Top-level API for SVG-directory-to-icon-module conversion."""

from __future__ import annotations

from typing import TYPE_CHECKING

from svg_icon_converter.converters.styles import (
    DEFAULT_STYLE_RULES,
    PatternRule,
    TransformRule,
)
from svg_icon_converter.errors import (
    AggregateEmptyError,
    ConfigurationError,
    DiscoveryError,
    DuplicateNameError,
    ExtractionError,
    IconConverterError,
    WriteError,
)

if TYPE_CHECKING:
    from svg_icon_converter.application.options import StylesFilter
    from svg_icon_converter.application.results import ConversionResult
    from svg_icon_converter.types import StrPath

__version__ = "0.1.0"


def convert_icons(
    source_dir: StrPath,
    output_path: StrPath,
    icon_prefix: str = "app",
    styles_filter: StylesFilter | None = None,
    icon_set_name: str = "Custom SVG Icons",
) -> ConversionResult:
    """Convert a directory of SVG icons into an importable icon module.

    Parameters
    ----------
    source_dir : str | PathLike
        Directory scanned (non-recursively) for ``*.svg`` files.
    output_path : str | PathLike
        Directory receiving ``index.js``, ``index.d.ts`` and ``icons.json``.
    icon_prefix : str, default="app"
        Prefix joined to every icon name.
    styles_filter : sequence of rules or callable, optional
        Style rules applied in order to each icon's inner markup. Defaults to
        rewriting black fills to ``currentColor``.
    icon_set_name : str, default="Custom SVG Icons"
        Display name recorded in the generated headers.

    Returns
    -------
    ConversionResult
        Outcome of the run; recoverable failures are reported here, not raised.
    """
    from pathlib import Path

    from .api import convert_icons as _impl

    return _impl(
        source_dir=Path(source_dir),
        output_path=Path(output_path),
        icon_prefix=icon_prefix,
        styles_filter=styles_filter,
        icon_set_name=icon_set_name,
    )


__all__ = [
    "convert_icons",
    "PatternRule",
    "TransformRule",
    "DEFAULT_STYLE_RULES",
    "IconConverterError",
    "ConfigurationError",
    "DiscoveryError",
    "DuplicateNameError",
    "ExtractionError",
    "WriteError",
    "AggregateEmptyError",
]
