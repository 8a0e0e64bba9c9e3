"""Pure conversion helpers: naming, style rewriting and markup extraction.

Functions here are thin lazy wrappers so that importing the namespace does
not pull in lxml until extraction is actually requested.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svg_icon_converter.converters.styles import StyleRule
    from svg_icon_converter.types import IconFragment, StrPath


def map_icon_name(file_path: StrPath, prefix: str) -> str:
    """Derive the icon name for ``file_path`` under ``prefix``."""
    from .naming import map_icon_name as _impl

    return _impl(file_path, prefix)


def apply_style_rules(markup: str, rules: Iterable[StyleRule]) -> str:
    """Apply style rules to ``markup`` in sequence order."""
    from .styles import apply_style_rules as _impl

    return _impl(markup, rules)


def extract_icon(
    file_path: StrPath,
    name: str,
    rules: Iterable[StyleRule] = (),
) -> IconFragment:
    """Extract the rewritten inner markup of one SVG file.

    Parameters
    ----------
    file_path : str | PathLike
        SVG file to read.
    name : str
        Icon name the fragment is bound to.
    rules : Iterable[StyleRule], optional
        Style rules applied after the root element is stripped.

    Returns
    -------
    IconFragment
        Extracted fragment.
    """
    from .extraction import extract_icon as _impl

    return _impl(file_path, name, rules)


__all__ = ["map_icon_name", "apply_style_rules", "extract_icon"]
