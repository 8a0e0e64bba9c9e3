"""Typed option objects for the conversion use-case."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from svg_icon_converter.converters.styles import StyleRule

DEFAULT_ICON_PREFIX = "app"
DEFAULT_ICON_SET_NAME = "Custom SVG Icons"

type StylesFilter = Sequence[object] | StyleRule | Callable[[str], str]


@dataclass(frozen=True)
class ConversionOptions:
    """Fully resolved conversion options.

    ``styles_filter`` is kept in its user-supplied form and normalized by the
    use-case; ``None`` selects the default fill-to-currentColor rules.
    """

    source_dir: Path
    output_path: Path
    icon_prefix: str = DEFAULT_ICON_PREFIX
    styles_filter: StylesFilter | None = None
    icon_set_name: str = DEFAULT_ICON_SET_NAME
