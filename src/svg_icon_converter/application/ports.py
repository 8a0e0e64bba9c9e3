"""Application ports for clean architecture boundaries."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Protocol

from svg_icon_converter.converters.styles import StyleRule
from svg_icon_converter.types import IconFragment


class IconExtractor(Protocol):
    """Turn one SVG file into an icon fragment."""

    def extract(
        self,
        file_path: Path,
        name: str,
        rules: Sequence[StyleRule],
    ) -> IconFragment:
        """Raise ``ExtractionError`` when the file cannot be used."""


class ExportWriter(Protocol):
    """Persist accepted fragments as generated artifacts."""

    def write(
        self,
        icon_set_name: str,
        output_path: Path,
        fragments: Sequence[IconFragment],
        skipped_names: Sequence[str],
    ) -> None:
        """Raise ``WriteError`` naming the failed stage."""
