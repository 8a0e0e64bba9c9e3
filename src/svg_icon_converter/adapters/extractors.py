"""SVG extractor implementing the ``IconExtractor`` port."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from svg_icon_converter.converters.styles import StyleRule
from svg_icon_converter.types import IconFragment


class SvgIconExtractor:
    """Extract inline markup from SVG files on disk."""

    def extract(
        self,
        file_path: Path,
        name: str,
        rules: Sequence[StyleRule],
    ) -> IconFragment:
        """Extract ``file_path`` as icon ``name``.

        Parameters
        ----------
        file_path : Path
            SVG file to read.
        name : str
            Icon name for the fragment.
        rules : Sequence[StyleRule]
            Style rules applied after the root element is stripped.

        Returns
        -------
        IconFragment
            Extracted fragment.
        """
        from svg_icon_converter.converters import extract_icon

        return extract_icon(file_path, name, rules)
