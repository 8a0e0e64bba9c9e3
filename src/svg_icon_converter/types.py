"""Shared value types and aliases for icon conversion modules."""

from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path

from svg_icon_converter.converters.naming import to_export_identifier

type StrPath = str | os.PathLike[str]


@dataclass(frozen=True)
class IconFragment:
    """Rewritten markup for one accepted icon.

    Parameters
    ----------
    name : str
        Icon name as listed in the manifest (``"app-arrow-left"``).
    markup : str
        Inner SVG markup after style rewriting.
    source_path : Path
        SVG file the markup was extracted from.
    """

    name: str
    markup: str
    source_path: Path

    @property
    def identifier(self) -> str:
        """JS binding the markup is exported under."""
        return to_export_identifier(self.name)

    @property
    def export_fragment(self) -> str:
        """Value-export line for the generated exports module."""
        quoted = json.dumps(self.markup, ensure_ascii=False)
        return f"export const {self.identifier} = {quoted}"

    @property
    def type_fragment(self) -> str:
        """Declaration line for the generated type-declarations module."""
        return f"export declare const {self.identifier}: string"
