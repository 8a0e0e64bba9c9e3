"""Convert a folder of icons with extra stroke normalization.

Usage:
    python examples/convert_with_custom_rules.py ./svg-icons ./dist
"""

from __future__ import annotations

import logging
import re
import sys
from pathlib import Path

from svg_icon_converter import DEFAULT_STYLE_RULES, PatternRule, TransformRule, convert_icons


def _drop_ids(markup: str) -> str:
    return re.sub(r'\s+id="[^"]*"', "", markup)


def main() -> int:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")
    source_dir = Path(sys.argv[1] if len(sys.argv) > 1 else "svg-icons")
    output_path = Path(sys.argv[2] if len(sys.argv) > 2 else "dist")

    result = convert_icons(
        source_dir,
        output_path,
        icon_prefix="app",
        styles_filter=[
            *DEFAULT_STYLE_RULES,
            PatternRule(re.compile(r"stroke:#0{3}(?:0{3})?\b"), "stroke:currentColor"),
            TransformRule(_drop_ids),
        ],
    )
    for message in result.errors:
        print(message)
    if not result.success:
        return 1
    print(f"Converted {result.icon_count} icons, skipped {result.skipped_count}.")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
