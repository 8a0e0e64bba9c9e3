"""SVG markup extraction for inline icon exports."""

from __future__ import annotations

import re
from collections.abc import Iterable
from pathlib import Path

from lxml import etree

from svg_icon_converter.converters.styles import StyleRule, apply_style_rules
from svg_icon_converter.errors import ExtractionError
from svg_icon_converter.types import IconFragment, StrPath

_COMMENT_RE = re.compile(r"<!--.*?-->", re.DOTALL)
_ROOT_OPEN_RE = re.compile(
    r"<(?:[\w.-]+:)?svg\b(?:[^>\"']|\"[^\"]*\"|'[^']*')*>", re.IGNORECASE
)
_ROOT_CLOSE_RE = re.compile(r"</(?:[\w.-]+:)?svg\s*>", re.IGNORECASE)
_INTER_TAG_SPACE_RE = re.compile(r">\s+<")
_LINE_BREAK_RE = re.compile(r"\s*[\r\n]+\s*")


def _parser() -> etree.XMLParser:
    return etree.XMLParser(
        remove_blank_text=True,
        resolve_entities=False,
        no_network=True,
    )


def _read_svg(file_path: Path) -> tuple[bytes, str]:
    try:
        raw = file_path.read_bytes()
    except OSError as exc:
        raise ExtractionError(f"cannot read {file_path}: {exc.strerror or exc}") from exc
    try:
        return raw, raw.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise ExtractionError(f"{file_path} is not valid UTF-8 text") from exc


def _check_root(raw: bytes, file_path: Path) -> None:
    if not raw.strip():
        raise ExtractionError(f"{file_path} is empty")
    try:
        root = etree.fromstring(raw, _parser())
    except etree.XMLSyntaxError as exc:
        raise ExtractionError(f"{file_path} is not well-formed XML: {exc}") from exc
    local_name = etree.QName(root).localname
    if local_name.lower() != "svg":
        raise ExtractionError(
            f"{file_path} has root element <{local_name}>, expected <svg>"
        )


def strip_root_element(svg_text: str) -> str:
    """Return the markup strictly inside the root ``<svg>`` element.

    Comments are dropped, whitespace between tags is removed and remaining
    line breaks are collapsed so the result fits on one line.

    Raises
    ------
    ExtractionError
        If no ``<svg>`` open/close tag pair can be located.
    """
    text = _COMMENT_RE.sub("", svg_text)
    opening = _ROOT_OPEN_RE.search(text)
    if opening is None:
        raise ExtractionError("no <svg> root element found")
    if opening.group(0).rstrip(">").rstrip().endswith("/"):
        return ""
    closings = list(_ROOT_CLOSE_RE.finditer(text, opening.end()))
    if not closings:
        raise ExtractionError("<svg> root element is not closed")
    inner = text[opening.end() : closings[-1].start()]
    inner = _INTER_TAG_SPACE_RE.sub("><", inner)
    return _LINE_BREAK_RE.sub(" ", inner).strip()


def extract_icon(
    file_path: StrPath,
    name: str,
    rules: Iterable[StyleRule] = (),
) -> IconFragment:
    """Extract and rewrite the inner markup of one SVG file.

    Parameters
    ----------
    file_path : str | PathLike
        SVG file to read.
    name : str
        Icon name the fragment is bound to.
    rules : Iterable[StyleRule], optional
        Style rules applied, in order, to the markup inside the root element.

    Returns
    -------
    IconFragment
        Fragment carrying the rewritten markup.

    Raises
    ------
    ExtractionError
        If the file cannot be read, is not a well-formed SVG document, or
        has nothing inside its root element.
    """
    path = Path(file_path)
    raw, text = _read_svg(path)
    _check_root(raw, path)
    inner = strip_root_element(text)
    if not inner:
        raise ExtractionError(f"{path} has an empty <svg> root element")
    try:
        markup = apply_style_rules(inner, rules)
    except Exception as exc:
        raise ExtractionError(f"style rules failed for {path}: {exc}") from exc
    return IconFragment(name=name, markup=markup, source_path=path)
