"""Icon name derivation from SVG file paths."""

from __future__ import annotations

import re
from pathlib import PurePath

NAME_SEPARATOR = "-"
FALLBACK_NAME = "icon"
ICON_NAMES_BINDING = "iconNames"

_NON_ALNUM_RE = re.compile(r"[^a-z0-9]+")
_JS_RESERVED_WORDS = frozenset(
    {
        "await", "break", "case", "catch", "class", "const", "continue",
        "debugger", "default", "delete", "do", "else", "enum", "export",
        "extends", "false", "finally", "for", "function", "if", "implements",
        "import", "in", "instanceof", "interface", "let", "new", "null",
        "package", "private", "protected", "public", "return", "static",
        "super", "switch", "this", "throw", "true", "try", "typeof", "var",
        "void", "while", "with", "yield",
    }
)
# Bindings an icon may not take in a strict-mode module that also exports
# the icon name list.
_RESERVED_BINDINGS = _JS_RESERVED_WORDS | {"arguments", "eval", ICON_NAMES_BINDING}


def normalize_token(value: str) -> str:
    """Lower-case ``value`` and collapse non-alphanumeric runs to one separator."""
    return _NON_ALNUM_RE.sub(NAME_SEPARATOR, value.lower()).strip(NAME_SEPARATOR)


def map_icon_name(file_path: str | PurePath, prefix: str) -> str:
    """Derive the icon name for ``file_path`` under ``prefix``.

    Parameters
    ----------
    file_path : str | PurePath
        Path to the SVG file. Only the base name is used.
    prefix : str
        Icon-set prefix prepended to every name.

    Returns
    -------
    str
        Identifier-safe name such as ``"app-arrow-left"``.

    Notes
    -----
    Distinct file names may map to the same icon name (``Arrow_Left.svg`` and
    ``arrow-left.svg``). Collisions are resolved by the conversion use-case.
    """
    stem = PurePath(str(file_path).replace("\\", "/")).stem
    parts = [part for part in (normalize_token(prefix), normalize_token(stem)) if part]
    if not parts:
        return FALLBACK_NAME
    return NAME_SEPARATOR.join(parts)


def to_export_identifier(name: str) -> str:
    """Return the camelCase JS binding for an icon name.

    ``app-arrow-left`` becomes ``appArrowLeft``. Parts starting with a digit
    are joined with an underscore instead (``app-a-1`` becomes ``appA_1``) so
    distinct icon names never share a binding. Reserved words and the
    generated ``iconNames`` list binding get a leading underscore.
    """
    head, *rest = name.split(NAME_SEPARATOR)
    identifier = head if head and not head[0].isdigit() else f"_{head}"
    for part in rest:
        if part[:1].isdigit():
            identifier += f"_{part}"
        else:
            identifier += part[:1].upper() + part[1:]
    if identifier in _RESERVED_BINDINGS:
        identifier = f"_{identifier}"
    return identifier
