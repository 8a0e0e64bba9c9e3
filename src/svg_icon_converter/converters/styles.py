"""Ordered text rewriting rules applied to extracted SVG markup."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable, Mapping, Sequence
from dataclasses import dataclass
from typing import Protocol, runtime_checkable

from svg_icon_converter.errors import ConfigurationError

type MarkupTransform = Callable[[str], str]


@runtime_checkable
class StyleRule(Protocol):
    """Single markup rewriting step."""

    def apply(self, markup: str) -> str:
        """Return rewritten markup."""


@dataclass(frozen=True)
class PatternRule:
    """Replace every match of ``pattern`` with ``replacement``.

    A ``str`` pattern is matched literally; a compiled ``re.Pattern`` is
    applied with ``re.sub`` so back-references work in ``replacement``.
    """

    pattern: str | re.Pattern[str]
    replacement: str

    def apply(self, markup: str) -> str:
        if isinstance(self.pattern, re.Pattern):
            return self.pattern.sub(self.replacement, markup)
        if not self.pattern:
            return markup
        return markup.replace(self.pattern, self.replacement)


@dataclass(frozen=True)
class TransformRule:
    """Run a callable over the whole markup string."""

    transform: MarkupTransform

    def apply(self, markup: str) -> str:
        result = self.transform(markup)
        if not isinstance(result, str):
            raise TypeError(
                f"Style transform {self.transform!r} returned "
                f"{type(result).__name__}, expected str."
            )
        return result


# Whole colour values only: fill:#000080 does not match.
DEFAULT_STYLE_RULES: tuple[StyleRule, ...] = (
    PatternRule(re.compile(r"fill:#000000(?![0-9a-fA-F])"), "fill:currentColor"),
    PatternRule(re.compile(r"fill:#000(?![0-9a-fA-F])"), "fill:currentColor"),
    PatternRule(re.compile(r"fill:black(?![\w-])"), "fill:currentColor"),
)


def apply_style_rules(markup: str, rules: Iterable[StyleRule]) -> str:
    """Apply ``rules`` to ``markup`` in sequence order.

    Each rule receives the output of the previous one, so later rules can
    refine or undo earlier ones. Markup no rule matches is returned unchanged.
    """
    for rule in rules:
        markup = rule.apply(markup)
    return markup


def _coerce_rule(raw: object) -> StyleRule:
    if isinstance(raw, StyleRule):
        return raw
    if isinstance(raw, Mapping):
        if "from" not in raw or "to" not in raw:
            raise ConfigurationError(
                f"Style rule mapping must define 'from' and 'to': {dict(raw)!r}"
            )
        return _pattern_rule(raw["from"], raw["to"])
    if isinstance(raw, tuple) and len(raw) == 2:
        return _pattern_rule(*raw)
    if callable(raw):
        return TransformRule(raw)
    raise ConfigurationError(f"Unsupported style rule: {raw!r}")


def _pattern_rule(pattern: object, replacement: object) -> PatternRule:
    if not isinstance(pattern, (str, re.Pattern)):
        raise ConfigurationError(
            f"Style rule pattern must be str or compiled regex, got {pattern!r}"
        )
    if not isinstance(replacement, str):
        raise ConfigurationError(
            f"Style rule replacement must be str, got {replacement!r}"
        )
    return PatternRule(pattern, replacement)


def coerce_style_rules(
    raw: Sequence[object] | StyleRule | MarkupTransform | None,
) -> tuple[StyleRule, ...]:
    """Normalize user-supplied style filters into a tuple of rules.

    Parameters
    ----------
    raw : Sequence[object] | StyleRule | Callable[[str], str] | None
        ``None`` selects :data:`DEFAULT_STYLE_RULES`. A single rule or
        callable is treated as a one-rule sequence. Sequence items may be
        rule instances, ``(pattern, replacement)`` pairs,
        ``{"from": ..., "to": ...}`` mappings or callables.

    Returns
    -------
    tuple[StyleRule, ...]
        Rules in the order supplied.

    Raises
    ------
    ConfigurationError
        If ``raw`` is not a sequence of rules or an entry cannot be
        interpreted as a rule.
    """
    if raw is None:
        return DEFAULT_STYLE_RULES
    if isinstance(raw, StyleRule):
        return (raw,)
    if callable(raw):
        return (TransformRule(raw),)
    if isinstance(raw, (str, bytes)):
        raise ConfigurationError("Style filters must be a sequence of rules.")
    try:
        items = iter(raw)
    except TypeError as exc:
        raise ConfigurationError(
            f"Style filters must be a sequence of rules, got {raw!r}"
        ) from exc
    return tuple(_coerce_rule(item) for item in items)
