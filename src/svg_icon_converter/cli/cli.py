#!/usr/bin/env python3
"""
svg_icon_converter.cli.cli

Typer-based CLI for turning a directory of SVG icons into a Quasar-ready
icon module.

Examples
--------
Convert ``./svg-icons`` into ``./dist`` with the ``my`` prefix:

    convert-svg-icons convert ./svg-icons dist --prefix my

Add a style rule on top of the default black-to-currentColor rules:

    convert-svg-icons convert ./svg-icons dist --style-rule "stroke:#000=>stroke:currentColor"
"""

from __future__ import annotations

import json
import logging
import re
import traceback
from pathlib import Path

import typer

from svg_icon_converter.converters.styles import DEFAULT_STYLE_RULES, PatternRule, StyleRule
from svg_icon_converter.errors import IconConverterError

app = typer.Typer(
    name="convert-svg-icons",
    help="Convert a directory of SVG icons into a Quasar icon module.",
    no_args_is_help=True,
)

STYLE_RULE_SEPARATOR = "=>"
STYLE_RULE_HELP = (
    f"Style rule FROM{STYLE_RULE_SEPARATOR}TO applied after the defaults (repeatable)."
)


def _parse_style_rules(items: list[str] | None, regex: bool) -> list[StyleRule]:
    """Parse repeated FROM=>TO style rule entries."""
    parsed: list[StyleRule] = []
    for item in items or []:
        if STYLE_RULE_SEPARATOR not in item:
            raise typer.BadParameter(
                f"Invalid style rule '{item}'. Use FROM{STYLE_RULE_SEPARATOR}TO format."
            )
        pattern, replacement = item.split(STYLE_RULE_SEPARATOR, 1)
        if not pattern:
            raise typer.BadParameter("Style rule pattern cannot be empty.")
        if regex:
            try:
                parsed.append(PatternRule(re.compile(pattern), replacement))
            except re.error as exc:
                raise typer.BadParameter(
                    f"Invalid regular expression '{pattern}': {exc}"
                ) from exc
        else:
            parsed.append(PatternRule(pattern, replacement))
    return parsed


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception that ended the run.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    typer.echo(f"✗ {type(exc).__name__}: {exc}", err=True)
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _usage_hint(icon_names: tuple[str, ...], output_path: Path) -> str:
    from svg_icon_converter.converters.naming import to_export_identifier

    shown = ", ".join(to_export_identifier(name) for name in icon_names[:2])
    more = ", ..." if len(icon_names) > 2 else ""
    return (
        "Using icons in Quasar:\n\n"
        f"  import {{ {shown}{more} }} from '{output_path}'\n\n"
        f'  <q-icon :name="{to_export_identifier(icon_names[0])}" />'
    )


# -----------------------------
# Global options
# -----------------------------
@app.callback()
def _main(
    ctx: typer.Context,
    debug: bool = typer.Option(False, "--debug", help="Show full tracebacks on error."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log per-file progress."),
) -> None:
    """Initialize shared CLI state and logging."""
    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
    ctx.obj = {"debug": debug}


# -----------------------------
# Commands
# -----------------------------
@app.command("convert")
def convert_cmd(
    ctx: typer.Context,
    source_dir: Path = typer.Argument(
        ...,
        help="Directory containing *.svg files (not scanned recursively).",
    ),
    output_path: Path = typer.Argument(
        Path("dist"), help="Directory receiving index.js, index.d.ts and icons.json."
    ),
    prefix: str = typer.Option("app", "--prefix", help="Prefix joined to every icon name."),
    name: str = typer.Option(
        "Custom SVG Icons", "--name", help="Icon set name recorded in generated files."
    ),
    style_rule: list[str] | None = typer.Option(
        None, "--style-rule", help=STYLE_RULE_HELP
    ),
    regex: bool = typer.Option(
        False, "--regex", help="Treat --style-rule patterns as regular expressions."
    ),
    no_default_styles: bool = typer.Option(
        False,
        "--no-default-styles",
        help="Do not apply the default black-fill to currentColor rules.",
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the result as JSON."),
) -> None:
    """Convert SVG icons into an importable icon module.

    Parameters
    ----------
    ctx : typer.Context
        Typer context containing global options.
    source_dir : Path
        Directory with the source SVG files.
    output_path : Path
        Output directory, created when missing.
    prefix : str, default="app"
        Icon name prefix.
    name : str, default="Custom SVG Icons"
        Icon set display name.
    """
    debug: bool = bool(ctx.obj.get("debug", False))

    rules = [] if no_default_styles else list(DEFAULT_STYLE_RULES)
    rules.extend(_parse_style_rules(style_rule, regex))

    try:
        from svg_icon_converter.api import convert_icons

        result = convert_icons(
            source_dir=source_dir.resolve(),
            output_path=output_path.resolve(),
            icon_prefix=prefix,
            styles_filter=rules,
            icon_set_name=name,
        )
        if as_json:
            typer.echo(json.dumps(result.to_dict(), indent=2))
        else:
            # The last message of a failed run is the failure itself.
            warnings = result.errors if result.success else result.errors[:-1]
            for message in warnings:
                typer.echo(f"! {message}", err=True)
        result.raise_for_status()
    except IconConverterError as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))
    except Exception as exc:
        raise typer.Exit(code=_print_conversion_error(exc, debug))

    if not as_json:
        typer.echo(f"✓ Converted {name} (count: {result.icon_count}) to {result.output_path}")
        if result.skipped_count:
            typer.echo(f"Skipped icons: {result.skipped_count}")
        typer.echo(_usage_hint(result.icon_names, output_path))


if __name__ == "__main__":
    app()
