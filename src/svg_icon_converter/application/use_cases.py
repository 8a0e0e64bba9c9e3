"""Application use-case orchestrating directory-to-module icon conversion."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import ValidationError

from svg_icon_converter.adapters.extractors import SvgIconExtractor
from svg_icon_converter.application.options import (
    DEFAULT_ICON_PREFIX,
    DEFAULT_ICON_SET_NAME,
    ConversionOptions,
    StylesFilter,
)
from svg_icon_converter.application.ports import ExportWriter, IconExtractor
from svg_icon_converter.application.results import ConversionResult
from svg_icon_converter.converters.naming import map_icon_name
from svg_icon_converter.converters.styles import StyleRule, coerce_style_rules
from svg_icon_converter.errors import (
    AggregateEmptyError,
    ConfigurationError,
    DiscoveryError,
    DuplicateNameError,
    ExtractionError,
    IconConverterError,
    WriteError,
)
from svg_icon_converter.infrastructure.export_writer import FileExportWriter
from svg_icon_converter.schemas import IconConversionConfig
from svg_icon_converter.types import IconFragment

logger = logging.getLogger(__name__)

SVG_SUFFIX = ".svg"


def build_conversion_options(
    *,
    source_dir: Path,
    output_path: Path,
    icon_prefix: str = DEFAULT_ICON_PREFIX,
    styles_filter: StylesFilter | None = None,
    icon_set_name: str = DEFAULT_ICON_SET_NAME,
) -> ConversionOptions:
    """Build typed option object from command/API params."""
    return ConversionOptions(
        source_dir=Path(source_dir),
        output_path=Path(output_path),
        icon_prefix=icon_prefix,
        styles_filter=styles_filter,
        icon_set_name=icon_set_name,
    )


def discover_svg_files(source_dir: Path) -> list[Path]:
    """List SVG files directly under ``source_dir`` in file-name order.

    Subdirectories are not scanned. The extension match is case-insensitive.

    Raises
    ------
    DiscoveryError
        If the directory cannot be listed or holds no SVG files.
    """
    try:
        candidates = [
            path
            for path in source_dir.iterdir()
            if path.suffix.lower() == SVG_SUFFIX and path.is_file()
        ]
    except OSError as exc:
        raise DiscoveryError(f"Cannot list source directory {source_dir}: {exc}") from exc
    if not candidates:
        raise DiscoveryError(f"No SVG files found in {source_dir}")
    return sorted(candidates, key=lambda path: path.name)


def _validate(options: ConversionOptions) -> tuple[IconConversionConfig, tuple[StyleRule, ...]]:
    try:
        config = IconConversionConfig(
            source_dir=options.source_dir,
            output_path=options.output_path,
            icon_prefix=options.icon_prefix,
            icon_set_name=options.icon_set_name,
        )
    except ValidationError as exc:
        details = "; ".join(
            str(error["msg"]).removeprefix("Value error, ") for error in exc.errors()
        )
        raise ConfigurationError(f"Invalid conversion options: {details}") from exc
    return config, coerce_style_rules(options.styles_filter)


def _ensure_output_dir(output_path: Path) -> None:
    try:
        output_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError("output directory", f"{output_path}: {exc}") from exc


def _failed(
    exc: IconConverterError,
    errors: list[str] | None = None,
    skipped: list[str] | None = None,
) -> ConversionResult:
    logger.error("%s", exc)
    skipped = skipped or []
    return ConversionResult(
        success=False,
        skipped_count=len(skipped),
        skipped_names=tuple(skipped),
        errors=(*(errors or []), str(exc)),
        failure=exc,
    )


def convert_icons(
    options: ConversionOptions,
    *,
    extractor: IconExtractor | None = None,
    writer: ExportWriter | None = None,
) -> ConversionResult:
    """Use-case: convert a directory of SVG files into icon modules.

    Recoverable failures never raise; they are reported through
    ``ConversionResult.success`` and ``ConversionResult.errors``. Per-file
    problems (duplicate names, unreadable or malformed SVG) skip the file and
    the run continues. The output directory is created once the options
    validate; no files are written into it unless at least one icon was
    accepted.

    Parameters
    ----------
    options : ConversionOptions
        Resolved conversion options.
    extractor : IconExtractor | None, optional
        Extractor override, defaults to :class:`SvgIconExtractor`.
    writer : ExportWriter | None, optional
        Writer override, defaults to :class:`FileExportWriter`.

    Returns
    -------
    ConversionResult
        Counts, accepted names and every message produced during the run.
    """
    try:
        config, rules = _validate(options)
    except ConfigurationError as exc:
        return _failed(exc)

    logger.info("Converting icons from %s to %s", config.source_dir, config.output_path)
    try:
        _ensure_output_dir(config.output_path)
    except WriteError as exc:
        return _failed(exc)

    try:
        svg_files = discover_svg_files(config.source_dir)
    except DiscoveryError as exc:
        return _failed(exc)
    logger.info("Found %d SVG files to convert", len(svg_files))

    extractor = extractor or SvgIconExtractor()
    writer = writer or FileExportWriter()

    registered: dict[str, IconFragment] = {}
    skipped: list[str] = []
    errors: list[str] = []
    for file_path in svg_files:
        name = map_icon_name(file_path, config.icon_prefix)
        if name in registered:
            warning = DuplicateNameError(name, file_path)
            logger.warning("%s", warning)
            errors.append(str(warning))
            skipped.append(name)
            continue
        try:
            registered[name] = extractor.extract(file_path, name, rules)
        except ExtractionError as exc:
            message = f'[Error] "{name}" could not be processed: {exc}'
            logger.warning("%s", message)
            errors.append(message)
            skipped.append(name)

    if not registered:
        return _failed(
            AggregateEmptyError("Error: No icons were processed successfully."),
            errors,
            skipped,
        )

    fragments = list(registered.values())
    try:
        writer.write(config.icon_set_name, config.output_path, fragments, skipped)
    except WriteError as exc:
        return _failed(exc, errors, skipped)

    logger.info(
        "Conversion completed: %s (count: %d), saved to %s",
        config.icon_set_name,
        len(registered),
        config.output_path,
    )
    if skipped:
        logger.warning("Skipped icons: %d", len(skipped))
    return ConversionResult(
        success=True,
        icon_count=len(registered),
        skipped_count=len(skipped),
        icon_names=tuple(registered),
        errors=tuple(errors),
        skipped_names=tuple(skipped),
        output_path=config.output_path,
    )
