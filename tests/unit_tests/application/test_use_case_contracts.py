"""Unit tests for the conversion use-case contract."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from svg_icon_converter.application.use_cases import (
    build_conversion_options,
    convert_icons,
    discover_svg_files,
)
from svg_icon_converter.errors import (
    AggregateEmptyError,
    ConfigurationError,
    DiscoveryError,
    ExtractionError,
    WriteError,
)
from svg_icon_converter.types import IconFragment


class _Extractor:
    def __init__(self, failing: set[str] | None = None) -> None:
        self.failing = failing or set()
        self.calls: list[tuple[Path, str]] = []

    def extract(self, file_path: Path, name: str, rules: Sequence[object]) -> IconFragment:
        self.calls.append((file_path, name))
        assert rules
        if file_path.name in self.failing:
            raise ExtractionError("broken")
        return IconFragment(name=name, markup="<path/>", source_path=file_path)


class _Writer:
    def __init__(self, error: WriteError | None = None) -> None:
        self.error = error
        self.calls: list[tuple[str, Path, list[str], list[str]]] = []

    def write(
        self,
        icon_set_name: str,
        output_path: Path,
        fragments: Sequence[IconFragment],
        skipped_names: Sequence[str],
    ) -> None:
        self.calls.append(
            (
                icon_set_name,
                output_path,
                [fragment.name for fragment in fragments],
                list(skipped_names),
            )
        )
        if self.error is not None:
            raise self.error


def _touch(directory: Path, *names: str) -> None:
    directory.mkdir(parents=True, exist_ok=True)
    for name in names:
        (directory / name).write_text("<svg/>")


def _options(source: Path, output: Path, **kwargs: object):
    return build_conversion_options(source_dir=source, output_path=output, **kwargs)


def test_discovery_is_sorted_and_non_recursive(tmp_path: Path) -> None:
    """List only top-level SVG files in file-name order."""
    _touch(tmp_path, "b.svg", "a.SVG", "notes.txt")
    _touch(tmp_path / "nested", "c.svg")
    (tmp_path / "dir.svg").mkdir()

    assert [path.name for path in discover_svg_files(tmp_path)] == ["a.SVG", "b.svg"]


def test_discovery_without_svg_raises(tmp_path: Path) -> None:
    """Signal an empty source directory."""
    with pytest.raises(DiscoveryError, match="No SVG files found"):
        discover_svg_files(tmp_path)


def test_first_seen_wins_for_duplicate_names(tmp_path: Path) -> None:
    """Skip later files whose names collide with a registered icon."""
    source = tmp_path / "src"
    _touch(source, "A.svg", "a.svg", "b.svg")
    extractor = _Extractor()
    writer = _Writer()

    result = convert_icons(
        _options(source, tmp_path / "out"), extractor=extractor, writer=writer
    )

    assert result.success
    assert result.icon_count == 2
    assert result.skipped_count == 1
    assert result.icon_names == ("app-a", "app-b")
    assert result.skipped_names == ("app-a",)
    assert [path.name for path, _ in extractor.calls] == ["A.svg", "b.svg"]
    assert "duplicate icon name 'app-a'" in result.errors[0]
    assert writer.calls == [
        ("Custom SVG Icons", tmp_path / "out", ["app-a", "app-b"], ["app-a"])
    ]


def test_extraction_failure_skips_file_and_continues(tmp_path: Path) -> None:
    """Record per-file failures without aborting the batch."""
    source = tmp_path / "src"
    _touch(source, "a.svg", "b.svg", "c.svg")

    result = convert_icons(
        _options(source, tmp_path / "out", icon_prefix="my"),
        extractor=_Extractor(failing={"b.svg"}),
        writer=_Writer(),
    )

    assert result.success
    assert result.icon_names == ("my-a", "my-c")
    assert result.skipped_names == ("my-b",)
    assert result.errors == ('[Error] "my-b" could not be processed: broken',)


def test_all_files_failing_is_fatal_without_writes(tmp_path: Path) -> None:
    """Return an aggregate failure and never call the writer."""
    source = tmp_path / "src"
    _touch(source, "a.svg", "b.svg")
    writer = _Writer()

    result = convert_icons(
        _options(source, tmp_path / "out"),
        extractor=_Extractor(failing={"a.svg", "b.svg"}),
        writer=writer,
    )

    assert not result.success
    assert result.icon_count == 0
    assert result.skipped_count == 2
    assert isinstance(result.failure, AggregateEmptyError)
    assert result.errors[-1] == "Error: No icons were processed successfully."
    assert writer.calls == []


def test_missing_source_dir_is_configuration_failure(tmp_path: Path) -> None:
    """Fail before discovery when the source directory does not exist."""
    extractor = _Extractor()

    result = convert_icons(
        _options(tmp_path / "missing", tmp_path / "out"),
        extractor=extractor,
        writer=_Writer(),
    )

    assert not result.success
    assert result.icon_count == 0
    assert isinstance(result.failure, ConfigurationError)
    assert "does not exist" in result.errors[0]
    assert extractor.calls == []
    with pytest.raises(ConfigurationError):
        result.raise_for_status()


@pytest.mark.parametrize("styles_filter", [[42], 5])
def test_invalid_style_filter_is_configuration_failure(
    tmp_path: Path, styles_filter: object
) -> None:
    """Report unusable style rules as configuration errors."""
    source = tmp_path / "src"
    _touch(source, "a.svg")

    result = convert_icons(
        _options(source, tmp_path / "out", styles_filter=styles_filter),
        extractor=_Extractor(),
        writer=_Writer(),
    )

    assert not result.success
    assert isinstance(result.failure, ConfigurationError)


def test_blank_icon_set_name_is_rejected(tmp_path: Path) -> None:
    """Validate the icon set name through the schema."""
    source = tmp_path / "src"
    _touch(source, "a.svg")

    result = convert_icons(
        _options(source, tmp_path / "out", icon_set_name="  "),
        extractor=_Extractor(),
        writer=_Writer(),
    )

    assert not result.success
    assert result.errors[0].startswith("Invalid conversion options:")


def test_writer_failure_is_reported_with_stage(tmp_path: Path) -> None:
    """Surface writer failures as an unsuccessful result."""
    source = tmp_path / "src"
    _touch(source, "a.svg")

    result = convert_icons(
        _options(source, tmp_path / "out"),
        extractor=_Extractor(),
        writer=_Writer(error=WriteError("manifest", "disk full")),
    )

    assert not result.success
    assert result.icon_count == 0
    assert result.errors == ("Error writing manifest: disk full",)
    assert isinstance(result.failure, WriteError)
    assert result.failure.stage == "manifest"


def test_counts_account_for_every_file(tmp_path: Path) -> None:
    """Keep icon_count + skipped_count equal to the discovered file count."""
    source = tmp_path / "src"
    names = ["a.svg", "A.svg", "b.svg", "c.svg", "C.SVG", "d.svg"]
    _touch(source, *names)

    result = convert_icons(
        _options(source, tmp_path / "out"),
        extractor=_Extractor(failing={"d.svg"}),
        writer=_Writer(),
    )

    assert result.icon_count + result.skipped_count == len(names)


def test_output_directory_is_created_before_discovery(tmp_path: Path) -> None:
    """Create the output directory even when no SVG files are found."""
    source = tmp_path / "src"
    source.mkdir()
    output = tmp_path / "nested" / "out"
    writer = _Writer()

    result = convert_icons(_options(source, output), extractor=_Extractor(), writer=writer)

    assert isinstance(result.failure, DiscoveryError)
    assert output.is_dir()
    assert list(output.iterdir()) == []
    assert writer.calls == []


def test_unusable_output_directory_fails_before_extraction(tmp_path: Path) -> None:
    """Report the output directory stage when it cannot be created."""
    source = tmp_path / "src"
    _touch(source, "a.svg")
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory")
    extractor = _Extractor()

    result = convert_icons(
        _options(source, blocker / "out"), extractor=extractor, writer=_Writer()
    )

    assert not result.success
    assert isinstance(result.failure, WriteError)
    assert result.failure.stage == "output directory"
    assert extractor.calls == []
