"""Application-layer result objects."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

from svg_icon_converter.errors import IconConverterError


@dataclass(frozen=True)
class ConversionResult:
    """Structured conversion outcome.

    ``errors`` holds every message produced during the run, including
    per-file duplicate and extraction warnings on successful runs.
    ``failure`` is the run-level error that ended an unsuccessful run.
    """

    success: bool
    icon_count: int = 0
    skipped_count: int = 0
    icon_names: tuple[str, ...] = ()
    errors: tuple[str, ...] = ()
    skipped_names: tuple[str, ...] = ()
    output_path: Path | None = None
    failure: IconConverterError | None = field(default=None, compare=False, repr=False)

    def raise_for_status(self) -> None:
        """Raise the run-level failure, if any."""
        if self.failure is not None:
            raise self.failure

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-serializable view of the result."""
        return {
            "success": self.success,
            "iconCount": self.icon_count,
            "skippedCount": self.skipped_count,
            "iconNames": list(self.icon_names),
            "skippedNames": list(self.skipped_names),
            "errors": list(self.errors),
            "outputPath": str(self.output_path) if self.output_path else None,
        }
