"""Exception hierarchy for SVG icon conversion."""

from __future__ import annotations


class IconConverterError(Exception):
    """Base error for all icon conversion failures.

    Attributes
    ----------
    exit_code : int
        Process exit code used by the CLI when the error ends a run.
    """

    exit_code = 1


class ConfigurationError(IconConverterError):
    """Raised when conversion options are missing or invalid."""

    exit_code = 2


class DiscoveryError(IconConverterError):
    """Raised when the source directory holds no SVG files."""

    exit_code = 3


class DuplicateNameError(IconConverterError):
    """Raised when two files map to the same icon name."""

    def __init__(self, name: str, file_path: object) -> None:
        self.name = name
        self.file_path = file_path
        super().__init__(
            f"Warning: duplicate icon name '{name}'. File '{file_path}' will be skipped."
        )


class ExtractionError(IconConverterError):
    """Raised when an SVG file cannot be read or has no usable root element."""


class AggregateEmptyError(IconConverterError):
    """Raised when every discovered file failed or collided."""

    exit_code = 4


class WriteError(IconConverterError):
    """Raised when generated artifacts cannot be written.

    Parameters
    ----------
    stage : str
        Output stage that failed (``"exports"``, ``"types"``, ``"manifest"``
        or ``"commit"``).
    message : str
        Human-readable failure description.
    """

    exit_code = 5

    def __init__(self, stage: str, message: str) -> None:
        self.stage = stage
        super().__init__(f"Error writing {stage}: {message}")
