"""Shared pytest configuration and marker assignment."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

SVG_TEMPLATE = (
    '<?xml version="1.0" encoding="UTF-8"?>\n'
    '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 24 24">\n'
    "  {body}\n"
    "</svg>\n"
)


def pytest_collection_modifyitems(
    config: pytest.Config, items: list[pytest.Item]
) -> None:
    """Attach suite markers based on test file path."""
    del config
    for item in items:
        path = Path(str(item.fspath))
        parts = set(path.parts)
        if "e2e_tests" in parts:
            item.add_marker(pytest.mark.e2e)
        elif "integration_tests" in parts:
            item.add_marker(pytest.mark.integration)
        elif "unit_tests" in parts:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def write_svg() -> Callable[..., Path]:
    """Return a helper writing a minimal SVG document."""

    def _write(directory: Path, filename: str, body: str | None = None) -> Path:
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / filename
        content = body if body is not None else '<path style="fill:#000000" d="M0 0h24v24H0z"/>'
        path.write_text(SVG_TEMPLATE.format(body=content), encoding="utf-8")
        return path

    return _write
