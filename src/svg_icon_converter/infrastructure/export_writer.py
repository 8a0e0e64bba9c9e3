"""Filesystem writer for generated icon modules and manifest."""

from __future__ import annotations

import json
import os
import tempfile
from collections.abc import Sequence
from pathlib import Path
from typing import IO

from svg_icon_converter.converters.naming import ICON_NAMES_BINDING
from svg_icon_converter.errors import WriteError
from svg_icon_converter.types import IconFragment

EXPORTS_FILENAME = "index.js"
TYPES_FILENAME = "index.d.ts"
MANIFEST_FILENAME = "icons.json"


def _header(icon_set_name: str, icon_count: int, skipped_names: Sequence[str]) -> list[str]:
    lines = [
        f"/* {icon_set_name} (count: {icon_count}) */",
        "/* Generated by svg-icon-converter. Do not edit by hand. */",
    ]
    if skipped_names:
        lines.append(f"/* Skipped: {', '.join(skipped_names)} */")
    return lines


def render_exports(
    icon_set_name: str,
    fragments: Sequence[IconFragment],
    skipped_names: Sequence[str],
) -> str:
    """Render the value-exports module."""
    names = json.dumps(manifest_names(fragments))
    lines = _header(icon_set_name, len(fragments), skipped_names)
    lines.append("")
    lines.extend(fragment.export_fragment for fragment in fragments)
    lines.append("")
    lines.append(f"export const {ICON_NAMES_BINDING} = {names}")
    return "\n".join(lines) + "\n"


def render_types(
    icon_set_name: str,
    fragments: Sequence[IconFragment],
    skipped_names: Sequence[str],
) -> str:
    """Render the type-declarations module."""
    lines = _header(icon_set_name, len(fragments), skipped_names)
    lines.append("")
    lines.append("export type IconName =")
    lines.extend(f"  | {json.dumps(name)}" for name in manifest_names(fragments))
    lines.append("")
    lines.append(f"export declare const {ICON_NAMES_BINDING}: readonly IconName[]")
    lines.extend(fragment.type_fragment for fragment in fragments)
    return "\n".join(lines) + "\n"


def manifest_names(fragments: Sequence[IconFragment]) -> list[str]:
    """Return sorted, de-duplicated icon names."""
    return sorted({fragment.name for fragment in fragments})


def render_manifest(fragments: Sequence[IconFragment]) -> str:
    """Render ``icons.json`` content."""
    return json.dumps(manifest_names(fragments), indent=2, ensure_ascii=False) + "\n"


def _default_file_mode() -> int:
    """Return the mode a plain ``open()`` would give a new file."""
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


class FileExportWriter:
    """Write ``index.js``, ``index.d.ts`` and ``icons.json`` into a directory.

    All three artifacts are staged as temporary files next to their targets
    and only moved into place once every stage has been written, manifest
    last. On failure the staged files are removed and a :class:`WriteError`
    names the stage that failed.

    Concurrent writers targeting the same directory are not supported.
    """

    def write(
        self,
        icon_set_name: str,
        output_path: Path,
        fragments: Sequence[IconFragment],
        skipped_names: Sequence[str],
    ) -> None:
        """Write generated artifacts for ``fragments`` into ``output_path``.

        Parameters
        ----------
        icon_set_name : str
            Display name recorded in the generated headers.
        output_path : Path
            Output directory, created with parents when missing.
        fragments : Sequence[IconFragment]
            Accepted icons in registration order.
        skipped_names : Sequence[str]
            Icon names left out of the artifacts.

        Raises
        ------
        WriteError
            If any artifact cannot be staged or committed.
        """
        output_dir = Path(output_path)
        try:
            output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise WriteError("output directory", f"{output_dir}: {exc}") from exc

        artifacts = (
            ("exports", EXPORTS_FILENAME, render_exports(icon_set_name, fragments, skipped_names)),
            ("types", TYPES_FILENAME, render_types(icon_set_name, fragments, skipped_names)),
            ("manifest", MANIFEST_FILENAME, render_manifest(fragments)),
        )

        mode = _default_file_mode()
        pending: list[Path] = []
        try:
            staged = []
            for stage, filename, content in artifacts:
                target = output_dir / filename
                tmp_path = self._stage(stage, target, content, mode, pending)
                staged.append((stage, tmp_path, target))
            for stage, tmp_path, target in staged:
                try:
                    self._commit(tmp_path, target)
                except OSError as exc:
                    raise WriteError(stage, f"{target}: {exc}") from exc
                pending.remove(tmp_path)
        finally:
            for leftover in pending:
                leftover.unlink(missing_ok=True)

    def _stage(
        self,
        stage: str,
        target: Path,
        content: str,
        mode: int,
        pending: list[Path],
    ) -> Path:
        try:
            handle = self._open_staging(target)
            pending.append(Path(handle.name))
            with handle:
                handle.write(content)
            # Temporary files are created owner-only.
            os.chmod(pending[-1], mode)
        except OSError as exc:
            raise WriteError(stage, f"{target}: {exc}") from exc
        return pending[-1]

    def _open_staging(self, target: Path) -> IO[str]:
        return tempfile.NamedTemporaryFile(
            mode="w",
            encoding="utf-8",
            newline="\n",
            dir=target.parent,
            prefix=f".{target.name}.",
            suffix=".tmp",
            delete=False,
        )

    def _commit(self, tmp_path: Path, target: Path) -> None:
        os.replace(tmp_path, target)
