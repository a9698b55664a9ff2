"""Edits to the ``Cargo.toml`` written by ``cargo new``.

Keys are inserted as text so the formatting and comments cargo produced are
kept. The manifest is parsed with :mod:`tomllib` before and after the edit.
"""

import re
import tomllib
from pathlib import Path
from typing import Any

from cargo_cli.exceptions import ManifestError
from cargo_cli.utils import read_text_file

__all__ = ("update_manifest",)

_TABLE_HEADER = re.compile(r"^\s*\[(?P<array>\[)?\s*(?P<name>[^\[\]]+?)\s*\]\]?\s*(?:#.*)?$")


def _load(manifest_path: Path, text: str) -> dict[str, Any]:
    try:
        return tomllib.loads(text)
    except tomllib.TOMLDecodeError as e:
        raise ManifestError(manifest_path, f"invalid TOML ({e})") from e


def _table_span(lines: list[str], table: str) -> "tuple[int, int] | None":
    """Find the lines belonging to ``[table]``.

    Returns:
        The index of the header line and the index one past the table's last
        key line (trailing blank and comment-only lines excluded), or None if
        the table has no header.
    """
    start: "int | None" = None
    end = len(lines)
    for index, line in enumerate(lines):
        match = _TABLE_HEADER.match(line)
        if match is None:
            continue
        if start is not None:
            end = index
            break
        if match.group("array") is None and match.group("name") == table:
            start = index
    if start is None:
        return None
    while end > start + 1 and (not lines[end - 1].strip() or lines[end - 1].lstrip().startswith("#")):
        end -= 1
    return start, end


def _insert_into_table(lines: list[str], table: str, entries: list[str]) -> None:
    span = _table_span(lines, table)
    if span is None:
        while lines and not lines[-1].strip():
            lines.pop()
        lines.extend(["", f"[{table}]", *entries])
        return
    _, end = span
    lines[end:end] = entries


def update_manifest(
    manifest_path: Path,
    dependencies: dict[str, str],
    *,
    readme: "str | None" = None,
) -> list[str]:
    """Add ``dependencies`` (and optionally a readme key) to a Cargo manifest.

    Dependencies already declared in the manifest are left as they are.

    Args:
        manifest_path: Path to ``Cargo.toml``.
        dependencies: Crate name to TOML value literal, e.g. ``{"clap": '"4"'}``.
        readme: Value for ``package.readme``; skipped when None or already set.

    Raises:
        ManifestError: If the manifest cannot be read, parsed or written.

    Returns:
        The names of the dependencies that were added.
    """
    try:
        text = read_text_file(manifest_path)
    except OSError as e:
        raise ManifestError(manifest_path, e.strerror or str(e)) from e

    data = _load(manifest_path, text)
    package = data.get("package")
    if not isinstance(package, dict):
        raise ManifestError(manifest_path, "missing [package] table")
    existing = data.get("dependencies", {})

    lines = text.splitlines()
    if readme is not None and "readme" not in package:
        _insert_into_table(lines, "package", [f'readme = "{readme}"'])

    added = [name for name in dependencies if name not in existing]
    if added:
        _insert_into_table(lines, "dependencies", [f"{name} = {dependencies[name]}" for name in added])

    new_text = "\n".join(lines) + "\n"
    _load(manifest_path, new_text)
    try:
        manifest_path.write_text(new_text, encoding="utf-8")
    except OSError as e:
        raise ManifestError(manifest_path, e.strerror or str(e)) from e
    return added
