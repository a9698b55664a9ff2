"""Utility helpers for cargo-cli."""

from importlib.util import find_spec
from pathlib import Path


def get_package_path(*parts: str) -> Path:
    """Resolve a path inside the installed cargo-cli package.

    Args:
        *parts: Path segments relative to the package root.

    Returns:
        The resolved package path.
    """
    spec = find_spec("cargo_cli")
    if spec and spec.origin:
        return Path(spec.origin).parent.joinpath(*parts)
    return Path(__file__).resolve().parent.joinpath(*parts)


def get_template_dir() -> Path:
    """Get the directory containing the bundled Jinja2 templates.

    Returns:
        Path to the templates directory.
    """
    return get_package_path("templates")


def read_text_file(path: Path, *, encoding: str = "utf-8") -> str:
    """Read a text file with consistent encoding.

    Args:
        path: File path to read.
        encoding: Text encoding.

    Returns:
        File contents.
    """
    return path.read_text(encoding=encoding)
