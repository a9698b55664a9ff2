"""Project scaffolding generator.

This module renders the boilerplate sources into a project created by the
delegate executor. Templates live under ``templates/base`` (shared by every
argument parser) and ``templates/<arg_parser>`` (files specific to a parser,
which take precedence over base files with the same path).
"""

import os
import stat
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING, Any

from cargo_cli.exceptions import TemplateConflictError, TemplateIOError
from cargo_cli.scaffolding.templates import ParserTemplate, get_template
from cargo_cli.utils import get_template_dir, read_text_file

if TYPE_CHECKING:
    from cargo_cli.config import InvocationConfig
    from cargo_cli.output import StatusReporter

__all__ = ("TemplateContext", "generate_project", "render_template")

README_TEMPLATE = Path("README.md.j2")
MAIN_RS = Path("src", "main.rs")
# What ``cargo new --bin`` writes to src/main.rs, whitespace-normalized.
CARGO_MAIN_STUB = 'fn main() { println!("Hello, world!"); }'


@dataclass
class TemplateContext:
    """Context variables for template rendering.

    Attributes:
        package_name: Name of the generated package (and binary)
        template: The selected argument parser template
        readme: Whether README.md is generated
    """

    package_name: str
    template: ParserTemplate
    readme: bool = True

    @classmethod
    def from_config(cls, config: "InvocationConfig") -> "TemplateContext":
        template = get_template(config.arg_parser)
        if template is None:  # pragma: no cover
            msg = f"No template registered for argument parser {config.arg_parser!r}"
            raise ValueError(msg)
        return cls(package_name=config.package_name, template=template, readme=config.readme)

    def to_dict(self) -> dict[str, Any]:
        """Convert context to dictionary for Jinja2 rendering.

        Returns:
            Dictionary of template variables.
        """
        return {
            "package_name": self.package_name,
            "arg_parser": self.template.type.value,
            "parser_crate": self.template.crate,
            "parser_description": self.template.description,
            "dependencies": self.template.dependencies,
            "readme": self.readme,
        }


def render_template(template_path: Path, context: dict[str, Any]) -> str:
    """Render a Jinja2 template with the given context.

    Templates are rendered with autoescaping disabled because the output is
    Rust source and Markdown, not HTML.

    Args:
        template_path: Path to the template file.
        context: Dictionary of template variables.

    Returns:
        Rendered template content.
    """
    from jinja2 import Environment, FileSystemLoader, StrictUndefined

    env = Environment(
        loader=FileSystemLoader(str(template_path.parent)),
        keep_trailing_newline=True,
        undefined=StrictUndefined,
        autoescape=False,  # noqa: S701
    )
    return env.get_template(template_path.name).render(**context)


def _collect_templates(template_dir: Path, context: TemplateContext) -> dict[Path, Path]:
    """Map each output path (relative to the project) to the template producing it."""
    selected: dict[Path, Path] = {}
    for source_dir in (template_dir / "base", template_dir / context.template.type.value):
        for template_file in source_dir.glob("**/*.j2"):
            relative_path = template_file.relative_to(source_dir)
            if relative_path == README_TEMPLATE and not context.readme:
                continue
            selected[relative_path.with_suffix("")] = template_file
    return dict(sorted(selected.items()))


def _is_cargo_stub(path: Path) -> bool:
    try:
        content = read_text_file(path)
    except (OSError, UnicodeDecodeError) as e:
        raise TemplateIOError(path, getattr(e, "strerror", None) or str(e)) from e
    return " ".join(content.split()) == CARGO_MAIN_STUB


def _check_conflict(output_dir: Path, relative_path: Path) -> None:
    output_path = output_dir / relative_path
    if not output_path.exists():
        return
    if relative_path == MAIN_RS and output_path.is_file() and _is_cargo_stub(output_path):
        return
    raise TemplateConflictError(output_path)


def _default_file_mode() -> int:
    umask = os.umask(0)
    os.umask(umask)
    return 0o666 & ~umask


def _write_atomic(output_path: Path, content: str) -> None:
    """Write ``content`` through a sibling temporary file so ``output_path`` is never half written.

    The written file keeps the mode of the file it replaces, or gets the
    umask-derived default mode when it is new.
    """
    tmp_name: "str | None" = None
    try:
        mode = stat.S_IMODE(output_path.stat().st_mode) if output_path.exists() else _default_file_mode()
        output_path.parent.mkdir(parents=True, exist_ok=True)
        with tempfile.NamedTemporaryFile(
            "w",
            encoding="utf-8",
            dir=output_path.parent,
            prefix=f".{output_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as tmp:
            tmp_name = tmp.name
            tmp.write(content)
        os.chmod(tmp_name, mode)
        os.replace(tmp_name, output_path)
    except OSError as e:
        if tmp_name is not None and os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise TemplateIOError(output_path, e.strerror or str(e)) from e


def generate_project(
    output_dir: Path,
    context: TemplateContext,
    *,
    reporter: "StatusReporter | None" = None,
) -> list[Path]:
    """Generate the boilerplate files for ``context`` inside ``output_dir``.

    Every target is checked before anything is written: an existing file
    other than cargo's own ``src/main.rs`` placeholder aborts generation.

    Args:
        output_dir: The project directory created by the delegate.
        context: Template context with configuration.
        reporter: Optional status reporter for per-file progress.

    Raises:
        TemplateConflictError: If a target file already exists.
        TemplateIOError: If the project directory is missing or a file cannot be written.

    Returns:
        List of generated file paths.
    """
    if not output_dir.is_dir():
        raise TemplateIOError(output_dir, "project directory does not exist")

    plan = _collect_templates(get_template_dir(), context)
    for relative_path in plan:
        _check_conflict(output_dir, relative_path)

    context_dict = context.to_dict()
    generated_files: list[Path] = []
    for relative_path, template_file in plan.items():
        output_path = output_dir / relative_path
        verb = "Updated" if output_path.exists() else "Created"
        _write_atomic(output_path, render_template(template_file, context_dict))
        generated_files.append(output_path)
        if reporter is not None:
            reporter.debug(verb, relative_path.as_posix())

    return generated_files
