"""The ``cargo cli`` workflow.

Creates the base project with the delegate executor, renders the boilerplate
sources into it and registers the parser's crates in ``Cargo.toml``.
"""

from pathlib import Path
from typing import TYPE_CHECKING

from cargo_cli.scaffolding import TemplateContext, generate_project, update_manifest

if TYPE_CHECKING:
    from cargo_cli.config import InvocationConfig
    from cargo_cli.executor import ProjectExecutor
    from cargo_cli.output import StatusReporter

README_NAME = "README.md"


def create_cli_project(
    config: "InvocationConfig",
    executor: "ProjectExecutor",
    reporter: "StatusReporter",
) -> Path:
    """Create a command line application project.

    Steps run in order and the first failure stops the run. Nothing created
    by an earlier step is removed.

    Args:
        config: The validated invocation.
        executor: Creates the base project skeleton.
        reporter: Receives progress output.

    Raises:
        DelegateError: If the executor fails; no templates are written.
        DelegateExecutableNotFoundError: If the executor's binary is missing.
        TemplateConflictError: If a generated file already exists.
        TemplateIOError: If a generated file cannot be written.
        ManifestError: If ``Cargo.toml`` cannot be updated.

    Returns:
        The project directory.
    """
    executor.create(config)

    project_dir = Path(config.path)
    context = TemplateContext.from_config(config)
    generate_project(project_dir, context, reporter=reporter)

    dependencies = context.template.dependencies
    added = update_manifest(
        project_dir / "Cargo.toml",
        dependencies,
        readme=README_NAME if config.readme else None,
    )
    for name in dependencies:
        if name not in added:
            reporter.warn("Skipping", f"dependency `{name}`, already declared in Cargo.toml")
    reporter.debug("Updated", "Cargo.toml")

    reporter.info("Created", f"binary cli (application) `{config.package_name}` project")
    return project_dir
