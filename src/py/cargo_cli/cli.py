from typing import Optional

from click import BadParameter, Choice, Context, argument, group, option, pass_context, version_option

from cargo_cli.__metadata__ import __version__
from cargo_cli.config import COLOR_ENV_VAR, ArgParser, ColorMode, Vcs


@group(name="cargo-cli", context_settings={"help_option_names": ["-h", "--help"]})
@version_option(version=__version__, prog_name="cargo-cli")
def cargo_cli_group() -> None:
    """Creates a Rust command line application."""


@cargo_cli_group.command(
    name="cli",
    help="Create a new binary project with command line argument parsing boilerplate.",
)
@option(
    "-a",
    "--arg_parser",
    type=Choice([p.value for p in ArgParser]),
    metavar="PARSER",
    help="Specify the argument parser to use in the generated output.",
    default=ArgParser.CLAP.value,
    show_default=True,
)
@option(
    "--vcs",
    type=Choice([v.value for v in Vcs]),
    metavar="VCS",
    help="Initialize a new repository for the given version control system or do not initialize any version control at all, overriding a global configuration.",
    default=Vcs.GIT.value,
    show_default=True,
)
@option("--name", type=str, metavar="NAME", help="Set the resulting package name, defaults to the value of <path>.")
@option(
    "--color",
    type=Choice([c.value for c in ColorMode]),
    metavar="WHEN",
    help="Coloring.",
    default=ColorMode.AUTO.value,
    envvar=COLOR_ENV_VAR,
    show_default=True,
    show_envvar=True,
)
@option("--frozen", help="Require Cargo.lock and cache are up to date.", default=False, is_flag=True)
@option("--locked", help="Require Cargo.lock is up to date.", default=False, is_flag=True)
@option("-q", "--quiet", help="No output printed to stdout.", default=False, is_flag=True)
@option("-v", "--verbose", "verbosity", help="Use verbose output (-vv very verbose output).", count=True)
@option("--no-readme", help="Turn off README.md generation.", default=False, is_flag=True)
@argument("path", type=str)
@pass_context
def create_cli(
    ctx: "Context",
    arg_parser: "str",
    vcs: "str",
    name: "Optional[str]",
    color: "str",
    frozen: "bool",
    locked: "bool",
    quiet: "bool",
    verbosity: "int",
    no_readme: "bool",
    path: "str",
) -> None:
    """Run cargo new and add the command line boilerplate."""
    from cargo_cli.commands import create_cli_project
    from cargo_cli.config import InvocationConfig
    from cargo_cli.exceptions import CargoCliError, InvalidConfigError
    from cargo_cli.executor import CargoExecutor, ProjectExecutor
    from cargo_cli.output import StatusReporter, configure_logging

    try:
        config = InvocationConfig(
            path=path,
            arg_parser=arg_parser,
            vcs=vcs,
            name=name,
            color=color,
            frozen=frozen,
            locked=locked,
            verbosity=verbosity,
            quiet=quiet,
            readme=not no_readme,
        )
    except InvalidConfigError as e:
        raise BadParameter(str(e), ctx=ctx, param_hint=e.param) from e

    reporter = StatusReporter(level=config.output_level, color=config.color)  # type: ignore[arg-type]
    configure_logging(config.output_level, reporter.err_console)
    executor = ctx.obj if isinstance(ctx.obj, ProjectExecutor) else CargoExecutor()

    try:
        create_cli_project(config, executor, reporter)
    except CargoCliError as e:
        reporter.fail(e)
        ctx.exit(e.exit_code)
