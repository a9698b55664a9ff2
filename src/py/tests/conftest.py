from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from cargo_cli.config import InvocationConfig
from cargo_cli.exceptions import DelegateError
from cargo_cli.executor import ProjectExecutor, build_cargo_new_args

CARGO_TOML = """[package]
name = "{name}"
version = "0.1.0"
edition = "2021"

[dependencies]
"""
CARGO_MAIN_RS = 'fn main() {\n    println!("Hello, world!");\n}\n'

# Environment variables that may affect test behavior - clear before each test
_CARGO_ENV_VARS = ["CARGO", "CARGO_TERM_COLOR", "NO_COLOR", "FORCE_COLOR"]


def write_cargo_skeleton(path: Path, name: str) -> None:
    """Write what ``cargo new --bin --vcs none`` produces."""
    (path / "src").mkdir(parents=True, exist_ok=True)
    (path / "Cargo.toml").write_text(CARGO_TOML.format(name=name), encoding="utf-8")
    (path / "src" / "main.rs").write_text(CARGO_MAIN_RS, encoding="utf-8")


class FakeExecutor(ProjectExecutor):
    """Records cargo command lines instead of running them."""

    bin_name = "cargo"

    def __init__(self, *, return_code: int = 0, create_skeleton: bool = True) -> None:
        super().__init__("/usr/bin/cargo")
        self.return_code = return_code
        self.create_skeleton = create_skeleton
        self.commands: list[list[str]] = []

    def command_args(self, config: InvocationConfig) -> list[str]:
        return build_cargo_new_args(config)

    def create(self, config: InvocationConfig) -> None:
        command = self.command(config)
        self.commands.append(command)
        if self.return_code != 0:
            raise DelegateError(command, self.return_code)
        if self.create_skeleton:
            write_cargo_skeleton(Path(config.path), config.package_name)


MakeExecutorFixture = Callable[..., FakeExecutor]


@pytest.fixture(autouse=True)
def clean_cargo_env(monkeypatch: pytest.MonkeyPatch) -> Generator[None, None, None]:
    """Clear cargo-related environment variables before each test for isolation."""
    for var in _CARGO_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    yield


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def make_executor() -> MakeExecutorFixture:
    return FakeExecutor


@pytest.fixture
def fake_executor() -> FakeExecutor:
    return FakeExecutor()


@pytest.fixture
def cargo_project(tmp_path: Path) -> Path:
    """A project directory as left behind by ``cargo new --bin demo``."""
    project_dir = tmp_path / "demo"
    write_cargo_skeleton(project_dir, "demo")
    return project_dir
