from pathlib import Path
from typing import TYPE_CHECKING
from unittest.mock import Mock, patch

import pytest
from click.testing import CliRunner

from cargo_cli.cli import cargo_cli_group

if TYPE_CHECKING:
    from tests.conftest import FakeExecutor, MakeExecutorFixture


def test_group_help(runner: CliRunner) -> None:
    result = runner.invoke(cargo_cli_group, ["--help"])

    assert result.exit_code == 0
    assert "Creates a Rust command line application." in result.output
    assert "cli" in result.output


def test_cli_help_lists_options(runner: CliRunner) -> None:
    result = runner.invoke(cargo_cli_group, ["cli", "-h"])

    assert result.exit_code == 0
    for flag in ("--arg_parser", "--vcs", "--name", "--color", "--frozen", "--locked", "--quiet", "--verbose"):
        assert flag in result.output
    assert "PATH" in result.output


def test_version(runner: CliRunner) -> None:
    result = runner.invoke(cargo_cli_group, ["--version"])
    assert result.exit_code == 0
    assert result.output.startswith("cargo-cli, version ")


def test_cli_creates_clap_project(runner: CliRunner, fake_executor: "FakeExecutor", tmp_path: Path) -> None:
    project_dir = tmp_path / "demo"

    result = runner.invoke(cargo_cli_group, ["cli", str(project_dir)], obj=fake_executor)

    assert result.exit_code == 0, result.output
    assert "Created binary cli (application) `demo` project" in result.output
    assert fake_executor.commands == [
        ["/usr/bin/cargo", "new", "--bin", "--color", "auto", "--vcs", "git", str(project_dir)]
    ]
    assert (project_dir / "Cargo.toml").exists()
    assert sorted(p.name for p in (project_dir / "src").iterdir()) == ["error.rs", "main.rs", "run.rs"]
    assert "clap::" in (project_dir / "src" / "run.rs").read_text()


def test_cli_creates_docopt_project(runner: CliRunner, fake_executor: "FakeExecutor", tmp_path: Path) -> None:
    project_dir = tmp_path / "demo"

    result = runner.invoke(cargo_cli_group, ["cli", "-a", "docopt", str(project_dir)], obj=fake_executor)

    assert result.exit_code == 0, result.output
    assert "Docopt::new(USAGE)" in (project_dir / "src" / "run.rs").read_text()
    assert 'docopt = "1"' in (project_dir / "Cargo.toml").read_text()


def test_cli_forwards_cargo_options(runner: CliRunner, fake_executor: "FakeExecutor", tmp_path: Path) -> None:
    project_dir = tmp_path / "out"

    result = runner.invoke(
        cargo_cli_group,
        ["cli", "--vcs", "pijul", "-vv", "-a", "docopt", "--name", "flambe", "--frozen", "--locked", str(project_dir)],
        obj=fake_executor,
    )

    assert result.exit_code == 0, result.output
    assert fake_executor.commands[0][1:] == [
        "new",
        "--bin",
        "--frozen",
        "--locked",
        "-vv",
        "--color",
        "auto",
        "--vcs",
        "pijul",
        "--name",
        "flambe",
        str(project_dir),
    ]
    assert "Created binary cli (application) `flambe` project" in result.output


def test_cli_color_from_environment(runner: CliRunner, fake_executor: "FakeExecutor", tmp_path: Path) -> None:
    result = runner.invoke(
        cargo_cli_group, ["cli", str(tmp_path / "demo")], obj=fake_executor, env={"CARGO_TERM_COLOR": "never"}
    )

    assert result.exit_code == 0, result.output
    assert fake_executor.commands[0][3:5] == ["--color", "never"]


def test_cli_verbose_reports_files(runner: CliRunner, fake_executor: "FakeExecutor", tmp_path: Path) -> None:
    result = runner.invoke(cargo_cli_group, ["cli", "-v", str(tmp_path / "demo")], obj=fake_executor)

    assert result.exit_code == 0, result.output
    assert "Updated src/main.rs" in result.output
    assert "Created src/run.rs" in result.output
    assert "Updated Cargo.toml" in result.output


def test_cli_quiet(runner: CliRunner, fake_executor: "FakeExecutor", tmp_path: Path) -> None:
    result = runner.invoke(cargo_cli_group, ["cli", "-q", str(tmp_path / "demo")], obj=fake_executor)

    assert result.exit_code == 0, result.output
    assert "Created" not in result.output
    assert "--quiet" in fake_executor.commands[0]


def test_cli_no_readme(runner: CliRunner, fake_executor: "FakeExecutor", tmp_path: Path) -> None:
    project_dir = tmp_path / "demo"

    result = runner.invoke(cargo_cli_group, ["cli", "--no-readme", str(project_dir)], obj=fake_executor)

    assert result.exit_code == 0, result.output
    assert not (project_dir / "README.md").exists()
    assert "readme" not in (project_dir / "Cargo.toml").read_text()


# =====================================================
# Validation Tests
# =====================================================


@pytest.mark.parametrize(
    ("args", "message"),
    [
        (["--vcs", "svn"], "--vcs"),
        (["--arg_parser", "foo"], "--arg_parser"),
        (["-a", "foo"], "'clap', 'docopt'"),
        (["--color", "sometimes"], "--color"),
    ],
)
def test_cli_rejects_unknown_values(
    runner: CliRunner, fake_executor: "FakeExecutor", tmp_path: Path, args: list[str], message: str
) -> None:
    result = runner.invoke(cargo_cli_group, ["cli", *args, str(tmp_path / "demo")], obj=fake_executor)

    assert result.exit_code == 2
    assert "Invalid value" in result.output
    assert message in result.output
    assert fake_executor.commands == []
    assert not (tmp_path / "demo").exists()


def test_cli_requires_path(runner: CliRunner, fake_executor: "FakeExecutor") -> None:
    result = runner.invoke(cargo_cli_group, ["cli", "-a", "docopt"], obj=fake_executor)

    assert result.exit_code == 2
    assert "Missing argument 'PATH'" in result.output
    assert fake_executor.commands == []


def test_cli_requires_non_empty_path(runner: CliRunner, fake_executor: "FakeExecutor") -> None:
    result = runner.invoke(cargo_cli_group, ["cli", ""], obj=fake_executor)

    assert result.exit_code == 2
    assert "non-empty <path>" in result.output
    assert fake_executor.commands == []


def test_cli_rejects_quiet_with_verbose(runner: CliRunner, fake_executor: "FakeExecutor", tmp_path: Path) -> None:
    result = runner.invoke(cargo_cli_group, ["cli", "-q", "-v", str(tmp_path / "demo")], obj=fake_executor)

    assert result.exit_code == 2
    assert "--quiet cannot be used together with --verbose" in result.output
    assert fake_executor.commands == []


@patch("subprocess.Popen")
@patch("subprocess.run")
def test_cli_invalid_input_spawns_no_process(mock_run: Mock, mock_popen: Mock, runner: CliRunner) -> None:
    result = runner.invoke(cargo_cli_group, ["cli", "--vcs", "svn"])

    assert result.exit_code == 2
    mock_run.assert_not_called()
    mock_popen.assert_not_called()


# =====================================================
# Failure Reporting Tests
# =====================================================


def test_cli_delegate_failure(runner: CliRunner, make_executor: "MakeExecutorFixture", tmp_path: Path) -> None:
    executor = make_executor(return_code=101)
    project_dir = tmp_path / "demo"

    result = runner.invoke(cargo_cli_group, ["cli", str(project_dir)], obj=executor)

    assert result.exit_code == 101
    assert "error: delegation failed" in result.output
    assert not (project_dir / "src" / "run.rs").exists()


def test_cli_template_conflict(runner: CliRunner, fake_executor: "FakeExecutor", tmp_path: Path) -> None:
    project_dir = tmp_path / "demo"
    (project_dir / "src").mkdir(parents=True)
    run_rs = project_dir / "src" / "run.rs"
    run_rs.write_text("// existing\n")

    result = runner.invoke(cargo_cli_group, ["cli", str(project_dir)], obj=fake_executor)

    assert result.exit_code == 1
    assert "error: template emission failed" in result.output
    assert "run.rs" in result.output
    assert run_rs.read_text() == "// existing\n"


def test_cli_quiet_still_reports_errors(
    runner: CliRunner, make_executor: "MakeExecutorFixture", tmp_path: Path
) -> None:
    result = runner.invoke(cargo_cli_group, ["cli", "-q", str(tmp_path / "demo")], obj=make_executor(return_code=1))

    assert result.exit_code == 1
    assert "error: delegation failed" in result.output


@patch("subprocess.run")
@patch("shutil.which")
def test_cli_uses_cargo_by_default(mock_which: Mock, mock_run: Mock, runner: CliRunner, tmp_path: Path) -> None:
    mock_which.return_value = "/usr/bin/cargo"
    mock_run.return_value = Mock(returncode=101)

    result = runner.invoke(cargo_cli_group, ["cli", "--vcs", "none", str(tmp_path / "demo")])

    assert result.exit_code == 101
    args, _ = mock_run.call_args
    assert args[0][:3] == ["/usr/bin/cargo", "new", "--bin"]
    assert "error: delegation failed" in result.output


@patch("shutil.which")
def test_cli_missing_cargo(mock_which: Mock, runner: CliRunner, tmp_path: Path) -> None:
    mock_which.return_value = None

    result = runner.invoke(cargo_cli_group, ["cli", str(tmp_path / "demo")])

    assert result.exit_code == 1
    assert "Executable 'cargo' not found." in result.output


def test_cli_stale_cargo_env_var(runner: CliRunner, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CARGO", str(tmp_path / "no-such-cargo"))

    result = runner.invoke(cargo_cli_group, ["cli", "--vcs", "none", str(tmp_path / "demo")])

    assert result.exit_code == 1
    assert not isinstance(result.exception, FileNotFoundError)
    assert "error: delegation failed: Executable" in result.output
    assert "no-such-cargo" in result.output
    assert not (tmp_path / "demo").exists()
