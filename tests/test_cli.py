from __future__ import annotations

import json
import subprocess
from pathlib import Path

import pytest
from rich.console import Console

from nextscaffold.cli import build_parser, main
from nextscaffold.package_manager import PackageManager


@pytest.fixture()
def fake_install(monkeypatch: pytest.MonkeyPatch) -> list[list[str]]:
    calls: list[list[str]] = []

    def fake_run(args, **kwargs):
        calls.append(list(args))
        return subprocess.CompletedProcess(args, 0, "", "")

    monkeypatch.setattr("nextscaffold.installer.subprocess.run", fake_run)
    return calls


def test_parser_defaults():
    args = build_parser().parse_args([])
    assert args.project_name is None
    assert args.package_manager is None
    assert args.yes is False
    assert args.skip_install is False


def test_yes_uses_defaults_without_prompting(
    tmp_path: Path, console: Console, make_prompter, fake_install
):
    prompter = make_prompter()
    exit_code = main(["-y", "-d", str(tmp_path)], console=console, prompter=prompter)

    assert exit_code == 0
    project = tmp_path / "my-nextjs-app"
    assert json.loads((project / "package.json").read_text(encoding="utf-8"))["name"] == "my-nextjs-app"
    assert "npm install" in (project / "README.md").read_text(encoding="utf-8")
    assert prompter.calls == []
    assert fake_install == []


def test_interactive_scenario(tmp_path: Path, console: Console, make_prompter, fake_install):
    prompter = make_prompter(package_manager=PackageManager.PNPM, project_names=["demo-app"])
    exit_code = main(["-d", str(tmp_path)], console=console, prompter=prompter)

    assert exit_code == 0
    assert prompter.calls == ["package_manager", "project_name"]
    project = tmp_path / "demo-app"
    assert json.loads((project / "package.json").read_text(encoding="utf-8"))["name"] == "demo-app"
    readme = (project / "README.md").read_text(encoding="utf-8")
    assert "pnpm install" in readme
    assert "pnpm dev" in readme
    for directory in ("src/shared/constants", "src/stores", "src/tests/e2e"):
        assert (project / directory / ".gitkeep").is_file()
    assert fake_install == [["pnpm", "install"]]


def test_skip_install_flag(tmp_path: Path, console: Console, make_prompter, fake_install):
    exit_code = main(
        ["demo-app", "-p", "yarn", "-d", str(tmp_path), "--skip-install"],
        console=console,
        prompter=make_prompter(),
    )
    assert exit_code == 0
    assert fake_install == []
    assert "yarn install" in console.file.getvalue()


def test_declined_overwrite_exits_cleanly(
    tmp_path: Path, console: Console, make_prompter, fake_install
):
    project = tmp_path / "demo-app"
    project.mkdir()
    (project / "index.ts").write_text("existing", encoding="utf-8")
    prompter = make_prompter(overwrite=False)

    exit_code = main(["demo-app", "-p", "npm", "-d", str(tmp_path)], console=console, prompter=prompter)

    assert exit_code == 0
    assert prompter.calls == ["overwrite"]
    assert [p.name for p in project.iterdir()] == ["index.ts"]
    assert fake_install == []


@pytest.mark.parametrize(
    "argv",
    [
        ["demo-app", "-p", "pip", "-y"],
        ["demo-app", "--package-manager", "npx"],
        ["bad name", "-y"],
        ["bad_name", "-p", "npm"],
    ],
)
def test_configuration_errors_abort_before_filesystem_changes(
    tmp_path: Path, console: Console, make_prompter, argv
):
    prompter = make_prompter()
    with pytest.raises(SystemExit) as excinfo:
        main([*argv, "-d", str(tmp_path)], console=console, prompter=prompter)

    assert excinfo.value.code == 2
    assert list(tmp_path.iterdir()) == []
    assert prompter.calls == []


def test_filesystem_error_returns_non_zero(tmp_path: Path, console: Console, make_prompter):
    blocker = tmp_path / "blocker"
    blocker.write_text("file", encoding="utf-8")

    exit_code = main(["demo-app", "-y", "-d", str(blocker)], console=console, prompter=make_prompter())

    assert exit_code == 1
    assert "Error creating project" in console.file.getvalue()


def test_version_flag(capsys: pytest.CaptureFixture[str]):
    with pytest.raises(SystemExit) as excinfo:
        main(["--version"])
    assert excinfo.value.code == 0
    assert "0.1.0" in capsys.readouterr().out
