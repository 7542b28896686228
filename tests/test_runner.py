import io
import os
import subprocess
from pathlib import Path
from unittest import mock

import pytest

from nci.agents import Agent
from nci.context import DetectOptions
from nci.parse import parse_na, parse_ni, parse_nu
from nci.runner import VERSION, get_cli_command, run, run_cli


@pytest.fixture
def env(tmp_path, monkeypatch):
    bin_dir = tmp_path / "bin"
    bin_dir.mkdir()
    monkeypatch.setenv("PATH", str(bin_dir))
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("CI", raising=False)
    monkeypatch.setenv("NI_CONFIG_FILE", str(tmp_path / "missing.nirc"))
    project = tmp_path / "project"
    project.mkdir()
    monkeypatch.chdir(project)
    return tmp_path


def _make_exe(directory: Path, name: str) -> None:
    path = directory / name
    path.write_text("#!/bin/sh\nexit 0\n")
    os.chmod(path, 0o755)


def _completed(code):
    return subprocess.CompletedProcess(args=[], returncode=code)


def test_global_uses_configured_global_agent(env, monkeypatch):
    rc = env / "rc"
    rc.write_text("global_agent=pnpm\n")
    monkeypatch.setenv("NI_CONFIG_FILE", str(rc))
    options = DetectOptions(cwd=env / "project", programmatic=True)
    assert get_cli_command(parse_ni, ["eslint", "-g"], options) == ("pnpm", ["add", "-g", "eslint"])


def test_global_passes_no_context(env):
    seen = []

    def record(agent, args, ctx):
        seen.append((agent, args, ctx))
        return "recorded", list(args)

    result = get_cli_command(
        record, ["-g", "foo"], DetectOptions(cwd=env / "project", programmatic=True)
    )
    assert result == ("recorded", ["-g", "foo"])
    assert seen == [(Agent.NPM, ["-g", "foo"], None)]


def test_detected_lock_file_wins(env):
    project = env / "project"
    (project / "yarn.lock").write_text("")
    options = DetectOptions(cwd=project, programmatic=True)
    assert get_cli_command(parse_ni, ["axios"], options) == ("yarn", ["add", "axios"])


def test_context_has_lock_and_cwd(env):
    project = env / "project"
    (project / "package-lock.json").write_text("{}")
    seen = []

    def record(agent, args, ctx):
        seen.append(ctx)
        return "x", []

    get_cli_command(record, [], DetectOptions(cwd=project, programmatic=True))
    assert seen[0].has_lock is True
    assert seen[0].cwd == project
    assert seen[0].programmatic is True


def test_default_agent_from_config(env, monkeypatch):
    rc = env / "rc"
    rc.write_text("default_agent=yarn\n")
    monkeypatch.setenv("NI_CONFIG_FILE", str(rc))
    options = DetectOptions(cwd=env / "project")
    assert get_cli_command(parse_na, ["foo"], options) == ("yarn", ["foo"])


def test_ci_falls_back_to_npm(env, monkeypatch):
    monkeypatch.setenv("CI", "1")
    options = DetectOptions(cwd=env / "project")
    assert get_cli_command(parse_na, ["foo"], options) == ("npm", ["foo"])


def test_prompt_when_no_agent_known(env, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("pnpm\n"))
    options = DetectOptions(cwd=env / "project")
    assert get_cli_command(parse_ni, ["axios"], options) == ("pnpm", ["add", "axios"])


def test_cancelled_prompt_exits(env, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO(""))
    with pytest.raises(SystemExit) as excinfo:
        get_cli_command(parse_ni, [], DetectOptions(cwd=env / "project"))
    assert excinfo.value.code == 1


def test_version_flag(env, capsys):
    assert run_cli(parse_na, DetectOptions(programmatic=True), ["-v"]) == 0
    assert f"v{VERSION}" in capsys.readouterr().out


def test_help_flag(env, capsys):
    assert run(parse_na, ["--help"], DetectOptions(programmatic=True)) == 0
    out = capsys.readouterr().out
    assert "nr    -   run" in out
    assert "nci   -   clean install" in out


def test_run_executes_command(env, capsys):
    project = env / "project"
    (project / "package-lock.json").write_text("{}")
    with mock.patch("subprocess.run", return_value=_completed(3)) as spawned:
        code = run(parse_ni, ["axios"], DetectOptions(cwd=project, programmatic=True))
    assert code == 3
    assert spawned.call_args.args[0] == ["npm", "i", "axios"]
    assert "npm i axios" in capsys.readouterr().out


def test_run_cli_drops_empty_arguments(env):
    project = env / "project"
    (project / "package-lock.json").write_text("{}")
    with mock.patch("subprocess.run", return_value=_completed(0)) as spawned:
        code = run_cli(
            parse_ni, DetectOptions(cwd=project, programmatic=True), ["", "axios", ""]
        )
    assert code == 0
    assert spawned.call_args.args[0] == ["npm", "i", "axios"]


def test_run_changes_directory(env):
    other = env / "other"
    other.mkdir()
    (other / "yarn.lock").write_text("")
    options = DetectOptions(cwd=env, programmatic=True)
    with mock.patch("subprocess.run", return_value=_completed(0)) as spawned:
        run(parse_ni, ["-C", "other", "axios"], options)
    assert spawned.call_args.args[0] == ["yarn", "add", "axios"]
    assert options.cwd == env


def test_run_uses_volta_prefix(env):
    _make_exe(env / "bin", "volta")
    project = env / "project"
    (project / "package-lock.json").write_text("{}")
    with mock.patch("subprocess.run", return_value=_completed(0)) as spawned:
        code = run(parse_ni, ["axios"], DetectOptions(cwd=project, programmatic=True))
    assert code == 0
    assert spawned.call_args.args[0] == ["volta", "run", "npm", "i", "axios"]


def test_unsupported_command_fails_without_running(env):
    project = env / "project"
    (project / "package-lock.json").write_text("{}")
    with mock.patch("subprocess.run", return_value=_completed(0)) as spawned:
        code = run(parse_nu, ["-i"], DetectOptions(cwd=project, programmatic=True))
    assert code == 1
    assert spawned.call_count == 0