"""Work out which package manager a project uses."""

from __future__ import annotations

import json
import os
import re
import sys
from pathlib import Path

from nci.agents import Agent
from nci.context import DetectOptions
from nci.prompts import PromptCancelled, confirm
from nci.style import yellow
from nci.utils import Package, execa_command, which_cmd

AGENT_MAP: dict[str, Agent] = {
    "bun": Agent.BUN,
    "pnpm": Agent.PNPM,
    "pnpm@6": Agent.PNPM6,
    "yarn": Agent.YARN,
    "yarn@berry": Agent.YARN_BERRY,
    "npm": Agent.NPM,
}

# Searched in this order; the first lock file found wins.
LOCKS_MAP: dict[str, Agent] = {
    "bun.lockb": Agent.BUN,
    "pnpm-lock.yaml": Agent.PNPM,
    "yarn.lock": Agent.YARN,
    "package-lock.json": Agent.NPM,
    "npm-shrinkwrap.json": Agent.NPM,
}

_MAJOR = re.compile(r"[+-]?\d+")


def find_up(filename: str, cwd: str | Path) -> Path | None:
    """Return the nearest ``filename`` in ``cwd`` or one of its parents."""
    start = Path(cwd)
    for directory in (start, *start.parents):
        candidate = directory / filename
        if candidate.is_file():
            return candidate
    return None


def parse_package_manager(package_manager: str) -> tuple[Agent | None, str]:
    """Read a ``packageManager`` field into an agent and the version to install.

    The agent is None when the manager is not a known one. Raises
    ValueError when the field has no version or a non-numeric major version.
    """
    spec = package_manager[1:] if package_manager.startswith("^") else package_manager
    name, sep, rest = spec.partition("@")
    if not sep:
        raise ValueError(f"packageManager {package_manager!r} has no version")
    version = rest.split("@")[0]
    major_text = version.split(".")[0]
    if not _MAJOR.fullmatch(major_text):
        raise ValueError(f"packageManager {package_manager!r} has an invalid version")
    major = int(major_text)

    if name == "yarn" and major > 1:
        return Agent.YARN_BERRY, "berry"
    if name == "pnpm" and major < 7:
        return Agent.PNPM6, version
    return AGENT_MAP.get(name), version


def _read_package(path: Path) -> Package | None:
    if not path.is_file():
        return None
    try:
        contents = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return None
    return Package.from_dict(json.loads(contents))


def _ensure_installed(agent: Agent, version: str | None, auto_install: bool) -> None:
    name = agent.value.split("@")[0]
    if which_cmd(name):
        return
    if not auto_install:
        print(yellow(f"[ni] Detected {agent.value} but it doesn't seem to be installed."))
        if "CI" in os.environ:
            sys.exit(1)
        try:
            accepted = confirm(f"Would you like to globally install {agent.value}?", default=False)
        except PromptCancelled:
            sys.exit(1)
        if not accepted:
            sys.exit(1)
    target = f"{name}@{version}" if version is not None else agent.value
    execa_command("npm", ["i", "-g", target])


def detect(options: DetectOptions | None = None) -> Agent | None:
    """Detect the project's agent from its lock file and package.json.

    Unless ``options.programmatic`` is set, a detected agent that is not
    installed is installed globally with npm, after asking the user when
    ``options.auto_install`` is not set.
    """
    options = options if options is not None else DetectOptions()

    lock_path = next(
        (found for found in (find_up(lock, options.cwd) for lock in LOCKS_MAP) if found),
        None,
    )
    if lock_path is not None:
        package_json: Path | None = lock_path.parent / "package.json"
    else:
        package_json = find_up("package.json", options.cwd)

    agent: Agent | None = None
    version: str | None = None

    if package_json is not None:
        package = _read_package(package_json)
        if package is not None and package.package_manager is not None:
            agent, version = parse_package_manager(package.package_manager)
            if agent is None and not options.programmatic:
                print(f"[ni] Unknown packageManager: {package.package_manager}")

    if agent is None and lock_path is not None:
        agent = LOCKS_MAP.get(lock_path.name)

    if agent is not None and not options.programmatic:
        _ensure_installed(agent, version, options.auto_install)

    return agent