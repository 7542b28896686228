"""Entry points of the ni, nr, nci, na, nlx, nu and nun commands."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Sequence

from nci.agents import Agent
from nci.context import DetectOptions, RunnerContext
from nci.fetch import fetch_npm_packages
from nci.parse import (
    FROZEN_IF_PRESENT,
    CommandTuple,
    parse_na,
    parse_ni,
    parse_nlx,
    parse_nr,
    parse_nu,
    parse_nun,
)
from nci.prompts import PromptCancelled, select, text
from nci.runner import run_cli
from nci.storage import dump, load
from nci.style import cyan, dim, red, yellow
from nci.utils import Package, exclude, get_package_json


@dataclass(frozen=True)
class ScriptChoice:
    """A package.json script offered to the user."""

    key: str
    cmd: str
    description: str

    def __str__(self) -> str:
        return f"{cyan(self.key)}    {dim(self.description)}"


def list_scripts(package: Package) -> list[ScriptChoice]:
    """Return the visible scripts of ``package``, described by scripts-info when given."""
    scripts = package.scripts or {}
    info = package.scripts_info or {}
    return [
        ScriptChoice(key=key, cmd=cmd, description=info.get(key, cmd))
        for key, cmd in scripts.items()
        if not key.startswith("?")
    ]


def _pick_package(pattern: str) -> str:
    try:
        choices = fetch_npm_packages(pattern)
    except (OSError, ValueError):
        print("Failed to fetch packages", file=sys.stderr)
        sys.exit(1)
    if not choices:
        print("No results found")
        sys.exit(1)
    try:
        return select("choose a package to install", [choice.value.name for choice in choices])
    except PromptCancelled:
        sys.exit(1)


def ni_runner(
    agent: Agent, args: Sequence[str], ctx: RunnerContext | None = None
) -> CommandTuple:
    """Build an install command; with ``-i`` search the registry and ask what to add."""
    args = list(args)
    if args and args[0] == "-i":
        if len(args) > 1:
            pattern = args[1]
        else:
            try:
                pattern = text("search for package")
            except PromptCancelled:
                sys.exit(1)

        dependency = _pick_package(pattern)
        args = exclude(args, ["-d", "-p", "-i"])

        # yarn and bun cannot install peers from the command line
        modes = ["-prod", "-dev"]
        if agent.value in ("npm", "pnpm"):
            modes.append("--save-peer")
        try:
            mode = select(f"install {yellow(dependency)} as", modes)
        except PromptCancelled:
            sys.exit(1)
        args.extend([dependency, mode])

    return parse_ni(agent, args, ctx)


def nr_runner(
    agent: Agent, args: Sequence[str], ctx: RunnerContext | None = None
) -> CommandTuple:
    """Build a run command, remembering the script; ``-`` reruns the last one."""
    storage = load()
    args = list(args)

    if args and args[0] == "-":
        if storage.last_run_command is None:
            print(red("No last command found"))
            sys.exit(1)
        args[0] = storage.last_run_command

    if not args and ctx is not None and not ctx.programmatic:
        scripts = list_scripts(get_package_json(ctx.cwd / "package.json"))
        try:
            choice = select("script to run:", scripts)
        except (PromptCancelled, ValueError):
            sys.exit(1)
        args.append(choice.key)

    if args and storage.last_run_command != args[0]:
        storage.last_run_command = args[0]
        dump(storage)

    return parse_nr(agent, args)


def nci_runner(
    agent: Agent, args: Sequence[str], ctx: RunnerContext | None = None
) -> CommandTuple:
    """Build a clean install: frozen when the project has a lock file."""
    return parse_ni(agent, [FROZEN_IF_PRESENT], ctx)


def ni_main(argv: Sequence[str] | None = None) -> int:
    """Install dependencies."""
    return run_cli(ni_runner, None, argv)


def nr_main(argv: Sequence[str] | None = None) -> int:
    """Run a script."""
    return run_cli(nr_runner, None, argv)


def nci_main(argv: Sequence[str] | None = None) -> int:
    """Clean install, installing the detected agent without asking."""
    return run_cli(nci_runner, DetectOptions().with_auto_install(True), argv)


def na_main(argv: Sequence[str] | None = None) -> int:
    """Pass arguments to the agent."""
    return run_cli(parse_na, None, argv)


def nlx_main(argv: Sequence[str] | None = None) -> int:
    """Execute a package binary."""
    return run_cli(parse_nlx, None, argv)


def nu_main(argv: Sequence[str] | None = None) -> int:
    """Upgrade dependencies."""
    return run_cli(parse_nu, None, argv)


def nun_main(argv: Sequence[str] | None = None) -> int:
    """Uninstall dependencies."""
    return run_cli(parse_nun, None, argv)