"""Resolve the agent for a project and run the command built for it."""

from __future__ import annotations

import dataclasses
import sys
from typing import Callable, Optional, Sequence

from nci.agents import Agent
from nci.config import get_default_agent, get_global_agent
from nci.context import DetectOptions, RunnerContext
from nci.detect import AGENT_MAP, detect
from nci.parse import GLOBAL, CommandTuple, UnsupportedCommand
from nci.prompts import PromptCancelled, select
from nci.style import blue, dim, green
from nci.utils import execa_command, get_volta_prefix

VERSION = "0.2.1"

Runner = Callable[[Agent, list, Optional[RunnerContext]], CommandTuple]

_HELP_LINES = (
    "ni    -   install",
    "nr    -   run",
    "nlx   -   execute",
    "nu    -   upgrade",
    "nun   -   uninstall",
    "nci   -   clean install",
    "na    -   agent alias",
    "ni -v -   show used agent",
)


def get_cli_command(
    func: Runner, args: Sequence[str], options: DetectOptions | None = None
) -> CommandTuple:
    """Pick the agent for the project and let ``func`` build the command.

    Global commands use the configured global agent. Otherwise the detected
    agent is used, then the configured default, and finally the user is asked.
    """
    options = options if options is not None else DetectOptions()
    args = list(args)
    if GLOBAL in args:
        return func(get_global_agent(), args, None)

    agent = detect(options)
    if agent is None:
        agent = get_default_agent(options.programmatic)
    if agent is None:
        names = [name for name in AGENT_MAP if "@" not in name]
        try:
            choice = select("script to run:", names)
        except PromptCancelled:
            sys.exit(1)
        agent = AGENT_MAP[choice]

    ctx = RunnerContext(programmatic=options.programmatic, has_lock=True, cwd=options.cwd)
    return func(agent, args, ctx)


def _print_help() -> None:
    print(f"nci use the right package manager v{VERSION}\n")
    for line in _HELP_LINES:
        print(line)


def run(func: Runner, args: Sequence[str], options: DetectOptions | None = None) -> int:
    """Handle the common flags, build the command and run it; return its exit code."""
    options = options if options is not None else DetectOptions()
    args = list(args)

    if len(args) > 2 and args[0] == "-C":
        options = dataclasses.replace(options, cwd=options.cwd / args[1])
        args = args[2:]

    if len(args) == 1 and (args[0].lower() == "-v" or args[0] == "--version"):
        print(f"nci   {blue(f'v{VERSION}')}")
        return 0
    if len(args) == 1 and args[0] in ("-h", "--help"):
        _print_help()
        return 0

    try:
        program, arguments = get_cli_command(func, args, options)
    except UnsupportedCommand as exc:
        print(f"[ni] {exc}", file=sys.stderr)
        return 1

    volta = get_volta_prefix()
    if volta is not None:
        prefix, prefix_args = volta
        arguments = [*prefix_args, program, *arguments]
        program = prefix

    print(f"{dim('Running:')} {green(' '.join([program, *arguments]))}")
    try:
        return execa_command(program, arguments)
    except OSError as exc:
        print(f"Failed to execute command: {exc}", file=sys.stderr)
        return 1


def run_cli(
    func: Runner,
    options: DetectOptions | None = None,
    argv: Sequence[str] | None = None,
) -> int:
    """Run ``func`` on the command line arguments, dropping empty ones."""
    raw = sys.argv[1:] if argv is None else list(argv)
    args = [arg for arg in raw if arg]
    return run(func, args, options if options is not None else DetectOptions())