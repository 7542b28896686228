"""Turn user arguments into the concrete command line for a package manager."""

from __future__ import annotations

from typing import Sequence

from nci.agents import Agent, AgentCommand, commands_for
from nci.context import RunnerContext
from nci.utils import exclude

GLOBAL = "-g"
FROZEN = "--frozen"
IF_PRESENT = "--if-present"
FROZEN_IF_PRESENT = "--frozen-if-present"

CommandTuple = tuple[str, list[str]]


class UnsupportedCommand(Exception):
    """Raised when a package manager has no equivalent for a command."""

    def __init__(self, agent: Agent, command: AgentCommand) -> None:
        super().__init__(f"{agent.value} does not support the {command.name.lower()} command")
        self.agent = agent
        self.command = command


def get_command(agent: Agent, command: AgentCommand, args: Sequence[str]) -> CommandTuple:
    """Fill the agent's template for ``command`` and split it into program and arguments."""
    template = commands_for(agent).template(command)
    if not template:
        raise UnsupportedCommand(agent, command)

    if "{0}" in template:
        line = template.replace("{0}", " ".join(args))
    elif "{1}" in template:
        if not args:
            raise ValueError("a script name is required")
        first, *rest = args
        line = template.replace("{1}", f"{first} -- {' '.join(rest)}" if rest else first)
    else:
        line = template

    program, *arguments = line.split()
    return program, arguments


def parse_ni(
    agent: Agent, args: Sequence[str], ctx: RunnerContext | None = None
) -> CommandTuple:
    """Build an install, add, frozen or global install command."""
    args = list(args)
    if agent is Agent.BUN:
        args = ["-d" if arg == "-D" else arg for arg in args]

    if GLOBAL in args:
        return get_command(agent, AgentCommand.GLOBAL, exclude(args, [GLOBAL]))
    if FROZEN_IF_PRESENT in args:
        remaining = exclude(args, [FROZEN_IF_PRESENT])
        if ctx is not None and ctx.has_lock:
            return get_command(agent, AgentCommand.FROZEN, remaining)
        return get_command(agent, AgentCommand.INSTALL, remaining)
    if FROZEN in args:
        return get_command(agent, AgentCommand.FROZEN, exclude(args, [FROZEN]))
    if all(arg.startswith("-") for arg in args):
        return get_command(agent, AgentCommand.INSTALL, args)
    return get_command(agent, AgentCommand.ADD, args)


def parse_nr(agent: Agent, args: Sequence[str]) -> CommandTuple:
    """Build a script run command; runs ``start`` when no script is given."""
    args = list(args) or ["start"]
    if IF_PRESENT in args:
        args[0] = f"{IF_PRESENT} {args[0]}"
        return get_command(agent, AgentCommand.RUN, exclude(args, [IF_PRESENT]))
    return get_command(agent, AgentCommand.RUN, args)


def parse_nun(
    agent: Agent, args: Sequence[str], ctx: RunnerContext | None = None
) -> CommandTuple:
    """Build an uninstall command, global when ``-g`` is given."""
    if GLOBAL in args:
        return get_command(agent, AgentCommand.GLOBAL_UNINSTALL, exclude(args, [GLOBAL]))
    return get_command(agent, AgentCommand.UNINSTALL, args)


def parse_nlx(
    agent: Agent, args: Sequence[str], ctx: RunnerContext | None = None
) -> CommandTuple:
    """Build a package execute command."""
    return get_command(agent, AgentCommand.EXECUTE, args)


def parse_nu(
    agent: Agent, args: Sequence[str], ctx: RunnerContext | None = None
) -> CommandTuple:
    """Build an upgrade command, interactive when ``-i`` is given."""
    if "-i" in args:
        return get_command(agent, AgentCommand.UPGRADE_INTERACTIVE, exclude(args, ["-i"]))
    return get_command(agent, AgentCommand.UPGRADE, args)


def parse_na(
    agent: Agent, args: Sequence[str], ctx: RunnerContext | None = None
) -> CommandTuple:
    """Pass the arguments straight to the package manager."""
    return get_command(agent, AgentCommand.AGENT, args)