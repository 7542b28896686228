"""Package managers and the command templates each one understands."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Agent(Enum):
    """A package manager, keyed by the name used in configuration files."""

    NPM = "npm"
    YARN = "yarn"
    YARN_BERRY = "yarn@berry"
    PNPM = "pnpm"
    PNPM6 = "pnpm@6"
    BUN = "bun"

    def __str__(self) -> str:
        return self.value


class AgentCommand(Enum):
    """The kinds of command a package manager can be asked to perform."""

    AGENT = "agent"
    RUN = "run"
    INSTALL = "install"
    FROZEN = "frozen"
    GLOBAL = "global_"
    ADD = "add"
    UPGRADE = "upgrade"
    UPGRADE_INTERACTIVE = "upgrade_interactive"
    EXECUTE = "execute"
    UNINSTALL = "uninstall"
    GLOBAL_UNINSTALL = "global_uninstall"


@dataclass(frozen=True)
class AgentCommands:
    """Command templates of one package manager.

    ``{0}`` is replaced by all arguments; ``{1}`` by the first argument
    followed by ``--`` and the rest. An empty template means the command
    is not supported.
    """

    agent: str
    run: str
    install: str
    frozen: str
    global_: str
    add: str
    upgrade: str
    upgrade_interactive: str
    execute: str
    uninstall: str
    global_uninstall: str

    def template(self, command: AgentCommand) -> str:
        """Return the template for ``command``."""
        return getattr(self, command.value)


_NPM = AgentCommands(
    agent="npm {0}",
    run="npm run {1}",
    install="npm i {0}",
    frozen="npm ci",
    global_="npm i -g {0}",
    add="npm i {0}",
    upgrade="npm update {0}",
    upgrade_interactive="",
    execute="npx {0}",
    uninstall="npm uninstall {0}",
    global_uninstall="npm uninstall -g {0}",
)

_YARN = AgentCommands(
    agent="yarn {0}",
    run="yarn run {0}",
    install="yarn install {0}",
    frozen="yarn install --frozen-lockfile",
    global_="yarn global add {0}",
    add="yarn add {0}",
    upgrade="yarn upgrade {0}",
    upgrade_interactive="yarn upgrade-interactive {0}",
    execute="npx {0}",
    uninstall="yarn remove {0}",
    global_uninstall="yarn global remove {0}",
)

_YARN_BERRY = AgentCommands(
    agent="yarn {0}",
    run="yarn run {0}",
    install="yarn install {0}",
    frozen="yarn install --immutable",
    global_="npm i -g {0}",
    add="yarn add {0}",
    upgrade="yarn up {0}",
    upgrade_interactive="yarn up -i {0}",
    execute="yarn dlx {0}",
    uninstall="yarn remove {0}",
    global_uninstall="npm uninstall -g {0}",
)

_PNPM = AgentCommands(
    agent="pnpm {0}",
    run="pnpm run {0}",
    install="pnpm i {0}",
    frozen="pnpm i --frozen-lockfile",
    global_="pnpm add -g {0}",
    add="pnpm add {0}",
    upgrade="pnpm update {0}",
    upgrade_interactive="pnpm update -i {0}",
    execute="pnpm dlx {0}",
    uninstall="pnpm remove {0}",
    global_uninstall="pnpm remove --global {0}",
)

_PNPM6 = AgentCommands(
    agent="pnpm {0}",
    run="pnpm run {1}",
    install="pnpm i {0}",
    frozen="pnpm i --frozen-lockfile",
    global_="pnpm add -g {0}",
    add="pnpm add {0}",
    upgrade="pnpm update {0}",
    upgrade_interactive="pnpm update -i {0}",
    execute="pnpm dlx {0}",
    uninstall="pnpm remove {0}",
    global_uninstall="pnpm remove --global {0}",
)

_BUN = AgentCommands(
    agent="bun {0}",
    run="bun run {0}",
    install="bun install {0}",
    frozen="bun install --no-save",
    global_="bun add -g {0}",
    add="bun add {0}",
    upgrade="bun update {0}",
    upgrade_interactive="bun update {0}",
    execute="bunx {0}",
    uninstall="bun remove {0}",
    global_uninstall="bun remove -g {0}",
)

_COMMANDS = {
    Agent.NPM: _NPM,
    Agent.YARN: _YARN,
    Agent.YARN_BERRY: _YARN_BERRY,
    Agent.PNPM: _PNPM,
    Agent.PNPM6: _PNPM6,
    Agent.BUN: _BUN,
}


def commands_for(agent: Agent) -> AgentCommands:
    """Return the command templates of ``agent``."""
    return _COMMANDS[agent]