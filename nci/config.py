"""User configuration read from the ``.nirc`` file."""

from __future__ import annotations

import configparser
import dataclasses
import os
from dataclasses import dataclass
from pathlib import Path

from nci.agents import Agent
from nci.context import DetectOptions
from nci.detect import AGENT_MAP, detect

_ROOT_SECTION = "\x00root"


@dataclass
class Config:
    """Configured agents; a ``default_agent`` of None means ask the user."""

    default_agent: Agent | None = None
    global_agent: Agent = Agent.NPM

    def assign(self) -> "Config":
        """Return a copy updated with the values found in the rc file."""
        config = dataclasses.replace(self)
        path = config_path()
        if not path.exists():
            return config
        values = _read_rc(path)
        default_agent = AGENT_MAP.get(values.get("default_agent", ""))
        if default_agent is not None:
            config.default_agent = default_agent
        global_agent = AGENT_MAP.get(values.get("global_agent", ""))
        if global_agent is not None:
            config.global_agent = global_agent
        return config


def _unquote(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in "\"'":
        return value[1:-1]
    return value


def _read_rc(path: Path) -> dict[str, str]:
    parser = configparser.ConfigParser(
        interpolation=None, strict=False, default_section="\x00defaults"
    )
    parser.optionxform = str  # type: ignore[assignment,method-assign]
    parser.read_string(f"[{_ROOT_SECTION}]\n" + path.read_text(encoding="utf-8"))
    return {key: _unquote(value) for key, value in parser[_ROOT_SECTION].items()}


def config_path() -> Path:
    """Return the rc file: ``$NI_CONFIG_FILE`` or ``~/.nirc``."""
    custom = os.environ.get("NI_CONFIG_FILE")
    if custom is not None:
        return Path(custom)
    try:
        home = Path.home()
    except RuntimeError:
        home = Path("~")
    return home / ".nirc"


def get_config() -> Config:
    """Read the rc file, preferring the agent detected in the current project."""
    config = Config().assign()
    agent = detect(DetectOptions(programmatic=True))
    if agent is not None:
        config.default_agent = agent
    return config


def get_default_agent(programmatic: bool) -> Agent | None:
    """Return the agent to use, or None when the user should be asked.

    Falls back to npm instead of asking when running programmatically or in CI.
    """
    default_agent = get_config().default_agent
    if default_agent is None and (programmatic or "CI" in os.environ):
        return Agent.NPM
    return default_agent


def get_global_agent() -> Agent:
    """Return the agent used for global installs."""
    return get_config().global_agent