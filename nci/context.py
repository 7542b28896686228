"""Options controlling detection and the context handed to command parsers."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class DetectOptions:
    """Where to look for a project and how to behave when detecting its agent."""

    cwd: Path = field(default_factory=Path.cwd)
    auto_install: bool = False
    programmatic: bool = False

    def with_auto_install(self, auto_install: bool) -> "DetectOptions":
        """Return a copy with ``auto_install`` set."""
        return dataclasses.replace(self, auto_install=auto_install)


@dataclass
class RunnerContext:
    """Information about the project a command is being built for."""

    programmatic: bool
    has_lock: bool
    cwd: Path