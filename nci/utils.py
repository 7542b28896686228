"""Helpers shared by the commands: package.json reading and process spawning."""

from __future__ import annotations

import json
import shutil
import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Sequence, TypeVar

T = TypeVar("T")


def _optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{key!r} must be a string")
    return value


def _optional_str_map(data: dict, key: str) -> dict[str, str] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, dict) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in value.items()
    ):
        raise ValueError(f"{key!r} must map strings to strings")
    return dict(value)


@dataclass
class Package:
    """The fields of a package.json that the commands care about."""

    name: str | None = None
    type: str | None = None
    version: str | None = None
    package_manager: str | None = None
    scripts: dict[str, str] | None = None
    scripts_info: dict[str, str] | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "Package":
        """Build from parsed package.json; raise ValueError on a malformed document."""
        if not isinstance(data, dict):
            raise ValueError("package.json must hold an object")
        return cls(
            name=_optional_str(data, "name"),
            type=_optional_str(data, "type"),
            version=_optional_str(data, "version"),
            package_manager=_optional_str(data, "packageManager"),
            scripts=_optional_str_map(data, "scripts"),
            scripts_info=_optional_str_map(data, "scripts-info"),
        )


def exclude(items: Iterable[T], values: Sequence[T]) -> list[T]:
    """Return ``items`` without any element found in ``values``."""
    return [item for item in items if item not in values]


def which_cmd(cmd: str) -> bool:
    """Tell whether ``cmd`` can be found on the PATH."""
    return shutil.which(cmd) is not None


def get_volta_prefix() -> tuple[str, list[str]] | None:
    """Return the volta command prefix when volta is installed, else None."""
    if which_cmd("volta"):
        return "volta", ["run"]
    return None


def get_package_json(path: str | Path) -> Package:
    """Read a package.json, falling back to an empty Package on any failure."""
    try:
        contents = Path(path).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError):
        return Package()
    try:
        return Package.from_dict(json.loads(contents))
    except ValueError:
        return Package()


def execa_command(agent: str, args: Sequence[str] | None = None) -> int:
    """Run ``agent`` with ``args`` in the foreground and return its exit code."""
    completed = subprocess.run([agent, *(args or [])])
    return completed.returncode