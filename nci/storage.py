"""Persistent state shared between runs, such as the last script run."""

from __future__ import annotations

import json
import tempfile
from dataclasses import asdict, dataclass
from pathlib import Path


@dataclass
class Storage:
    """State remembered between runs."""

    last_run_command: str | None = None


def storage_path() -> Path:
    """Return the file the state is kept in."""
    return Path(tempfile.gettempdir()) / "nci" / "_storage.json"


def load(path: str | Path | None = None) -> Storage:
    """Read the stored state; an absent file gives empty state.

    Raises ValueError when the file does not hold valid state.
    """
    target = Path(path) if path is not None else storage_path()
    if not target.is_file():
        return Storage()
    data = json.loads(target.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("storage must hold an object")
    last = data.get("last_run_command")
    if last is not None and not isinstance(last, str):
        raise ValueError("'last_run_command' must be a string")
    return Storage(last_run_command=last)


def dump(storage: Storage, path: str | Path | None = None) -> None:
    """Write ``storage``, creating its directory when needed."""
    target = Path(path) if path is not None else storage_path()
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(json.dumps(asdict(storage), separators=(",", ":")), encoding="utf-8")