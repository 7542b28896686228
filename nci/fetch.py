"""Search the npm registry for packages."""

from __future__ import annotations

import json
import shutil
import urllib.parse
import urllib.request
from dataclasses import dataclass
from typing import Any

from nci.style import blue

REGISTRY_SEARCH_URL = "https://registry.npmjs.com/-/v1/search?text={}&size=35"
_NAME_WIDTH = 30


def _required_str(data: dict, key: str) -> str:
    value = data.get(key)
    if not isinstance(value, str):
        raise ValueError(f"{key!r} must be a string")
    return value


def _optional_str(data: dict, key: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{key!r} must be a string")
    return value


@dataclass
class NpmPackage:
    """A package as described by a registry search result."""

    name: str
    version: str
    date: str
    npm: str
    description: str | None = None
    keywords: list[str] | None = None
    homepage: str | None = None
    repository: str | None = None

    @classmethod
    def from_dict(cls, data: Any) -> "NpmPackage":
        """Build from a search result's ``package`` object; raise ValueError if malformed."""
        if not isinstance(data, dict):
            raise ValueError("package must be an object")
        links = data.get("links")
        if not isinstance(links, dict):
            raise ValueError("'links' must be an object")
        keywords = data.get("keywords")
        if keywords is not None and not (
            isinstance(keywords, list) and all(isinstance(k, str) for k in keywords)
        ):
            raise ValueError("'keywords' must be a list of strings")
        return cls(
            name=_required_str(data, "name"),
            version=_required_str(data, "version"),
            date=_required_str(data, "date"),
            npm=_required_str(links, "npm"),
            description=_optional_str(data, "description"),
            keywords=list(keywords) if keywords is not None else None,
            homepage=_optional_str(links, "homepage"),
            repository=_optional_str(links, "repository"),
        )

    @property
    def url(self) -> str:
        """The repository link, else the homepage, else the npm page."""
        return self.repository or self.homepage or self.npm


@dataclass
class Choice:
    """A package offered to the user, with the line shown for it."""

    title: str
    value: NpmPackage

    def __str__(self) -> str:
        return self.title


def format_package_with_url(name_version: str, url: str, terminal_columns: int) -> str:
    """Lay out a package line so that ``url`` ends at the terminal's edge."""
    width = max(terminal_columns - len(url), 0)
    return f"{name_version:<{width}} {url}"


def build_choices(response: Any, terminal_columns: int) -> list[Choice]:
    """Turn a registry search response into choices for the user."""
    if not isinstance(response, dict) or not isinstance(response.get("objects"), list):
        raise ValueError("search response must hold a list of objects")
    choices = []
    for obj in response["objects"]:
        if not isinstance(obj, dict):
            raise ValueError("search result must be an object")
        package = NpmPackage.from_dict(obj.get("package"))
        name_version = f"{package.name:<{_NAME_WIDTH}} v{blue(package.version)}"
        title = format_package_with_url(name_version, package.url, terminal_columns)
        choices.append(Choice(title=title, value=package))
    return choices


def fetch_npm_packages(pattern: str) -> list[Choice]:
    """Search the registry for ``pattern``.

    Raises OSError when the registry cannot be reached and ValueError when
    its answer cannot be read.
    """
    url = REGISTRY_SEARCH_URL.format(urllib.parse.quote(pattern, safe=""))
    columns = shutil.get_terminal_size((80, 0)).columns
    with urllib.request.urlopen(url, timeout=30) as response:
        payload = json.load(response)
    return build_choices(payload, columns)