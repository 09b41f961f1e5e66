"""Parsing of command strings and lookup of executables along PATH."""

from __future__ import annotations

import os
from collections.abc import Mapping, Sequence

from pypipex.errors import CommandNotFoundError


def split_words(text: str, separator: str) -> list[str]:
    """Split *text* on *separator*, dropping empty pieces."""
    return [word for word in text.split(separator) if word]


def get_paths(env: Mapping[str, str]) -> list[str] | None:
    """Return the directories listed in the PATH entry of *env*, or None."""
    value = env.get("PATH")
    if value is None:
        return None
    return split_words(value, ":")


def parse_command(cmd: str | None) -> list[str] | None:
    """Turn a command string into an argument vector split on spaces."""
    if cmd is None:
        return None
    return split_words(cmd, " ")


def find_command_path(paths: Sequence[str] | None, name: str | None) -> str | None:
    """Return the first ``dir/name`` that is executable, or None."""
    if not paths or not name:
        return None
    for directory in paths:
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def resolve_command(paths: Sequence[str] | None, argv: Sequence[str] | None) -> str:
    """Return the executable path for *argv*, searching *paths* when needed.

    A program name containing a slash is used as given.
    """
    if not argv or not argv[0]:
        raise CommandNotFoundError("Command not found")
    name = argv[0]
    if "/" in name:
        return name
    found = find_command_path(paths, name)
    if found is None:
        raise CommandNotFoundError("Command not found")
    return found