"""Lookup of executables through the PATH variable."""

from __future__ import annotations

import os
from collections.abc import Iterable

from minishell.strutil import split


def _is_executable(path: str) -> bool:
    return os.access(path, os.F_OK) and os.access(path, os.X_OK)


def search_paths(env: Iterable[str]) -> list[str] | None:
    """Directories of the first ``PATH=`` entry in ``env``, or None if absent."""
    for entry in env:
        if entry.startswith("PATH="):
            return split(entry[len("PATH="):], ":")
    return None


def find_executable(name: str, env: Iterable[str]) -> str | None:
    """Resolve ``name`` to an executable path.

    ``name`` itself is used if it is executable as given; otherwise each PATH
    directory is tried in order. Returns None when nothing is found.
    """
    if _is_executable(name):
        return name
    directories = search_paths(env)
    if directories is None:
        return None
    for directory in directories:
        candidate = f"{directory}/{name}"
        if _is_executable(candidate):
            return candidate
    return None