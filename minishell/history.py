"""Persistent command history shared with the line editor."""

from __future__ import annotations

import sys
from collections import deque
from collections.abc import Iterator
from pathlib import Path

try:
    import readline as _readline
except ImportError:  # pragma: no cover - platforms without readline
    _readline = None

MAX_HISTORY = 500
DEFAULT_PATH = Path("/tmp/history.txt")


class History:
    """The most recent command lines, kept in memory and in a file.

    At most ``limit`` lines are kept; inserting beyond that drops the oldest.
    """

    def __init__(self, path: str | Path = DEFAULT_PATH, limit: int = MAX_HISTORY) -> None:
        if limit <= 0:
            raise ValueError("history limit must be positive")
        self.path = Path(path)
        self.limit = limit
        self._lines: deque[str] = deque(maxlen=limit)

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    @property
    def entries(self) -> list[str]:
        """The stored lines, oldest first."""
        return list(self._lines)

    def load(self) -> None:
        """Replace the stored lines with the first ``limit`` lines of the file.

        A missing or unreadable file leaves the history empty.
        """
        self._lines.clear()
        try:
            with self.path.open(encoding="utf-8", errors="replace") as handle:
                for line in handle:
                    if len(self._lines) >= self.limit:
                        break
                    line = line.removesuffix("\n")
                    if _readline is not None:
                        _readline.add_history(line)
                    self._lines.append(line)
        except OSError:
            return

    def insert(self, line: str) -> None:
        """Record ``line`` in memory and in the line editor's history."""
        if _readline is not None:
            _readline.add_history(line)
        self._lines.append(line)

    def save(self) -> None:
        """Write the stored lines to the file, one per line, oldest first.

        A failure to write is reported on standard error and otherwise ignored.
        """
        try:
            with self.path.open("w", encoding="utf-8") as handle:
                for line in self._lines:
                    handle.write(line + "\n")
        except OSError as exc:
            sys.stderr.write(f"minishell: {exc.strerror or exc}\n")

    def clear(self) -> None:
        """Forget every stored line, including the line editor's history."""
        if _readline is not None:
            _readline.clear_history()
        self._lines.clear()