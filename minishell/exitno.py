"""Decoding of wait statuses into the shell's ``$?`` value."""

from __future__ import annotations

from minishell.parser import Command

_PARENT_BUILTINS = ("cd", "exit", "export", "unset")


def wifexited(status: int) -> bool:
    """True if the status reports a normal exit."""
    return (status & 0x7F) == 0


def wexitstatus(status: int) -> int:
    """The exit code carried by the status."""
    return (status & 0xFF00) >> 8


def wifsignaled(status: int) -> bool:
    """True if the status reports termination by a signal."""
    return (status & 0x7F) != 0 and (status & 0x7F) != 0x7F


def wtermsig(status: int) -> int:
    """The number of the signal that ended the process."""
    return status & 0x7F


def get_exitno(status: int, count: int, command: Command, exitno: int) -> int:
    """Exit number of a pipeline whose last command is ``command``.

    When that command is a builtin run by the shell itself (``cd``, ``exit``,
    ``export``, ``unset``), ``exitno`` is kept. Otherwise the wait status of
    the last process decides; with no process waited for (``count`` 0) the
    result is 0.
    """
    if command.args and command.args[0].startswith(_PARENT_BUILTINS):
        return exitno
    if count > 0 and wifexited(status):
        return wexitstatus(status)
    if count > 0 and wifsignaled(status):
        return 128 + wtermsig(status)
    return 0