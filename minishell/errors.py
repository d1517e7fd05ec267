"""Error messages printed by the shell and its builtins."""

from __future__ import annotations

import sys
from enum import IntEnum


class CommandErrorKind(IntEnum):
    """Errors about a command as a whole."""

    NOT_FOUND = 0
    TOO_MANY_ARGUMENTS = 1


class ArgsErrorKind(IntEnum):
    """Errors about an argument handed to a builtin."""

    NO_SUCH_FILE = 0
    NOT_ENOUGH_ARGUMENTS = 1
    FILE_NOT_FOUND = 2
    INVALID_IDENTIFIER = 3
    NUMERIC_REQUIRED = 4


class CheckerErrorKind(IntEnum):
    """Syntax errors found before a line is run."""

    OPEN_QUOTE = 0
    PARSE_ERROR = 1
    MISSING_COMMAND = 2
    NO_SUCH_FILE = 3


_COMMAND_MESSAGES = {
    CommandErrorKind.NOT_FOUND: "minishell: command not found: '{name}'",
    CommandErrorKind.TOO_MANY_ARGUMENTS: "{name}: too many arguments",
}

_ARGS_MESSAGES = {
    ArgsErrorKind.NO_SUCH_FILE: "{command}: no such file or directory: '{arg}'",
    ArgsErrorKind.NOT_ENOUGH_ARGUMENTS: "{command}: not enough arguments",
    ArgsErrorKind.FILE_NOT_FOUND: "{command}: {arg}: no such file or directory",
    ArgsErrorKind.INVALID_IDENTIFIER: "{command}: {arg}: not a valid identifier",
    ArgsErrorKind.NUMERIC_REQUIRED: "{command}: {arg}: numeric argument required",
}

_CHECKER_MESSAGES = {
    CheckerErrorKind.OPEN_QUOTE: "ERROR: There is an open quote.",
    CheckerErrorKind.PARSE_ERROR: "minishell: parse error near '\\n'",
    CheckerErrorKind.MISSING_COMMAND: "ERROR: There is a command missing after pipe.",
    CheckerErrorKind.NO_SUCH_FILE: "minishell: no such file or directory",
}


def _emit(message: str) -> str:
    sys.stdout.write(message + "\n")
    sys.stdout.flush()
    return message


def command_error(name: str, kind: CommandErrorKind | int) -> str:
    """Print an error about command ``name`` and return the message."""
    template = _COMMAND_MESSAGES[CommandErrorKind(kind)]
    return _emit(template.format(name=name))


def args_error(command: str, arg: str | None, kind: ArgsErrorKind | int) -> str:
    """Print an error about argument ``arg`` of ``command`` and return it."""
    template = _ARGS_MESSAGES[ArgsErrorKind(kind)]
    return _emit(template.format(command=command, arg=arg))


def checker_error(kind: CheckerErrorKind | int) -> str:
    """Print a syntax error message and return it."""
    return _emit(_CHECKER_MESSAGES[CheckerErrorKind(kind)])