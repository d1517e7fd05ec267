"""Commands the shell runs itself instead of starting a program."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterable, Mapping

from minishell.errors import ArgsErrorKind, CommandErrorKind, args_error, command_error
from minishell.parser import Command
from minishell.strutil import atoi

BUILTIN_NAMES = ("echo", "cd", "pwd", "export", "unset", "env", "exit")


def _arg(command: Command, index: int) -> str | None:
    return command.args[index] if len(command.args) > index else None


def _write(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def _is_n_flag(word: str) -> bool:
    return word.startswith("-") and set(word[1:]) <= {"n"}


def echo(command: Command) -> int:
    """Print the arguments separated by spaces.

    Leading ``-n`` style flags suppress the final newline. No space is put
    before an argument that starts with ``>``.
    """
    words = command.args[1:]
    newline = True
    while words and _is_n_flag(words[0]):
        newline = False
        words = words[1:]
    parts: list[str] = []
    for word, following in zip(words, [*words[1:], None]):
        parts.append(word)
        if following is not None and not following.startswith(">"):
            parts.append(" ")
    if newline:
        parts.append("\n")
    _write("".join(parts))
    return 0


def cd(command: Command) -> int:
    """Change the working directory, to ``$HOME`` when no argument is given."""
    target = _arg(command, 1)
    extra = _arg(command, 2)
    if target is not None and extra is not None:
        args_error("cd", extra, ArgsErrorKind.NO_SUCH_FILE)
        return 1
    path = target if target is not None else os.environ.get("HOME")
    if path is None:
        return 0
    try:
        os.chdir(path)
    except OSError:
        args_error("cd", path, ArgsErrorKind.NO_SUCH_FILE)
        return 1
    return 0


def pwd(command: Command) -> int:
    """Print the working directory."""
    try:
        cwd = os.getcwd()
    except OSError:
        return 1
    _write(cwd + "\n")
    return 0


def set_environ(environ: list[str], entry: str) -> None:
    """Replace the variable named by ``entry`` in ``environ`` or append it."""
    prefix = entry.partition("=")[0] + "="
    for index, existing in enumerate(environ):
        if existing.startswith(prefix):
            environ[index] = entry
            return
    environ.append(entry)


def get_env(envp: Mapping[str, str] | Iterable[str]) -> list[str]:
    """A fresh ``NAME=value`` list from a mapping or an iterable of entries."""
    if isinstance(envp, Mapping):
        return [f"{name}={value}" for name, value in envp.items()]
    return list(envp)


def _print_env(command: Command | None, environ: list[str]) -> int:
    extra = _arg(command, 1) if command is not None else None
    if extra is not None or not environ:
        args_error("env", extra, ArgsErrorKind.FILE_NOT_FOUND)
        return 1
    _write("".join(entry + "\n" for entry in environ))
    return 0


def export(command: Command, env: list[str]) -> int:
    """Set ``NAME=value`` arguments in ``env``; print it when given none.

    Arguments without ``=`` are ignored; one starting with ``=`` is reported
    and stops the processing of the rest.
    """
    if len(command.args) < 2:
        return _print_env(None, env)
    for arg in command.args[1:]:
        if arg.startswith("="):
            args_error("export", arg, ArgsErrorKind.INVALID_IDENTIFIER)
            break
        if "=" in arg:
            set_environ(env, arg)
    return 0


def unset(command: Command, env: list[str]) -> int:
    """Remove each named variable from ``env``."""
    for name in command.args[1:]:
        prefix = name + "="
        found = next((i for i, entry in enumerate(env) if entry.startswith(prefix)), None)
        if found is not None:
            del env[found]
    return 0


def env(command: Command | None, environ: list[str]) -> int:
    """Print every entry of ``environ``; any argument is an error."""
    return _print_env(command, environ)


def exit_builtin(command: Command) -> int:
    """Leave the shell by raising :class:`SystemExit`.

    The status is the numeric argument modulo 256, 0 without one and 2 for a
    non-numeric one. With too many arguments nothing happens and 1 is returned.
    """
    _write("exit\n")
    arg = _arg(command, 1)
    if arg is None:
        raise SystemExit(0)
    if _arg(command, 2) is not None:
        command_error(command.args[0], CommandErrorKind.TOO_MANY_ARGUMENTS)
        return 1
    if not all(ch in "0123456789" for ch in arg):
        args_error("exit", arg, ArgsErrorKind.NUMERIC_REQUIRED)
        raise SystemExit(2)
    raise SystemExit(atoi(arg) % 256)


_HANDLERS: dict[str, Callable[[Command, list[str]], int]] = {
    "echo": lambda command, environ: echo(command),
    "cd": lambda command, environ: cd(command),
    "pwd": lambda command, environ: pwd(command),
    "export": export,
    "unset": unset,
    "env": env,
    "exit": lambda command, environ: exit_builtin(command),
}


def check_builtins(command: Command | None, env: list[str]) -> int:
    """Run the builtin named by the command's first argument.

    An unknown name is reported as not found and gives 127.
    """
    if command is None:
        return 127
    name = command.args[0] if command.args else ""
    handler = _HANDLERS.get(name)
    if handler is None:
        command_error(name, CommandErrorKind.NOT_FOUND)
        return 127
    return handler(command, env)