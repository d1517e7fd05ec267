"""Running a pipeline of parsed commands in child processes."""

from __future__ import annotations

import os
import sys
import tempfile
from collections.abc import Iterable, Sequence
from typing import NoReturn

from minishell.builtins import BUILTIN_NAMES, check_builtins
from minishell.exitno import get_exitno
from minishell.parser import Command
from minishell.path import find_executable
from minishell.signals import setup_exec_signals, setup_heredoc_signals
from minishell.var_translator import translate_vars

HEREDOC_PROMPT = "(heredoc)> "
PARENT_BUILTINS = ("cd", "exit", "export", "unset")
_FILE_MODE = 0o644

Pipe = tuple[int, int]


def _report(exc: OSError) -> None:
    sys.stderr.write(f"minishell: {exc.strerror or exc}\n")
    sys.stderr.flush()


def is_builtin(command: Command | None) -> bool:
    """True if the first argument is a prefix of a builtin's name."""
    if command is None or not command.args:
        return False
    name = command.args[0]
    return any(builtin.startswith(name) for builtin in BUILTIN_NAMES)


def runs_in_parent(command: Command | None) -> bool:
    """True for commands the shell itself runs: ``cd``, ``exit``, ``export``, ``unset``."""
    return bool(command and command.args and command.args[0].startswith(PARENT_BUILTINS))


def open_output(spec: str) -> int:
    """Open the target of ``>file`` (truncate) or ``>>file`` (append).

    Returns a file descriptor; raises :class:`OSError` on failure.
    """
    if spec.startswith(">>"):
        return os.open(spec[2:], os.O_CREAT | os.O_APPEND | os.O_WRONLY, _FILE_MODE)
    return os.open(spec[1:], os.O_CREAT | os.O_TRUNC | os.O_WRONLY, _FILE_MODE)


def read_heredoc(delimiter: str, env: Iterable[str], exitno: int) -> str:
    """Read lines up to ``delimiter``, expanding variables in each one.

    End of input before the delimiter prints a warning and ends the text.
    """
    env = list(env)
    lines: list[str] = []
    setup_heredoc_signals()
    try:
        while True:
            try:
                line = input(HEREDOC_PROMPT)
            except EOFError:
                print(f"minishell: warning: expected {delimiter}")
                break
            if line == delimiter:
                break
            lines.append(translate_vars(line, env, exitno) + "\n")
    finally:
        setup_exec_signals()
    return "".join(lines)


def open_input(spec: str, env: Iterable[str], exitno: int) -> int:
    """Open the source of ``<file`` or read the here-document of ``<<END``.

    Returns a file descriptor positioned at the start; raises
    :class:`OSError` on failure.
    """
    if spec.startswith("<<"):
        content = read_heredoc(spec[2:], env, exitno)
        with tempfile.TemporaryFile() as handle:
            handle.write(content.encode("utf-8", "surrogateescape"))
            handle.flush()
            fd = os.dup(handle.fileno())
        os.lseek(fd, 0, os.SEEK_SET)
        return fd
    return os.open(spec[1:], os.O_RDONLY)


def _env_mapping(env: Iterable[str]) -> dict[str, str]:
    return {name: value for name, sep, value in (e.partition("=") for e in env) if sep}


def _redirect(fd: int, target: int) -> None:
    sys.stdout.flush()
    os.dup2(fd, target)
    os.close(fd)


def _close_pipe(pipe: Pipe) -> None:
    for fd in pipe:
        os.close(fd)


def _exec_external(command: Command, env: list[str]) -> int:
    name = command.args[0]
    path = find_executable(name, env)
    if path is not None:
        sys.stdout.flush()
        sys.stderr.flush()
        try:
            os.execve(path, command.args, _env_mapping(env))
        except OSError:
            pass
    sys.stdout.write(f"minishell: command not found: {name}\n")
    return 127


def _child_body(command: Command, previous: Pipe | None, env: list[str], exitno: int) -> int:
    if command.output is not None:
        try:
            _redirect(open_output(command.output), 1)
        except OSError as exc:
            _report(exc)
            return 1
    if command.input is not None:
        try:
            _redirect(open_input(command.input, env, exitno), 0)
        except OSError as exc:
            _report(exc)
            return 1
    if previous is not None:
        os.dup2(previous[0], 0)
        _close_pipe(previous)
    if not command.args or runs_in_parent(command):
        return 0
    if is_builtin(command):
        return check_builtins(command, env)
    return _exec_external(command, env)


def _run_child(
    command: Command,
    pipe: Pipe,
    has_next: bool,
    previous: Pipe | None,
    env: list[str],
    exitno: int,
) -> NoReturn:
    code = 1
    try:
        sys.stdout = open(1, "w", encoding="utf-8", errors="surrogateescape", closefd=False)
        sys.stderr = open(2, "w", encoding="utf-8", errors="surrogateescape", closefd=False)
        if command.output is None and has_next:
            os.dup2(pipe[1], 1)
        _close_pipe(pipe)
        code = _child_body(command, previous, env, exitno)
    except SystemExit as exc:
        code = exc.code if isinstance(exc.code, int) else 1
    except BaseException:
        code = 1
    finally:
        for stream in (sys.stdout, sys.stderr):
            try:
                stream.flush()
            except (OSError, ValueError):
                pass
        os._exit(code)


def _start(
    command: Command,
    has_next: bool,
    previous: Pipe | None,
    env: list[str],
    exitno: int,
) -> tuple[int, Pipe | None]:
    try:
        pipe = os.pipe()
    except OSError as exc:
        _report(exc)
        return -1, None
    sys.stdout.flush()
    sys.stderr.flush()
    try:
        pid = os.fork()
    except OSError as exc:
        _report(exc)
        pid = -1
    if pid == 0:
        _run_child(command, pipe, has_next, previous, env, exitno)
    return pid, pipe


def execute_commands(commands: Sequence[Command], env: list[str], exitno: int) -> int:
    """Run a pipeline and return its exit number.

    Each command runs in a child process connected to the next by a pipe.
    ``cd``, ``exit``, ``export`` and ``unset`` run in the shell itself, so
    they can change ``env`` and the working directory.
    """
    commands = list(commands)
    if not commands:
        return exitno
    pids: list[int] = []
    previous: Pipe | None = None
    for command, following in zip(commands, [*commands[1:], None]):
        pid, pipe = _start(command, following is not None, previous, env, exitno)
        pids.append(pid)
        if pipe is None:
            continue
        if previous is not None:
            _close_pipe(previous)
        previous = pipe
        exitno = check_builtins(command, env) if runs_in_parent(command) else 0
    status = 0
    for pid in pids:
        if pid != -1:
            _, status = os.waitpid(pid, 0)
    if previous is not None:
        _close_pipe(previous)
    return get_exitno(status, len(commands), commands[-1], exitno)