"""The interactive read-eval loop and the command entry point."""

from __future__ import annotations

import os
from collections.abc import Sequence

from minishell.builtins import get_env
from minishell.checker import check
from minishell.executor import execute_commands
from minishell.history import History
from minishell.preprocess import process_input
from minishell.signals import setup_exec_signals, setup_prompt_signals

PROMPT = "$ > "
_BLANKS = " \t"


def read_command_line() -> str | None:
    """Prompt for one line.

    Returns the line as typed, an empty string for a blank line or an
    interrupted prompt, and None at end of input.
    """
    setup_prompt_signals()
    try:
        line = input(PROMPT)
    except EOFError:
        return None
    except KeyboardInterrupt:
        return ""
    finally:
        setup_exec_signals()
    if not line.lstrip(_BLANKS):
        return ""
    return line


def manage_loop(env: list[str], history: History) -> int:
    """Read, check and run command lines until end of input.

    Every non-blank line is recorded in ``history``, which is saved after
    each one. Lines with syntax errors are not run. A line that expands to
    nothing ends the loop. Returns the last exit number.
    """
    exitno = 0
    while True:
        line = read_command_line()
        if line is None:
            break
        if not line:
            continue
        history.insert(line)
        history.save()
        if check(line):
            continue
        commands = process_input(line, env, exitno)
        if not commands:
            break
        exitno = execute_commands(commands, env, exitno)
    return exitno


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive shell; arguments are ignored."""
    history = History()
    history.load()
    env = get_env(os.environ)
    try:
        manage_loop(env, history)
    finally:
        history.clear()
    print("exit")
    return 0