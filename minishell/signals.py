"""Signal handling for the prompt, running commands and here-documents."""

from __future__ import annotations

import signal
import sys
from types import FrameType

_received = 0


def received_signal() -> int:
    """Number of the last signal the shell's handlers caught, or 0."""
    return _received


def _record(signo: int) -> None:
    global _received
    _received = signo


def _prompt_sigint(signo: int, frame: FrameType | None) -> None:
    _record(signo)
    sys.stdout.write("\n")
    sys.stdout.flush()
    raise KeyboardInterrupt


def _exec_sigint(signo: int, frame: FrameType | None) -> None:
    _record(signo)
    sys.stdout.write("\n")
    sys.stdout.flush()


def _heredoc_sigint(signo: int, frame: FrameType | None) -> None:
    _record(signo)


def setup_prompt_signals() -> None:
    """Handlers for while the prompt waits for input.

    Ctrl-C prints a new line and abandons the line being typed by raising
    :class:`KeyboardInterrupt`; Ctrl-\\ is ignored.
    """
    signal.signal(signal.SIGINT, _prompt_sigint)
    sigquit = getattr(signal, "SIGQUIT", None)
    if sigquit is not None:
        signal.signal(sigquit, signal.SIG_IGN)


def setup_exec_signals() -> None:
    """Handler for while commands run: Ctrl-C only prints a new line."""
    signal.signal(signal.SIGINT, _exec_sigint)


def setup_heredoc_signals() -> None:
    """Handler for while a here-document is read: Ctrl-C is only recorded."""
    signal.signal(signal.SIGINT, _heredoc_sigint)