import signal

import pytest

from minishell.exitno import get_exitno, wexitstatus, wifexited, wifsignaled, wtermsig
from minishell.parser import Command


def test_normal_exit_status_decodes():
    status = 3 << 8
    assert wifexited(status)
    assert not wifsignaled(status)
    assert wexitstatus(status) == 3


def test_signal_status_decodes():
    status = int(signal.SIGTERM)
    assert not wifexited(status)
    assert wifsignaled(status)
    assert wtermsig(status) == signal.SIGTERM


def test_stopped_status_is_not_signaled():
    assert not wifsignaled(0x7F)
    assert not wifexited(0x7F)


def test_get_exitno_from_exit_code():
    assert get_exitno(2 << 8, 1, Command(args=["ls"]), 5) == 2


def test_get_exitno_from_signal():
    status = int(signal.SIGKILL)
    assert get_exitno(status, 1, Command(args=["sleep", "9"]), 0) == 128 + signal.SIGKILL


@pytest.mark.parametrize("name", ["cd", "exit", "export", "unset", "cdx"])
def test_parent_builtins_keep_previous_exitno(name):
    assert get_exitno(1 << 8, 1, Command(args=[name]), 7) == 7


def test_no_process_gives_zero():
    assert get_exitno(4 << 8, 0, Command(args=["ls"]), 9) == 0


def test_command_without_args_uses_status():
    assert get_exitno(6 << 8, 1, Command(output=">out"), 9) == 6