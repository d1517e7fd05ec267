import os

from minishell.path import find_executable, search_paths


def _make_file(path, mode):
    path.write_text("#!/bin/sh\nexit 0\n")
    os.chmod(path, mode)
    return path


def test_search_paths_splits_path_entry():
    env = ["HOME=/home/someone", "PATH=/a::/b"]
    assert search_paths(env) == ["/a", "/b"]


def test_search_paths_needs_exact_prefix():
    assert search_paths(["PATHX=/a", "MYPATH=/b"]) is None


def test_search_paths_uses_first_entry():
    assert search_paths(["PATH=/first", "PATH=/second"]) == ["/first"]


def test_find_executable_in_path(tmp_path):
    _make_file(tmp_path / "tool", 0o755)
    env = [f"PATH={tmp_path / 'nowhere'}:{tmp_path}"]
    assert find_executable("tool", env) == f"{tmp_path}/tool"


def test_find_executable_skips_non_executable(tmp_path):
    first = tmp_path / "first"
    second = tmp_path / "second"
    first.mkdir()
    second.mkdir()
    _make_file(first / "tool", 0o644)
    _make_file(second / "tool", 0o755)
    env = [f"PATH={first}:{second}"]
    assert find_executable("tool", env) == f"{second}/tool"


def test_find_executable_accepts_direct_path(tmp_path):
    tool = _make_file(tmp_path / "tool", 0o755)
    assert find_executable(str(tool), []) == str(tool)


def test_find_executable_without_path_variable():
    assert find_executable("surely-no-such-command-here", ["HOME=/"]) is None


def test_find_executable_not_found(tmp_path):
    env = [f"PATH={tmp_path}"]
    assert find_executable("surely-no-such-command-here", env) is None