import pytest

from minishell.lexer import lex
from minishell.preprocess import (
    divide_input,
    initial_translation,
    process_input,
    remove_quotes,
)


def test_divide_simple_pipeline():
    assert divide_input("ls | wc") == ["ls ", " wc"]


def test_divide_ignores_quoted_pipes():
    assert divide_input("echo 'a|b' | wc") == ["echo 'a|b' ", " wc"]
    assert divide_input('echo "x|y"') == ['echo "x|y"']


def test_divide_empty_text():
    assert divide_input("") == []


def test_divide_trailing_pipe_adds_nothing():
    assert divide_input("a|") == ["a"]


def test_divide_double_pipe_gives_empty_command():
    assert divide_input("a||b") == ["a", "", "b"]


@pytest.mark.parametrize("text", ["ls", "ls | wc | cat", "a'|'b|c", "x|\"|\"|y"])
def test_divide_rejoins_to_original(text):
    assert "|".join(divide_input(text)) == text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("'hello'", "hello"),
        ('"it\'s"', "it's"),
        ("plain", "plain"),
        ("''", ""),
    ],
)
def test_remove_quotes(text, expected):
    assert remove_quotes(text) == expected


def test_remove_quotes_keeps_content_between_pairs():
    result = remove_quotes("a\"b\"'c'")
    assert "'" not in result and '"' not in result
    assert result == "a" + "b" + "c"


def test_process_input_pipeline():
    commands = process_input("echo 'hi there' | wc -l", [], 0)
    assert [c.args for c in commands] == [["echo", "hi there"], ["wc", "-l"]]
    assert all(c.input is None and c.output is None for c in commands)


def test_process_input_redirections():
    (command,) = process_input("cat < in.txt > out.txt", [], 0)
    assert command.args == ["cat"]
    assert command.input == "<in.txt"
    assert command.output == ">out.txt"


def test_process_input_expands_exit_status():
    (command,) = process_input("echo $?", [], 42)
    assert command.args == ["echo", "42"]


def test_process_input_uses_environment():
    (command,) = process_input("echo \"$USER\"", ["USER=alice"], 0)
    assert command.args == ["echo", "alice"]


def test_process_input_empty_line():
    assert process_input("", [], 0) == []