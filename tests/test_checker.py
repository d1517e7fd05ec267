import pytest

from minishell.checker import check
from minishell.errors import CheckerErrorKind


@pytest.mark.parametrize(
    "line",
    [
        "ls -l",
        "cat << EOF",
        "cat >out",
        "echo \"a b\" | wc",
        "echo '|'",
        "grep x < file",
    ],
)
def test_valid_lines_report_nothing(line, capsys):
    assert check(line) == []
    assert capsys.readouterr().out == ""


def test_open_single_quote(capsys):
    assert check("echo 'hi") == [CheckerErrorKind.OPEN_QUOTE]
    assert capsys.readouterr().out == "ERROR: There is an open quote.\n"


def test_open_double_quote_across_words():
    assert check('echo "a b c') == [CheckerErrorKind.OPEN_QUOTE]


def test_single_quote_inside_double_quotes_is_balanced():
    assert check("echo \"it's\"") == []


def test_trailing_pipe(capsys):
    assert check("ls |") == [CheckerErrorKind.MISSING_COMMAND]
    assert capsys.readouterr().out == "ERROR: There is a command missing after pipe.\n"


def test_double_pipe_anywhere():
    assert check("ls || wc") == [CheckerErrorKind.MISSING_COMMAND]


def test_pipe_followed_by_tab_at_end():
    assert check("ls |\t") == [CheckerErrorKind.MISSING_COMMAND]


def test_redirection_without_file(capsys):
    assert check("cat >") == [CheckerErrorKind.PARSE_ERROR]
    assert capsys.readouterr().out == "minishell: parse error near '\\n'\n"


def test_heredoc_without_delimiter_reports_twice(capsys):
    assert check("cat <<") == [CheckerErrorKind.PARSE_ERROR, CheckerErrorKind.PARSE_ERROR]
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["minishell: parse error near '\\n'"] * 2


def test_several_errors_are_all_reported():
    found = check("echo 'x |")
    assert found == [CheckerErrorKind.OPEN_QUOTE, CheckerErrorKind.MISSING_COMMAND]


def test_blank_line_raises():
    with pytest.raises(ValueError):
        check("    ")