import pytest

from minishell.lexer import lex


@pytest.mark.parametrize("text", ["", "   ", "\t \t"])
def test_blank_input_has_no_lexemes(text):
    assert lex(text) == []


@pytest.mark.parametrize(
    "text",
    ["ls", "ls -l -a", "  echo   hello\tworld  ", "cat  >out <in", "a\tb\t\tc"],
)
def test_unquoted_matches_whitespace_split(text):
    assert lex(text) == text.split()


def test_quoted_run_stays_together():
    assert lex("echo 'a b' c") == ["echo", "'a b'", "c"]


def test_quotes_inside_a_word():
    assert lex('x"y z"w end') == ['x"y z"w', "end"]


def test_tab_inside_double_quotes_kept():
    assert lex('printf "a\tb"') == ["printf", '"a\tb"']


@pytest.mark.parametrize(
    "text",
    ["echo 'a b' c", 'x"y z"w end', "one 'two three' \"four five\" six"],
)
def test_lexemes_are_ordered_substrings(text):
    pos = 0
    for token in lex(text):
        found = text.find(token, pos)
        assert found >= pos
        pos = found + len(token)


@pytest.mark.parametrize("text", ["'a b' 'c d'", "\"x y\" z"])
def test_joined_lexemes_cover_non_blank_text(text):
    tokens = lex(text)
    assert "".join(tokens).replace(" ", "") == text.replace(" ", "")
    assert all(token for token in tokens)


def test_unterminated_quote_runs_to_end():
    assert lex("echo 'abc def") == ["echo", "'abc def"]