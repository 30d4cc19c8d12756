import pytest

from shellparse.syntax import ShellSyntaxError, check_tokens
from shellparse.tokens import Token, TokenType as T


def tok(kind, value):
    return Token(kind, value)


def test_empty_sequence_is_valid():
    assert check_tokens([]) == []


def test_valid_pipeline_is_returned_unchanged():
    tokens = [
        tok(T.COMMAND, "cat"),
        tok(T.REDIRECT_INPUT, "<"),
        tok(T.FILE, "in"),
        tok(T.PIPE, "|"),
        tok(T.COMMAND, "wc"),
        tok(T.REDIRECT_APPEND, ">>"),
        tok(T.FILE, "out"),
    ]
    assert check_tokens(iter(tokens)) == tokens


def test_heredoc_with_delimiter_is_valid():
    tokens = [tok(T.COMMAND, "cat"), tok(T.HEREDOC, "<<"), tok(T.DELIMITER, "EOF")]
    assert check_tokens(tokens) == tokens


def test_pipe_followed_by_redirection_is_valid():
    tokens = [
        tok(T.COMMAND, "ls"),
        tok(T.PIPE, "|"),
        tok(T.REDIRECT_OUTPUT, ">"),
        tok(T.FILE, "f"),
    ]
    assert check_tokens(tokens) == tokens


def test_leading_pipe_is_rejected():
    with pytest.raises(ShellSyntaxError) as info:
        check_tokens([tok(T.PIPE, "|"), tok(T.COMMAND, "ls")])
    assert info.value.near == "|"
    assert str(info.value) == "syntax error near unexpected token `|'"


def test_double_pipe_is_rejected():
    tokens = [tok(T.COMMAND, "ls"), tok(T.PIPE, "|"), tok(T.PIPE, "|"), tok(T.COMMAND, "wc")]
    with pytest.raises(ShellSyntaxError) as info:
        check_tokens(tokens)
    assert info.value.near == "|"


def test_repeated_output_redirection_is_rejected():
    tokens = [tok(T.COMMAND, "ls"), tok(T.REDIRECT_OUTPUT, ">"), tok(T.REDIRECT_OUTPUT, ">")]
    with pytest.raises(ShellSyntaxError) as info:
        check_tokens(tokens)
    assert info.value.near == ">"


def test_trailing_pipe_is_rejected():
    with pytest.raises(ShellSyntaxError) as info:
        check_tokens([tok(T.COMMAND, "ls"), tok(T.PIPE, "|")])
    assert info.value.near == "newline"


def test_pipe_followed_by_here_string_is_rejected():
    with pytest.raises(ShellSyntaxError):
        check_tokens([tok(T.COMMAND, "ls"), tok(T.PIPE, "|"), tok(T.HERE_STRING, "<<<")])


@pytest.mark.parametrize("kind,text", [
    (T.REDIRECT_OUTPUT, ">"),
    (T.REDIRECT_APPEND, ">>"),
    (T.REDIRECT_INPUT, "<"),
    (T.HEREDOC, "<<"),
])
def test_redirection_at_end_names_newline(kind, text):
    with pytest.raises(ShellSyntaxError) as info:
        check_tokens([tok(T.COMMAND, "ls"), tok(kind, text)])
    assert info.value.near == "newline"
    assert "newline" in str(info.value)


def test_output_redirection_before_pipe_names_pipe():
    tokens = [
        tok(T.COMMAND, "ls"),
        tok(T.REDIRECT_OUTPUT, ">"),
        tok(T.PIPE, "|"),
        tok(T.COMMAND, "wc"),
    ]
    with pytest.raises(ShellSyntaxError) as info:
        check_tokens(tokens)
    assert info.value.near == "|"


def test_heredoc_needs_delimiter_not_file():
    tokens = [tok(T.COMMAND, "cat"), tok(T.HEREDOC, "<<"), tok(T.FILE, "stop")]
    with pytest.raises(ShellSyntaxError) as info:
        check_tokens(tokens)
    assert info.value.near == "stop"


def test_input_redirection_needs_file_not_delimiter():
    tokens = [tok(T.COMMAND, "cat"), tok(T.REDIRECT_INPUT, "<"), tok(T.DELIMITER, "x")]
    with pytest.raises(ShellSyntaxError) as info:
        check_tokens(tokens)
    assert info.value.near == "x"


def test_error_is_a_value_error():
    with pytest.raises(ValueError):
        check_tokens([tok(T.PIPE, "|")])