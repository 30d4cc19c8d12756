"""Validation of a token sequence before it is turned into commands."""

from __future__ import annotations

from collections.abc import Iterable
from itertools import zip_longest

from shellparse.tokens import Token, TokenType

_REPEAT_CHECKED = frozenset(
    {
        TokenType.PIPE,
        TokenType.REDIRECT_OUTPUT,
        TokenType.REDIRECT_APPEND,
        TokenType.REDIRECT_INPUT,
        TokenType.HEREDOC,
    }
)

_ALLOWED_AFTER_PIPE = frozenset(
    {
        TokenType.COMMAND,
        TokenType.ARGUMENT,
        TokenType.REDIRECT_INPUT,
        TokenType.REDIRECT_OUTPUT,
        TokenType.REDIRECT_APPEND,
        TokenType.HEREDOC,
    }
)

_REQUIRED_TARGET = {
    TokenType.REDIRECT_OUTPUT: TokenType.FILE,
    TokenType.REDIRECT_APPEND: TokenType.FILE,
    TokenType.REDIRECT_INPUT: TokenType.FILE,
    TokenType.HEREDOC: TokenType.DELIMITER,
}


class ShellSyntaxError(ValueError):
    """Raised when a token sequence is not a valid command line."""

    def __init__(self, near: str) -> None:
        self.near = near
        super().__init__(f"syntax error near unexpected token `{near}'")


def _near(token: Token | None) -> str:
    return "newline" if token is None else token.value


def check_tokens(tokens: Iterable[Token]) -> list[Token]:
    """Check the token sequence and return it as a list.

    Raises ShellSyntaxError naming the token the error was found near.
    """
    tokens = list(tokens)
    starts_with_pipe = bool(tokens) and tokens[0].type is TokenType.PIPE
    for token, following in zip_longest(tokens, tokens[1:]):
        if (
            token.type in _REPEAT_CHECKED
            and following is not None
            and following.type is token.type
        ):
            raise ShellSyntaxError(token.value)
        if starts_with_pipe:
            raise ShellSyntaxError("|")
        if token.type is TokenType.PIPE and (
            following is None or following.type not in _ALLOWED_AFTER_PIPE
        ):
            raise ShellSyntaxError(_near(following))
        target = _REQUIRED_TARGET.get(token.type)
        if target is not None and (following is None or following.type is not target):
            raise ShellSyntaxError(_near(following))
    return tokens