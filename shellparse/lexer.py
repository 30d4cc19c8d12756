"""Splitting a command line into tokens."""

from __future__ import annotations

from collections.abc import Mapping

from shellparse.expand import read_word
from shellparse.syntax import check_tokens
from shellparse.tokens import Token, TokenType

# Token kinds after which a word is not the target of a redirection.
_NOT_TARGET_AFTER = frozenset(
    {
        TokenType.PIPE,
        TokenType.COMMAND,
        TokenType.ARGUMENT,
        TokenType.FILE,
        TokenType.DELIMITER,
    }
)


def _skip_spaces(line: str, pos: int) -> int:
    while pos < len(line) and line[pos] == " ":
        pos += 1
    return pos


class Lexer:
    """Turns command lines into checked token lists.

    ``exit_status`` is the value ``$?`` expands to. A word that expands to
    nothing resets it to zero, so later ``$?`` in the same line reads 0.
    """

    def __init__(
        self, env: Mapping[str, str] | None = None, exit_status: int = 0
    ) -> None:
        self.env: Mapping[str, str] = {} if env is None else env
        self.exit_status = exit_status

    def _operator(self, line: str, pos: int) -> tuple[Token, int]:
        c = line[pos]
        ahead = line[pos + 1 : pos + 3]
        if c == "|":
            return Token(TokenType.PIPE, "|"), pos + 1
        if c == ">":
            if ahead.startswith(">"):
                return Token(TokenType.REDIRECT_APPEND, ">>"), pos + 2
            return Token(TokenType.REDIRECT_OUTPUT, ">"), pos + 1
        if ahead == "<<":
            return Token(TokenType.HERE_STRING, "<<<"), pos + 3
        if ahead.startswith("<"):
            return Token(TokenType.HEREDOC, "<<"), pos + 2
        return Token(TokenType.REDIRECT_INPUT, "<"), pos + 1

    @staticmethod
    def _word_type(previous: Token | None) -> TokenType:
        if previous is not None and previous.type is TokenType.HEREDOC:
            return TokenType.DELIMITER
        if previous is not None and previous.type not in _NOT_TARGET_AFTER:
            return TokenType.FILE
        if previous is None or previous.type is TokenType.PIPE:
            return TokenType.COMMAND
        return TokenType.ARGUMENT

    def tokenize(self, line: str) -> list[Token]:
        """Split ``line`` into tokens and check their syntax.

        Reading stops at the first newline. Raises ShellSyntaxError when the
        tokens do not form a valid command line.
        """
        tokens: list[Token] = []
        pos = _skip_spaces(line, 0)
        while pos < len(line) and line[pos] != "\n":
            if line[pos] in "|<>":
                token, pos = self._operator(line, pos)
                tokens.append(token)
                pos = _skip_spaces(line, pos)
                continue
            kind = self._word_type(tokens[-1] if tokens else None)
            value, pos = read_word(line, pos, self.env, self.exit_status)
            if value is None:
                self.exit_status = 0
            else:
                tokens.append(Token(kind, value))
        return check_tokens(tokens)


def tokenize(
    line: str, env: Mapping[str, str] | None = None, exit_status: int = 0
) -> list[Token]:
    """Split ``line`` into checked tokens using ``env`` for expansion."""
    return Lexer(env, exit_status).tokenize(line)