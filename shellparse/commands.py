"""Grouping a checked token sequence into commands with their redirections."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from itertools import count, takewhile

from shellparse.syntax import ShellSyntaxError
from shellparse.tokens import Token, TokenType

_WORDS = frozenset({TokenType.COMMAND, TokenType.ARGUMENT})
_REDIRECTIONS = frozenset(
    {
        TokenType.REDIRECT_INPUT,
        TokenType.REDIRECT_OUTPUT,
        TokenType.REDIRECT_APPEND,
        TokenType.HEREDOC,
    }
)


@dataclass
class Redirect:
    """A redirection attached to a command."""

    index: int
    file: str
    type: TokenType


@dataclass
class Command:
    """One command of a pipeline: its name, argument vector and redirections."""

    index: int
    name: str
    args: list[str] = field(default_factory=list)
    redirects: list[Redirect] = field(default_factory=list)


def token_argv(tokens: Iterable[Token]) -> list[str]:
    """Return the command and argument words up to the first pipe."""
    return [
        token.value
        for token in takewhile(lambda t: t.type is not TokenType.PIPE, tokens)
        if token.type in _WORDS
    ]


def _read_command(
    tokens: list[Token], pos: int, index: int, redirect_index: Iterator[int]
) -> tuple[Command, int]:
    command = Command(index, tokens[pos].value, token_argv(tokens[pos:]))
    end = len(tokens)
    while pos < end and tokens[pos].type in _WORDS:
        pos += 1
    while pos < end:
        token = tokens[pos]
        if token.type in (TokenType.PIPE, TokenType.COMMAND):
            break
        if token.type in _REDIRECTIONS:
            if pos + 1 >= end:
                raise ShellSyntaxError("newline")
            command.redirects.append(
                Redirect(next(redirect_index), tokens[pos + 1].value, token.type)
            )
            pos += 2
        else:
            pos += 1
    return command, pos


def build_commands(tokens: Iterable[Token]) -> list[Command]:
    """Split tokens into commands, numbering commands and redirections in order."""
    tokens = list(tokens)
    commands: list[Command] = []
    redirect_index = count()
    pos = 0
    while pos < len(tokens):
        kind = tokens[pos].type
        if kind is TokenType.COMMAND or kind in _REDIRECTIONS:
            command, pos = _read_command(tokens, pos, len(commands), redirect_index)
            commands.append(command)
        else:
            pos += 1
    return commands