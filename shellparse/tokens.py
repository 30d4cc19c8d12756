"""Token types and helpers shared by the lexer and the parser."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum, auto

_BREAK_CHARS = frozenset(" |<>\n")


class TokenType(Enum):
    """Kinds of token a command line is split into."""

    PIPE = auto()
    COMMAND = auto()
    ARGUMENT = auto()
    REDIRECT_INPUT = auto()
    REDIRECT_OUTPUT = auto()
    REDIRECT_APPEND = auto()
    HEREDOC = auto()
    FILE = auto()
    DELIMITER = auto()
    HERE_STRING = auto()

    @property
    def label(self) -> str:
        """Display name used in token dumps."""
        return f"TOKEN_{self.name}"


@dataclass(frozen=True)
class Token:
    """A single lexical token: its kind and its text."""

    type: TokenType
    value: str


def is_word_char(c: str) -> bool:
    """Return True if ``c`` may appear in an unquoted word."""
    return c not in _BREAK_CHARS


def format_tokens(tokens: Iterable[Token]) -> str:
    """Render tokens one per line as ``type: <label>, value: <value>``."""
    return "".join(
        f"type: {token.type.label}, value: {token.value}\n" for token in tokens
    )