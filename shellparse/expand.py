"""Reading one word of a command line, with quote removal and ``$`` expansion."""

from __future__ import annotations

import re
from collections.abc import Mapping

from shellparse.tokens import is_word_char

_QUOTES = "\"'"
_NAME_RE = re.compile(r"[A-Za-z0-9_]*")
_NAME_CHARS = frozenset("ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789_")


def is_name_char(c: str) -> bool:
    """Return True if ``c`` is an ASCII letter, digit or underscore."""
    return c in _NAME_CHARS


def variable_name(text: str) -> str:
    """Return the longest leading run of name characters in ``text``."""
    match = _NAME_RE.match(text)
    return match.group() if match else ""


def _lookup(env: Mapping[str, str], name: str) -> str:
    if not name:
        return ""
    return env.get(name) or ""


def _status_text(status: int) -> str:
    # Negative statuses expand to nothing.
    return str(status) if status >= 0 else ""


def _measure_dollar(
    line: str, pos: int, env: Mapping[str, str], status: int, status_skip: int
) -> tuple[int, int]:
    following = line[pos + 1 : pos + 2]
    if following == "?":
        return len(str(status)), pos + status_skip
    if following and is_name_char(following):
        name = variable_name(line[pos + 1 :])
        return len(_lookup(env, name)), pos + 1 + len(name)
    return 1, pos + 1


def _measure(line: str, pos: int, env: Mapping[str, str], status: int) -> int:
    """Size of the expanded word; zero means the word vanishes."""
    size = 0
    end = len(line)
    while pos < end and line[pos] != " ":
        c = line[pos]
        if c in _QUOTES:
            pos += 1
            inner = 0
            i = pos
            while i < end and line[i] != c:
                if c == '"' and line[i] == "$":
                    step, i = _measure_dollar(line, i, env, status, 2)
                    inner += step
                else:
                    inner += 1
                    i += 1
            close = line.find(c, pos)
            pos = end if close < 0 else close + 1
            size += max(inner, 1)
        elif c == "$":
            step, pos = _measure_dollar(line, pos, env, status, 1)
            size += step
        else:
            size += 1
            pos += 1
    return size


def _expand_dollar(
    line: str, pos: int, env: Mapping[str, str], status: int
) -> tuple[str, int]:
    following = line[pos + 1 : pos + 2]
    if following == "?":
        return _status_text(status), pos + 2
    if following and is_name_char(following):
        name = variable_name(line[pos + 1 :])
        return _lookup(env, name), pos + 1 + len(name)
    return "$", pos + 1


def _expand(
    line: str, pos: int, env: Mapping[str, str], status: int
) -> tuple[str, int]:
    parts: list[str] = []
    end = len(line)
    while pos < end and is_word_char(line[pos]):
        c = line[pos]
        if c in _QUOTES:
            pos += 1
            while pos < end and line[pos] != c:
                if c == '"' and line[pos] == "$":
                    text, pos = _expand_dollar(line, pos, env, status)
                    parts.append(text)
                else:
                    parts.append(line[pos])
                    pos += 1
            if pos < end:
                pos += 1
        elif c == "$":
            text, pos = _expand_dollar(line, pos, env, status)
            parts.append(text)
        else:
            parts.append(c)
            pos += 1
    return "".join(parts), pos


def _skip_spaces(line: str, pos: int) -> int:
    while pos < len(line) and line[pos] == " ":
        pos += 1
    return pos


def read_word(
    line: str, pos: int, env: Mapping[str, str], exit_status: int = 0
) -> tuple[str | None, int]:
    """Read the word starting at ``pos`` in ``line``.

    Returns ``(value, next_pos)`` where ``next_pos`` is past any trailing
    spaces. ``value`` is None when the word expands to nothing, such as an
    unset variable outside quotes.
    """
    if _measure(line, pos, env, exit_status) == 0:
        if pos < len(line) and line[pos] in _QUOTES:
            pos += 1
        while pos < len(line) and line[pos] not in " \"'":
            pos += 1
        return None, _skip_spaces(line, pos)
    value, pos = _expand(line, pos, env, exit_status)
    return value, _skip_spaces(line, pos)