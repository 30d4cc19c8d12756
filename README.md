# shellparse

A small library that turns a shell command line into tokens, checks them for
syntax errors and groups them into commands with their redirections. It
understands pipes (`|`), input and output redirection (`<`, `>`, `>>`),
here-document markers (`<<`), single and double quotes, and `$NAME` / `$?`
expansion.

## Installation

```
pip install shellparse
```

## Tokenizing a line

```python
from shellparse.environment import Environment
from shellparse.lexer import tokenize

env = Environment.from_mapping({"HOME": "/home/user"})
tokens = tokenize('echo "$HOME" | cat > out.txt', env, 0)
for token in tokens:
    print(token.type, token.value)
```

The first word of each pipeline stage is a `TokenType.COMMAND`, the words
after it are `TokenType.ARGUMENT`, the word after a redirection operator is a
`TokenType.FILE`, and the word after `<<` is a `TokenType.DELIMITER`.
`<<<` produces a `TokenType.HERE_STRING` token. Reading stops at the first
newline in the line.

`shellparse.tokens.format_tokens` renders a token list as text, one
`type: TOKEN_<KIND>, value: <value>` line per token.

For repeated use with the same environment, create a `Lexer` once:

```python
from shellparse.lexer import Lexer

lexer = Lexer(env, exit_status=0)
tokens = lexer.tokenize("ls -l >> log")
```

`exit_status` is the value `$?` expands to. When a word expands to nothing
(for example an unset `$VAR` outside quotes) it is dropped, and the lexer's
`exit_status` is reset to 0.

### Expansion rules

- Inside single quotes nothing is expanded.
- Inside double quotes and outside quotes, `$NAME` is replaced by the
  variable's value (empty if unset) and `$?` by the exit status.
- A `$` not followed by a name character or `?` stays as a literal `$`.
- Quotes are removed; adjacent quoted and unquoted parts join into one word.

`shellparse.expand.read_word(line, pos, env, exit_status)` reads a single
word and returns `(value, next_pos)`, with `value` set to `None` when the
word vanishes. `variable_name` and `is_name_char` are the helpers it uses.

## Syntax errors

Malformed lines such as `| ls`, `ls | | wc` or `cat <` raise
`shellparse.syntax.ShellSyntaxError` (a `ValueError`). Its `near` attribute
holds the offending token, and its message has the form:

```
syntax error near unexpected token `newline'
```

`shellparse.syntax.check_tokens` can also be called on a token list
directly; it returns the tokens as a list when they are valid.

## Building commands

```python
from shellparse.commands import build_commands

for command in build_commands(tokens):
    print(command.index, command.name, command.args, command.redirects)
```

Each `Command` carries its name, its argument vector (the command word
followed by its arguments) and a list of `Redirect` entries (`index`, `file`,
`type`) in the order they appeared. Redirect indices run across the whole
line. `token_argv` gives the argument vector of the first stage of a token
list.

## Environment

`shellparse.environment.Environment` holds `EnvVar` entries and reads as a
name-to-value mapping, so it can be passed wherever expansion needs an
environment. It can produce an `envp`-style list of `NAME=VALUE` strings
(`to_envp`), an `export` listing (`format_export`) and a plain description
of every entry (`describe`). `is_alpha` and `is_name_start` check names.

## What this package does not do

It only reads command lines. It does not run commands, open redirection
files, read here-document bodies, provide built-in commands, or offer an
interactive prompt.