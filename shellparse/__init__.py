"""Tokenize, check and group shell command lines into commands."""

__version__ = "0.1.0"
__all__ = ["commands", "environment", "expand", "lexer", "syntax", "tokens"]