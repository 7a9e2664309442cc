"""
Monkey Programming Language
Lexical analysis front end: turns source text into tokens.

Version: 0.1.0
"""

__version__ = "0.1.0"

from typing import List

from .lexer import Lexer
from .errors import MonkeyError, LexerError, ErrorReporter
from .token_types import TokenType, KEYWORDS
from .token import Token, lookup_ident

__all__ = [
    "Lexer",
    "MonkeyError",
    "LexerError",
    "ErrorReporter",
    "TokenType",
    "KEYWORDS",
    "Token",
    "lookup_ident",
    "tokenize",
]


def tokenize(source_code: str) -> List[Token]:
    """
    Tokenize Monkey source code.

    Args:
        source_code: The Monkey source code to scan

    Returns:
        Every token of the source, ending with EOF
    """
    return Lexer(source_code).tokenize()
