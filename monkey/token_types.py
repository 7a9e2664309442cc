"""
Token definitions for the Monkey programming language.
Provides the closed set of token kinds and reserved-word lookup.
"""

from enum import Enum, auto


class TokenType(Enum):
    # Special
    ILLEGAL = auto()
    EOF = auto()

    # Identifiers & literals
    IDENT = auto()
    INT = auto()

    # Operators
    ASSIGN = auto()
    PLUS = auto()
    MINUS = auto()
    BANG = auto()
    ASTERISK = auto()
    SLASH = auto()

    LT = auto()
    GT = auto()

    EQUAL = auto()
    NOT_EQUAL = auto()

    # Delimiters
    COMMA = auto()
    SEMICOLON = auto()
    LPAREN = auto()
    RPAREN = auto()
    LBRACE = auto()
    RBRACE = auto()

    # Keywords
    FUNCTION = auto()
    LET = auto()
    IF = auto()
    ELSE = auto()
    RETURN = auto()
    TRUE = auto()
    FALSE = auto()


# Reserved words, matched exactly and case-sensitively
KEYWORDS = {
    'fn': TokenType.FUNCTION,
    'let': TokenType.LET,
    'if': TokenType.IF,
    'else': TokenType.ELSE,
    'return': TokenType.RETURN,
    'true': TokenType.TRUE,
    'false': TokenType.FALSE,
}

# Characters that always form a token on their own
SINGLE_CHAR_TOKENS = {
    ';': TokenType.SEMICOLON,
    '(': TokenType.LPAREN,
    ')': TokenType.RPAREN,
    '{': TokenType.LBRACE,
    '}': TokenType.RBRACE,
    ',': TokenType.COMMA,
    '+': TokenType.PLUS,
    '-': TokenType.MINUS,
    '*': TokenType.ASTERISK,
    '/': TokenType.SLASH,
    '<': TokenType.LT,
    '>': TokenType.GT,
}
