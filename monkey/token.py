"""
Token class for representing lexical tokens.
"""

from typing import Optional

from .token_types import TokenType, KEYWORDS


OPERATORS = frozenset({
    TokenType.ASSIGN,
    TokenType.PLUS,
    TokenType.MINUS,
    TokenType.BANG,
    TokenType.ASTERISK,
    TokenType.SLASH,
    TokenType.LT,
    TokenType.GT,
    TokenType.EQUAL,
    TokenType.NOT_EQUAL,
})

DELIMITERS = frozenset({
    TokenType.COMMA,
    TokenType.SEMICOLON,
    TokenType.LPAREN,
    TokenType.RPAREN,
    TokenType.LBRACE,
    TokenType.RBRACE,
})


class Token:
    """A single lexical token: a kind plus the raw text for IDENT, INT and ILLEGAL."""

    __slots__ = ('_type', '_value')

    def __init__(self, token_type: TokenType, value: Optional[str] = None):
        self._type = token_type
        self._value = value

    @property
    def type(self) -> TokenType:
        return self._type

    @property
    def value(self) -> Optional[str]:
        return self._value

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self._type == other._type and self._value == other._value

    def __hash__(self):
        return hash((self._type, self._value))

    def __str__(self):
        if self._value is None:
            return f"Token({self._type.name})"
        return f"Token({self._type.name}, {self._value!r})"

    def __repr__(self):
        return self.__str__()

    def is_type(self, token_type: TokenType) -> bool:
        """Check if token is of specified type."""
        return self._type == token_type

    def is_keyword(self) -> bool:
        """Check if token is a reserved word."""
        return self._type in KEYWORDS.values()

    def is_operator(self) -> bool:
        """Check if token is an operator."""
        return self._type in OPERATORS

    def is_delimiter(self) -> bool:
        return self._type in DELIMITERS


def lookup_ident(ident: str) -> Token:
    """
    Resolve scanned identifier text to a token.

    Reserved words map to their own payload-less token; any other text
    becomes an IDENT token carrying the text unchanged.
    """
    token_type = KEYWORDS.get(ident)
    if token_type is not None:
        return Token(token_type)
    return Token(TokenType.IDENT, ident)
