"""
Lexical analyzer for the Monkey programming language.
Scans source text one character at a time and hands out tokens on demand.
"""

import logging
from typing import Iterator, List, Optional

from .token import Token, lookup_ident
from .token_types import TokenType, SINGLE_CHAR_TOKENS


logger = logging.getLogger(__name__)

# str.isspace() accepts the ASCII information separators, Unicode White_Space does not
_INFORMATION_SEPARATORS = '\x1c\x1d\x1e\x1f'


def is_letter(char: str) -> bool:
    """Check whether a character may appear in an identifier."""
    return ('a' <= char <= 'z') or ('A' <= char <= 'Z') or char == '_'


def is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def is_whitespace(char: str) -> bool:
    return char.isspace() and char not in _INFORMATION_SEPARATORS


class Lexer:
    """
    Pull-based lexical analyzer for Monkey.

    Each call to next_token() consumes exactly the characters of one token
    and returns it. Unrecognized characters come back as ILLEGAL tokens;
    scanning never raises. After the source is exhausted every call
    returns EOF.
    """

    def __init__(self, source_code: str):
        self.source = source_code
        self.position = 0
        self.read_position = 0
        self.ch: Optional[str] = None
        self.read_char()

    def read_char(self):
        """Move the cursor one character forward."""
        self.ch = self.peek_char()
        self.position = self.read_position
        self.read_position += 1

    def peek_char(self) -> Optional[str]:
        """Get the character after the current one, or None past the end."""
        if self.read_position >= len(self.source):
            return None
        return self.source[self.read_position]

    def skip_whitespace(self):
        while self.ch is not None and is_whitespace(self.ch):
            self.read_char()

    def read_identifier(self) -> str:
        """Read a maximal run of letters starting at the cursor."""
        start = self.position
        while self.ch is not None and is_letter(self.ch):
            self.read_char()
        return self.source[start:self.position]

    def read_number(self) -> str:
        """Read a maximal run of ASCII digits starting at the cursor."""
        start = self.position
        while self.ch is not None and is_digit(self.ch):
            self.read_char()
        return self.source[start:self.position]

    def next_token(self) -> Token:
        """Scan and return the next token."""
        self.skip_whitespace()

        char = self.ch
        if char is None:
            token = Token(TokenType.EOF)

        # Two-character operators
        elif char == '=':
            if self.peek_char() == '=':
                self.read_char()
                token = Token(TokenType.EQUAL)
            else:
                token = Token(TokenType.ASSIGN)
            self.read_char()
        elif char == '!':
            if self.peek_char() == '=':
                self.read_char()
                token = Token(TokenType.NOT_EQUAL)
            else:
                token = Token(TokenType.BANG)
            self.read_char()

        # Single-character operators and delimiters
        elif char in SINGLE_CHAR_TOKENS:
            token = Token(SINGLE_CHAR_TOKENS[char])
            self.read_char()

        # Identifiers and keywords; the scan leaves the cursor past the word
        elif is_letter(char):
            token = lookup_ident(self.read_identifier())

        elif is_digit(char):
            token = Token(TokenType.INT, self.read_number())

        # Unknown character
        else:
            token = Token(TokenType.ILLEGAL, char)
            self.read_char()

        logger.debug("token %s at offset %d", token, self.position)
        return token

    def __iter__(self) -> Iterator[Token]:
        """Yield tokens up to and including EOF."""
        while True:
            token = self.next_token()
            yield token
            if token.type == TokenType.EOF:
                return

    def tokenize(self) -> List[Token]:
        """
        Tokenize the rest of the source code.
        Returns the list of tokens, ending with a single EOF token.
        """
        return list(self)
