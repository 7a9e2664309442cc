"""
Read-print loop for the Monkey lexer.
Tokenizes each input line and prints the tokens it produces.
"""

import logging
import sys

from .lexer import Lexer
from .token_types import TokenType


logger = logging.getLogger(__name__)

PROMPT = ">> "


def print_tokens(line: str, output_stream=None):
    """Print every token of a line, stopping at EOF."""
    output_stream = output_stream or sys.stdout
    lexer = Lexer(line)

    while True:
        token = lexer.next_token()
        if token.type == TokenType.EOF:
            break
        print(f"Token: {token}", file=output_stream)


def start(input_stream=None, output_stream=None):
    """
    Run the REPL until the input stream is exhausted.

    A line holding only a line terminator, or a line that fails to read,
    is skipped and the prompt shown again.
    """
    input_stream = input_stream or sys.stdin
    output_stream = output_stream or sys.stdout

    while True:
        output_stream.write(PROMPT)
        output_stream.flush()

        try:
            line = input_stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            logger.debug("skipping unreadable line: %s", e)
            continue
        except KeyboardInterrupt:
            output_stream.write("\n")
            break

        if line == "":
            output_stream.write("\n")
            break

        if line in ("\n", "\r\n"):
            logger.debug("skipping empty line")
            continue

        print_tokens(line, output_stream)
