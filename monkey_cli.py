#!/usr/bin/env python3
"""
Monkey Programming Language Command Line Interface
Provides the token REPL and file tokenization.
"""

import sys
import logging
import argparse
from typing import Optional

import monkey
from monkey import repl


logger = logging.getLogger("monkey")


def locate(source: str, offset: int):
    """Turn a character offset into a 1-based (line, column) pair."""
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column


def tokenize_source(source: str, filename: str, strict: bool = False, output_stream=None) -> int:
    """Print every token of source, EOF included. Returns an exit status."""
    output_stream = output_stream or sys.stdout
    reporter = monkey.ErrorReporter()
    lexer = monkey.Lexer(source)

    while True:
        token = lexer.next_token()
        print(token, file=output_stream)

        if token.is_type(monkey.TokenType.ILLEGAL):
            # ILLEGAL always consumes exactly one character
            line, column = locate(source, lexer.position - 1)
            reporter.lexer_error(
                f"Unexpected character: {token.value!r}",
                line, column, filename
            )
        elif token.is_type(monkey.TokenType.EOF):
            break

    if strict and reporter.has_errors():
        reporter.print_errors()
        return 1
    return 0


def run_file(filename: str, strict: bool = False) -> int:
    """Tokenize a Monkey source file."""
    reporter = monkey.ErrorReporter()
    try:
        with open(filename, 'r', encoding='utf-8') as file:
            source_code = file.read()
    except FileNotFoundError:
        reporter.error(f"File '{filename}' not found.")
    except (OSError, UnicodeDecodeError) as e:
        reporter.error(f"Error reading file '{filename}': {e}")

    if reporter.has_errors():
        reporter.print_errors()
        return 1

    return tokenize_source(source_code, filename, strict)


def main(argv: Optional[list] = None) -> int:
    """Main entry point for the Monkey CLI."""
    parser = argparse.ArgumentParser(
        description="Monkey Programming Language lexer",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  %(prog)s                     # Start the token REPL
  %(prog)s script.monkey       # Print the tokens of a file
  %(prog)s -c "let x = 5;"     # Print the tokens of some text
        """
    )

    parser.add_argument(
        'file',
        nargs='?',
        help='Monkey source file to tokenize'
    )

    parser.add_argument(
        '-c', '--command',
        help='Tokenize the given text'
    )

    parser.add_argument(
        '--strict',
        action='store_true',
        help='Exit with status 1 if any illegal character is found'
    )

    parser.add_argument(
        '--debug',
        action='store_true',
        help='Enable debug logging'
    )

    parser.add_argument(
        '-v', '--version',
        action='version',
        version=f'Monkey {monkey.__version__}'
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is not None:
        return tokenize_source(args.command, "<command>", args.strict)

    if args.file:
        return run_file(args.file, args.strict)

    logger.debug("starting REPL")
    print(f"Monkey {monkey.__version__} token REPL")
    print("Press Ctrl+D to exit.\n")
    repl.start()
    return 0


if __name__ == '__main__':
    sys.exit(main())
