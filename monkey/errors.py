"""
Error handling for the Monkey programming language tools.
The lexer reports unrecognized input as ILLEGAL tokens; callers that want
to treat those as errors turn them into diagnostics here.
"""

import sys


class MonkeyError(Exception):
    """Base class for all Monkey language errors."""

    def __init__(self, message, line=None, column=None, filename=None):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.filename = filename

    def __str__(self):
        location = ""
        if self.filename:
            location += f"File \"{self.filename}\""
        if self.line is not None:
            location += f", line {self.line}" if location else f"line {self.line}"
        if self.column is not None:
            location += f", column {self.column}" if location else f"column {self.column}"

        if location:
            return f"{self.__class__.__name__}: {location}\n  {self.message}"
        return f"{self.__class__.__name__}: {self.message}"


class LexerError(MonkeyError):
    """Illegal character found during lexical analysis."""
    pass


class ErrorReporter:
    """Collects diagnostics so a caller can decide when to print or stop."""

    def __init__(self):
        self.errors = []

    def error(self, message, line=None, column=None, filename=None):
        """Report an error."""
        error = MonkeyError(message, line, column, filename)
        self.errors.append(error)
        return error

    def lexer_error(self, message, line=None, column=None, filename=None):
        """Report an illegal character."""
        error = LexerError(message, line, column, filename)
        self.errors.append(error)
        return error

    def has_errors(self):
        return len(self.errors) > 0

    def clear(self):
        self.errors.clear()

    def print_errors(self, file=None):
        """Print all errors to stderr."""
        for error in self.errors:
            print(str(error), file=file or sys.stderr)
