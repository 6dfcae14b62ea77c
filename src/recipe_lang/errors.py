"""Errors raised while scanning and parsing recipe source text.

Scanning and parsing stop at the first error. Every error knows where it
happened when a position is available, and can render itself with the
offending source line and a caret under the column, e.g.::

    line 7, column 6: unknown ingredient 'butter'
    Bake butter 350 F 45 min
         ^
"""

from typing import Any, List, Optional


class RecipeLangError(Exception):
    """Base exception for everything the recipe front end raises."""

    def __init__(
        self,
        message: str,
        line: Optional[int] = None,
        column: Optional[int] = None,
        source_line: Optional[str] = None,
    ):
        super().__init__(message)
        self.message = message
        self.line = line
        self.column = column
        self.source_line = source_line

    def __str__(self) -> str:
        if self.line is None:
            return self.message
        return f"line {self.line}, column {self.column}: {self.message}"

    def render(self, source_text: Optional[str] = None) -> str:
        """Format the error for a human, with a caret under the offending column.

        Args:
            source_text: The full source the error came from. Only needed when
                the error does not already carry its source line.

        Returns:
            The positioned message, followed by the echoed source line and a
            caret line when the position and the line are known.
        """
        lines = [str(self)]
        source_line = self.source_line
        if source_line is None and source_text is not None and self.line is not None:
            source_lines = source_text.split("\n")
            if 0 < self.line <= len(source_lines):
                source_line = source_lines[self.line - 1].rstrip("\r")

        if source_line is not None and self.column is not None:
            # Keep tabs so the caret lines up in a terminal
            indent = "".join(
                "\t" if c == "\t" else " " for c in source_line[: self.column - 1]
            )
            lines.append(source_line)
            lines.append(indent + "^")
        return "\n".join(lines)


# --- Scanning ---


class ScanError(RecipeLangError):
    """Raised when the source text cannot be split into tokens.

    Scan errors are always positioned and carry a copy of the source line.
    """

    def __init__(self, message: str, line: int, column: int, source_line: str):
        super().__init__(message, line, column, source_line)


class IllegalCharacterError(ScanError):
    def __init__(self, character: str, line: int, column: int, source_line: str):
        super().__init__(
            f"unexpected character {character!r}", line, column, source_line
        )
        self.character = character


class NumberParseError(ScanError):
    """Raised when a run of digits, dots and commas is not a finite number."""

    def __init__(self, raw: str, line: int, column: int, source_line: str):
        super().__init__(f"invalid number {raw!r}", line, column, source_line)
        self.raw = raw


# --- Parsing ---


class ParseError(RecipeLangError):
    """Raised when the token stream does not form a valid recipe.

    Args:
        message: Human readable description.
        token: The token the parser was looking at, if any. Its position is
            used to locate the error.
    """

    def __init__(self, message: str, token: Any = None):
        line = getattr(token, "line", None)
        column = getattr(token, "column", None)
        super().__init__(message, line, column)
        self.token = token


class UnexpectedTokenError(ParseError):
    def __init__(self, expected: str, actual: Any):
        super().__init__(f"expected {expected}, found {_describe(actual)}", actual)
        self.expected = expected
        self.actual = actual


class UnexpectedEndOfInputError(ParseError):
    def __init__(self, expected: str):
        super().__init__(f"expected {expected}, found end of input")
        self.expected = expected


class UnknownIdentifierError(ParseError):
    """Raised when an instruction mentions an ingredient that was never declared."""

    def __init__(self, name: str, token: Any = None):
        super().__init__(f"unknown ingredient {name!r}", token)
        self.name = name


class DuplicateIngredientError(ParseError):
    """Raised when two declarations share a name, ignoring case."""

    def __init__(self, name: str, token: Any = None):
        super().__init__(f"ingredient {name!r} is declared more than once", token)
        self.name = name


class UnitParseError(ParseError):
    def __init__(
        self, raw: str, token: Any = None, expected: Optional[List[str]] = None
    ):
        message = f"unknown unit {raw!r}"
        if expected:
            message += f" (expected one of: {', '.join(expected)})"
        super().__init__(message, token)
        self.raw = raw


def _describe(token: Any) -> str:
    describe = getattr(token, "describe", None)
    if describe is not None:
        return describe()
    return repr(token)
