"""Turn recipe source text into a flat list of tokens."""

import dataclasses
import logging
from typing import List

from recipe_lang.errors import IllegalCharacterError, NumberParseError
from recipe_lang.scanning.number_utils import is_number_character, parse_number
from recipe_lang.scanning.tokens import Token, TokenKind
from recipe_lang.vocabulary.keywords import lookup_keyword

logger = logging.getLogger(__name__)

PUNCTUATION = {":": TokenKind.COLON, ",": TokenKind.COMMA}


class Scanner:
    """A single forward pass over the source text.

    Plain spaces only separate words and are dropped. Every other whitespace
    character (newlines, tabs, carriage returns) ends a statement; a run of
    them produces exactly one SEPARATOR token. Consecutive non-keyword words
    are merged into one identifier, so ``olive oil`` scans as
    ``Identifier("olive oil")``.

    Attributes:
        source_text (str): The text being scanned.
        tokens (list): Tokens emitted so far.
    """

    def __init__(self, source_text: str):
        self.source_text = source_text
        self.tokens: List[Token] = []
        self._lines = source_text.split("\n")
        self._position = 0
        self._line = 1
        self._line_start = 0

    def scan(self) -> List[Token]:
        """Scan the whole source.

        Returns:
            The tokens in source order.

        Raises:
            IllegalCharacterError: On the first character that cannot start a token.
            NumberParseError: If a numeric run is not a valid finite number.
        """
        while self._position < len(self.source_text):
            char = self.source_text[self._position]

            if char == " ":
                self._advance()
            elif char.isspace():
                self._separator()
            elif char in PUNCTUATION:
                self._push(PUNCTUATION[char], char, self._column())
                self._advance()
            elif char.isdigit():
                self._number()
            elif char.isalpha():
                self._word()
            else:
                raise IllegalCharacterError(
                    char, self._line, self._column(), self._current_line()
                )

        logger.debug(f"Scanned {len(self.tokens)} tokens over {self._line} lines")
        return self.tokens

    # --- Token rules ---

    def _separator(self) -> None:
        line, column = self._line, self._column()
        char = self.source_text[self._position]
        self._advance()
        if self.tokens and self.tokens[-1].kind is TokenKind.SEPARATOR:
            return
        self.tokens.append(Token(TokenKind.SEPARATOR, char, line, column))

    def _number(self) -> None:
        line, column = self._line, self._column()
        start = self._position
        while self._position < len(self.source_text) and is_number_character(
            self.source_text[self._position]
        ):
            self._advance()

        raw = self.source_text[start : self._position]
        value = parse_number(raw)
        if value is None:
            raise NumberParseError(raw, line, column, self._current_line())
        self._push(TokenKind.NUMBER, value, column)

    def _word(self) -> None:
        column = self._column()
        start = self._position
        while self._position < len(self.source_text) and (
            self.source_text[self._position].isalpha()
            or self.source_text[self._position] == "-"
        ):
            self._advance()
        word = self.source_text[start : self._position]

        keyword = lookup_keyword(word)
        if keyword is not None:
            self._push(TokenKind.KEYWORD, keyword, column)
            return

        previous = self.tokens[-1] if self.tokens else None
        if previous is not None and previous.kind is TokenKind.IDENTIFIER:
            # Multi-word ingredient names: "olive" + "oil" -> "olive oil"
            self.tokens[-1] = dataclasses.replace(
                previous, value=f"{previous.value} {word}"
            )
            return

        self._push(TokenKind.IDENTIFIER, word, column)

    # --- Cursor helpers ---

    def _push(self, kind: TokenKind, value, column: int) -> None:
        self.tokens.append(Token(kind, value, self._line, column))

    def _advance(self) -> None:
        if self.source_text[self._position] == "\n":
            self._line += 1
            self._line_start = self._position + 1
        self._position += 1

    def _column(self) -> int:
        return self._position - self._line_start + 1

    def _current_line(self) -> str:
        return self._lines[self._line - 1].rstrip("\r")


def scan(source_text: str) -> List[Token]:
    """Scan ``source_text`` into tokens. See :class:`Scanner`."""
    return Scanner(source_text).scan()
