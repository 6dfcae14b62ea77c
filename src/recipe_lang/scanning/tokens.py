import dataclasses
import enum
from typing import Union

from recipe_lang.vocabulary.keywords import Keyword


class TokenKind(enum.Enum):
    SEPARATOR = "separator"
    COLON = "colon"
    COMMA = "comma"
    IDENTIFIER = "identifier"
    KEYWORD = "keyword"
    NUMBER = "number"


@dataclasses.dataclass(frozen=True)
class Token:
    """A single lexical token.

    ``value`` holds the identifier text, the Keyword, the float for numbers,
    or the literal character for punctuation and separators. ``line`` and
    ``column`` are 1-based and point at the first character of the token.
    """

    kind: TokenKind
    value: Union[str, float, Keyword]
    line: int
    column: int

    def describe(self) -> str:
        """Short description used in error messages."""
        if self.kind is TokenKind.SEPARATOR:
            return "end of line"
        if self.kind is TokenKind.KEYWORD:
            return f"keyword {self.value.value!r}"
        if self.kind is TokenKind.IDENTIFIER:
            return f"identifier {self.value!r}"
        if self.kind is TokenKind.NUMBER:
            return f"number {self.value:g}"
        return repr(self.value)

    def is_keyword(self, *keywords: Keyword) -> bool:
        return self.kind is TokenKind.KEYWORD and self.value in keywords
