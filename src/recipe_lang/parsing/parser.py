"""Recursive-descent parser from tokens to a Recipe.

Grammar (``NL`` is a separator token)::

    recipe              := ingredients-section instructions-section
    ingredients-section := "Ingredients" ":" NL ingredient-decl*
    ingredient-decl     := identifier ":" number [unit] NL
    instructions-section:= "Instructions" ":" (NL instruction)*
    instruction         := combine | cut-into | refridgerate | bake
    combine             := ("Combine" | "Mix") reference ("," reference)*
    cut-into            := "Cut" reference "into" reference
    refridgerate        := "Refridgerate" reference number time-unit
    bake                := "Bake" reference number temp-unit number time-unit
    reference           := identifier

The parser reads each token once with one token of lookahead and stops at
the first error.
"""

import logging
from typing import Callable, Dict, List, Optional, Sequence, TypeVar

from recipe_lang.errors import (
    UnexpectedEndOfInputError,
    UnexpectedTokenError,
    UnitParseError,
    UnknownIdentifierError,
)
from recipe_lang.parsing.mise_en_place import MiseEnPlace
from recipe_lang.recipes.models import (
    RESULT,
    Amount,
    Bake,
    Combine,
    CutInto,
    IngredientReference,
    Instruction,
    Recipe,
    Reference,
    Refridgerate,
    Temperature,
    Time,
)
from recipe_lang.scanning.tokens import Token, TokenKind
from recipe_lang.vocabulary.keywords import RESULT_IDENTIFIER, Keyword
from recipe_lang.vocabulary.units import (
    INGREDIENT_UNIT_LOOKUP,
    TEMPERATURE_UNIT_LOOKUP,
    TIME_UNIT_LOOKUP,
    IngredientUnit,
    parse_ingredient_unit,
    parse_temperature_unit,
    parse_time_unit,
)

logger = logging.getLogger(__name__)

U = TypeVar("U")

END_OF_LINE = "end of line"


class Parser:
    """Builds a Recipe from the tokens produced by the scanner.

    Attributes:
        tokens (list): The token stream being parsed.
        mise_en_place (MiseEnPlace): Ingredients declared so far.
    """

    def __init__(self, tokens: Sequence[Token]):
        self.tokens = list(tokens)
        self.mise_en_place = MiseEnPlace()
        self._position = 0

    def parse(self) -> Recipe:
        """Parse the whole token stream.

        Returns:
            The parsed Recipe.

        Raises:
            ParseError: On the first token that does not fit the grammar, an
                unknown unit, a duplicate declaration, or a reference to an
                undeclared ingredient.
        """
        # Blank lines before the first section
        while self._check(TokenKind.SEPARATOR):
            self._advance()

        self._ingredients_section()
        instructions = self._instructions_section()

        recipe = Recipe(self.mise_en_place.ingredients(), tuple(instructions))
        logger.debug(
            f"Parsed recipe with {len(recipe.ingredients)} ingredients "
            f"and {len(recipe.instructions)} instructions"
        )
        return recipe

    # --- Sections ---

    def _ingredients_section(self) -> None:
        self._expect_keyword(Keyword.INGREDIENTS)
        self._expect(TokenKind.COLON, "':'")
        self._expect(TokenKind.SEPARATOR, END_OF_LINE)
        while not self._check_keyword(Keyword.INSTRUCTIONS):
            self._ingredient_declaration()

    def _ingredient_declaration(self) -> None:
        name_token = self._expect(
            TokenKind.IDENTIFIER, "ingredient name or 'Instructions'"
        )
        self._expect(TokenKind.COLON, "':'")
        quantity = self._expect(TokenKind.NUMBER, "quantity").value

        unit = IngredientUnit.UNITS
        if self._check(TokenKind.IDENTIFIER):
            unit = self._unit(
                self._advance(), parse_ingredient_unit, INGREDIENT_UNIT_LOOKUP
            )
        self._expect(TokenKind.SEPARATOR, END_OF_LINE)

        self.mise_en_place.declare(name_token.value, Amount(quantity, unit), name_token)

    def _instructions_section(self) -> List[Instruction]:
        self._expect_keyword(Keyword.INSTRUCTIONS)
        self._expect(TokenKind.COLON, "':'")

        instructions = []
        while self._peek() is not None:
            self._expect(TokenKind.SEPARATOR, END_OF_LINE)
            if self._peek() is None:
                # Trailing newline at the end of the file
                break
            instructions.append(self._instruction())
        return instructions

    # --- Instructions ---

    def _instruction(self) -> Instruction:
        token = self._peek()
        if token is None:
            raise UnexpectedEndOfInputError("instruction")
        self._advance()

        if token.is_keyword(Keyword.COMBINE, Keyword.MIX):
            instruction = Combine(tuple(self._reference_list()))
        elif token.is_keyword(Keyword.CUT):
            source = self._reference()
            self._expect_keyword(Keyword.INTO)
            instruction = CutInto(source, self._reference())
        elif token.is_keyword(Keyword.REFRIDGERATE):
            instruction = Refridgerate(self._reference(), self._time())
        elif token.is_keyword(Keyword.BAKE):
            instruction = Bake(self._reference(), self._temperature(), self._time())
        else:
            raise UnexpectedTokenError(
                "'Combine', 'Mix', 'Cut', 'Refridgerate' or 'Bake'", token
            )

        logger.debug(f"Parsed {type(instruction).__name__} on line {token.line}")
        return instruction

    def _reference_list(self) -> List[Reference]:
        references = [self._reference()]
        while True:
            token = self._peek()
            if token is None or token.kind is TokenKind.SEPARATOR:
                return references
            if token.kind is not TokenKind.COMMA:
                raise UnexpectedTokenError(f"',' or {END_OF_LINE}", token)
            self._advance()
            references.append(self._reference())

    def _reference(self) -> Reference:
        """Resolve an ingredient mention against the declarations so far.

        ``result`` in any case is the sentinel, even if an ingredient with
        that name was declared.
        """
        token = self._expect(TokenKind.IDENTIFIER, "ingredient name or 'result'")
        name = token.value
        if name.casefold() == RESULT_IDENTIFIER:
            return RESULT

        index = self.mise_en_place.resolve(name)
        if index is None:
            raise UnknownIdentifierError(name, token)
        return IngredientReference(index, self.mise_en_place.get(index).name)

    def _temperature(self) -> Temperature:
        degrees = self._expect(TokenKind.NUMBER, "temperature").value
        unit_token = self._expect(TokenKind.IDENTIFIER, "temperature unit")
        return Temperature(
            degrees,
            self._unit(unit_token, parse_temperature_unit, TEMPERATURE_UNIT_LOOKUP),
        )

    def _time(self) -> Time:
        duration = self._expect(TokenKind.NUMBER, "duration").value
        unit_token = self._expect(TokenKind.IDENTIFIER, "time unit")
        return Time(
            duration, self._unit(unit_token, parse_time_unit, TIME_UNIT_LOOKUP)
        )

    @staticmethod
    def _unit(token: Token, resolve: Callable[[str], U], lookup: Dict[str, U]) -> U:
        try:
            return resolve(token.value)
        except UnitParseError:
            raise UnitParseError(token.value, token, expected=list(lookup)) from None

    # --- Token helpers ---

    def _peek(self) -> Optional[Token]:
        if self._position < len(self.tokens):
            return self.tokens[self._position]
        return None

    def _advance(self) -> Token:
        token = self.tokens[self._position]
        self._position += 1
        return token

    def _check(self, kind: TokenKind) -> bool:
        token = self._peek()
        return token is not None and token.kind is kind

    def _check_keyword(self, keyword: Keyword) -> bool:
        token = self._peek()
        return token is not None and token.is_keyword(keyword)

    def _expect(self, kind: TokenKind, expected: str) -> Token:
        token = self._peek()
        if token is None:
            raise UnexpectedEndOfInputError(expected)
        if token.kind is not kind:
            raise UnexpectedTokenError(expected, token)
        return self._advance()

    def _expect_keyword(self, keyword: Keyword) -> Token:
        expected = repr(keyword.value)
        token = self._peek()
        if token is None:
            raise UnexpectedEndOfInputError(expected)
        if not token.is_keyword(keyword):
            raise UnexpectedTokenError(expected, token)
        return self._advance()


def parse(tokens: Sequence[Token]) -> Recipe:
    """Parse scanned tokens into a Recipe. See :class:`Parser`."""
    return Parser(tokens).parse()
