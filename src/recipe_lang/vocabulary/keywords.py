"""Reserved words of the recipe language."""

import enum
from typing import Dict, Optional


class Keyword(enum.Enum):
    # Section headers
    INGREDIENTS = "Ingredients"
    INSTRUCTIONS = "Instructions"

    # Instructions
    COMBINE = "Combine"
    MIX = "Mix"
    CUT = "Cut"
    INTO = "into"
    REFRIDGERATE = "Refridgerate"
    BAKE = "Bake"


KEYWORD_LOOKUP: Dict[str, Keyword] = {keyword.value: keyword for keyword in Keyword}
# "Cut butter Into flour" reads naturally too
KEYWORD_LOOKUP["Into"] = Keyword.INTO

# The dish as assembled so far. Matched case-insensitively by the parser.
RESULT_IDENTIFIER = "result"


def lookup_keyword(word: str) -> Optional[Keyword]:
    """Return the keyword spelled exactly ``word``, or None."""
    return KEYWORD_LOOKUP.get(word)
