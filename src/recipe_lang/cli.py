"""Command line entry point: parse recipe files and print the result."""

import argparse
import json
import logging
import pathlib
from typing import List, Optional, Tuple

from tqdm import tqdm

from recipe_lang import interpret, read_source
from recipe_lang.errors import RecipeLangError
from recipe_lang.recipes.models import (
    Bake,
    Combine,
    CutInto,
    Instruction,
    Recipe,
    Reference,
    ResultReference,
)

logger = logging.getLogger(__name__)


def _reference_text(reference: Reference) -> str:
    if isinstance(reference, ResultReference):
        return "result"
    return reference.name


def _instruction_text(instruction: Instruction) -> str:
    if isinstance(instruction, Combine):
        return "Combine " + ", ".join(
            _reference_text(r) for r in instruction.ingredients
        )
    if isinstance(instruction, CutInto):
        return (
            f"Cut {_reference_text(instruction.source)} "
            f"into {_reference_text(instruction.destination)}"
        )
    time = f"{instruction.time.duration:g} {instruction.time.unit.value}"
    if isinstance(instruction, Bake):
        temperature = instruction.temperature
        return (
            f"Bake {_reference_text(instruction.ingredient)} at "
            f"{temperature.degrees:g} {temperature.unit.value} for {time}"
        )
    return f"Refridgerate {_reference_text(instruction.ingredient)} for {time}"


def format_recipe(recipe: Recipe) -> str:
    """Human readable listing of a parsed recipe."""
    lines = ["Ingredients:"]
    for ingredient in recipe.ingredients:
        amount = f"{ingredient.amount.quantity:g}"
        if ingredient.amount.unit.value:
            amount += f" {ingredient.amount.unit.value}"
        lines.append(f"  {ingredient.name}: {amount}")
    lines.append("Instructions:")
    for number, instruction in enumerate(recipe.instructions, start=1):
        lines.append(f"  {number}. {_instruction_text(instruction)}")
    return "\n".join(lines)


def parse_file(path: pathlib.Path) -> Tuple[Optional[Recipe], Optional[str]]:
    """Parse one recipe file.

    Returns:
        A tuple of (recipe, error message). Exactly one of them is None.
    """
    try:
        source_text = read_source(path)
    except (OSError, UnicodeDecodeError) as e:
        return None, f"Error reading {path}: {e}"

    try:
        recipe = interpret(source_text)
    except RecipeLangError as e:
        logger.debug(f"Failed to parse {path}: {e}")
        return None, e.render(source_text)

    logger.info(f"Parsed {path}")
    return recipe, None


def _render(recipe: Recipe, output_format: str) -> str:
    if output_format == "json":
        return json.dumps(recipe.to_dict(), indent=2)
    return format_recipe(recipe)


def main(argv: Optional[List[str]] = None) -> int:
    """Parse the recipe files named on the command line.

    Returns:
        0 if every file parsed, 1 otherwise.
    """
    parser_args = argparse.ArgumentParser(
        prog="recipe-lang",
        description="Scan and parse recipe files, printing each recipe or its error",
    )
    parser_args.add_argument(
        "paths",
        nargs="+",
        type=pathlib.Path,
        help="Recipe file(s) to parse",
    )
    parser_args.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="Output format for parsed recipes (default: text)",
    )
    parser_args.add_argument(
        "--log-level",
        type=str.upper,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    args = parser_args.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if len(args.paths) == 1:
        recipe, error = parse_file(args.paths[0])
        if recipe is None:
            print(error)
            return 1
        print(_render(recipe, args.format))
        return 0

    failures = 0
    for path in tqdm(args.paths, desc="Parsing recipes"):
        recipe, error = parse_file(path)
        if recipe is None:
            failures += 1
            tqdm.write(f"⚠ {path}\n{error}")
        else:
            tqdm.write(f"✓ {path}\n{_render(recipe, args.format)}")

    print(f"\nParsed {len(args.paths) - failures} of {len(args.paths)} recipes")
    return 1 if failures else 0


if __name__ == "__main__":
    raise SystemExit(main())
