"""Parse model output into recipes; deterministic templated fallback."""
from __future__ import annotations

import json
from typing import Any, Iterator

from recipe_rag.errors import GenerationParseError
from recipe_rag.schema import Recipe

DIFFICULTIES = ("Easy", "Medium", "Hard")
PANTRY_STAPLES = ["salt", "pepper", "oil"]
FALLBACK_STEPS = [
    "Prepare all ingredients",
    "Heat oil in a pan",
    "Cook the main ingredients",
    "Season with salt and pepper",
    "Serve hot",
]


def _closing_bracket(text: str, start: int) -> int | None:
    """Index of the ] closing the [ at start, skipping brackets inside JSON strings."""
    depth = 0
    in_string = False
    escaped = False
    for i in range(start, len(text)):
        ch = text[i]
        if in_string:
            if escaped:
                escaped = False
            elif ch == "\\":
                escaped = True
            elif ch == '"':
                in_string = False
        elif ch == '"':
            in_string = True
        elif ch == "[":
            depth += 1
        elif ch == "]":
            depth -= 1
            if depth == 0:
                return i
    return None


def _balanced_arrays(text: str) -> Iterator[str]:
    """Top-level balanced [...] substrings; arrays nested in a candidate are never yielded."""
    start = text.find("[")
    while start != -1:
        end = _closing_bracket(text, start)
        if end is None:
            # Unclosed: everything after start is inside it
            return
        yield text[start:end + 1]
        start = text.find("[", end + 1)


def extract_json_array(text: str) -> list[dict[str, Any]]:
    """
    First balanced [...] in text that parses as a non-empty JSON array of objects.
    Handles prose or ```json fences around the array. Raises GenerationParseError.
    """
    for candidate in _balanced_arrays(text.strip()):
        try:
            value = json.loads(candidate)
        except json.JSONDecodeError:
            continue
        if isinstance(value, list) and value and all(isinstance(v, dict) for v in value):
            return value
    raise GenerationParseError("No valid JSON array of recipes found in response")


def _str_list(value: Any) -> list[str]:
    return [str(v) for v in value] if isinstance(value, list) else []


def _servings(value: Any) -> int:
    if isinstance(value, bool):
        return 4
    try:
        n = int(value)
    except (TypeError, ValueError):
        return 4
    return n if n > 0 else 4


def _difficulty(value: Any) -> str:
    if isinstance(value, str) and value.strip().capitalize() in DIFFICULTIES:
        return value.strip().capitalize()
    return "Medium"


def normalize_recipes(items: list[dict[str, Any]], count: int) -> list[Recipe]:
    """At most count recipes (never padded), missing fields filled with defaults."""
    recipes = []
    for i, item in enumerate(items[:count], start=1):
        recipes.append(Recipe(
            id=str(item.get("id") or f"recipe-{i}"),
            title=str(item.get("title") or f"Recipe {i}"),
            ingredients=_str_list(item.get("ingredients")),
            instructions=_str_list(item.get("instructions")),
            estimated_time=str(item.get("estimatedTime") or "30 minutes"),
            servings=_servings(item.get("servings")),
            difficulty=_difficulty(item.get("difficulty")),
            description=str(item.get("description") or ""),
        ))
    return recipes


def parse_recipes(text: str, count: int) -> list[Recipe]:
    return normalize_recipes(extract_json_array(text), count)


def fallback_recipes(ingredients: list[str], count: int) -> list[Recipe]:
    """Exactly count simple templated recipes. Deterministic, never fails."""
    main = ingredients[0] if ingredients else "Mixed"
    return [
        Recipe(
            id=f"recipe-{i + 1}",
            title=f"{main} Recipe {i + 1}",
            ingredients=list(ingredients[:5]) + PANTRY_STAPLES,
            instructions=list(FALLBACK_STEPS),
            estimated_time="20-30 minutes",
            servings=4,
            difficulty="Easy",
            description=f"A simple recipe using {', '.join(ingredients)}",
        )
        for i in range(count)
    ]
