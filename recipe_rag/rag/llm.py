"""Completion client for recipe generation: build prompt and call OpenAI (or any callable)."""
from __future__ import annotations

import os
from typing import Callable

from recipe_rag.errors import CompletionError
from recipe_rag.schema import Chunk

# Takes {"ingredients", "number_of_recipes", "context"}, returns raw model text
CompletionClient = Callable[[dict[str, str]], str]

DEFAULT_MODEL = "gpt-4o-mini"

RECIPE_PROMPT = """
You are a professional chef assistant. Based on the recipe book content provided and the available ingredients, generate exactly {number_of_recipes} complete, detailed recipes.

Available ingredients: {ingredients}

Recipe book content:
{context}

Instructions:
1. Generate exactly {number_of_recipes} recipes
2. Each recipe must use at least 3 of the available ingredients
3. Include complete ingredient lists (you can add common pantry items)
4. Provide step-by-step instructions
5. Include estimated cooking time if possible
6. Format each recipe as valid JSON

Return ONLY a JSON array of recipes in this exact format:
[
  {{
    "id": "recipe-1",
    "title": "Recipe Name",
    "ingredients": ["ingredient 1", "ingredient 2", "..."],
    "instructions": ["Step 1", "Step 2", "..."],
    "estimatedTime": "30 minutes",
    "servings": 4,
    "difficulty": "Easy",
    "description": "Brief description of the dish"
  }}
]

Make sure the JSON is valid and parseable.
"""


def build_context(chunks: list[Chunk]) -> str:
    """Chunk contents separated by blank lines."""
    return "\n\n".join(c.content for c in chunks)


def build_prompt(variables: dict[str, str], template: str = RECIPE_PROMPT) -> str:
    return template.format(
        ingredients=variables["ingredients"],
        number_of_recipes=variables["number_of_recipes"],
        context=variables["context"],
    ).strip()


def openai_complete(
    variables: dict[str, str],
    model: str = DEFAULT_MODEL,
    temperature: float = 0.7,
    api_key: str | None = None,
) -> str:
    """Call OpenAI Chat Completions. Requires OPENAI_API_KEY. Raises CompletionError on failure."""
    api_key = (api_key or os.getenv("OPENAI_API_KEY") or "").strip()
    if not api_key:
        raise CompletionError("OPENAI_API_KEY is not set")
    try:
        from openai import OpenAI
        client = OpenAI(api_key=api_key)
        resp = client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": build_prompt(variables)}],
            temperature=temperature,
        )
        return (resp.choices[0].message.content or "").strip()
    except Exception as e:
        raise CompletionError(f"Completion request failed: {e}") from e


def default_completion_client() -> CompletionClient | None:
    """Return an OpenAI client bound to settings if OPENAI_API_KEY set, else None."""
    from config.settings import AI_MODEL, AI_TEMPERATURE, OPENAI_API_KEY
    if not OPENAI_API_KEY:
        return None

    def complete(variables: dict[str, str]) -> str:
        return openai_complete(variables, model=AI_MODEL, temperature=AI_TEMPERATURE, api_key=OPENAI_API_KEY)

    return complete
