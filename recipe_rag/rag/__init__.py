from .llm import build_context, build_prompt, default_completion_client
from .pipeline import RecipePipeline
from .recipes import extract_json_array, fallback_recipes, normalize_recipes
from .service import RecipeService

__all__ = [
    "build_context",
    "build_prompt",
    "default_completion_client",
    "RecipePipeline",
    "extract_json_array",
    "fallback_recipes",
    "normalize_recipes",
    "RecipeService",
]
