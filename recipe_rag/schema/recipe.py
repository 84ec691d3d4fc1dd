"""Recipe output model (camelCase on the wire, matching the model's JSON)."""
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from .search_result import SearchMode

Difficulty = Literal["Easy", "Medium", "Hard"]


class Recipe(BaseModel):
    """A generated (or templated fallback) recipe."""
    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    ingredients: list[str] = []
    instructions: list[str] = []
    estimated_time: str = Field(default="30 minutes", alias="estimatedTime")
    servings: int = 4
    difficulty: Difficulty = "Medium"
    description: str = ""


class GenerationResult(BaseModel):
    """Recipes plus which path produced them."""
    recipes: list[Recipe]
    source: Literal["model", "fallback"]
    error: str | None = None
    search_mode: SearchMode | None = None
    latency_seconds: float = 0.0
