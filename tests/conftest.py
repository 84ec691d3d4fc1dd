"""Pytest fixtures: fake embedders and completion clients, sample cookbook text."""
import json
import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

VOCAB = ["chicken", "rice", "beef", "soup", "cake", "chocolate", "pasta", "garlic"]


def bag_of_words(text: str) -> list[float]:
    """Deterministic toy embedding: counts of VOCAB words."""
    lower = text.lower()
    return [float(lower.count(w)) for w in VOCAB]


@pytest.fixture
def fake_embed():
    return bag_of_words


@pytest.fixture
def failing_embed():
    def embed(text: str) -> list[float]:
        raise RuntimeError("quota exceeded")
    return embed


@pytest.fixture
def sample_ingredients() -> list[str]:
    return ["chicken", "rice"]


@pytest.fixture
def cookbook_text() -> str:
    return (
        "Chicken Fried Rice: cook rice, stir fry chicken with garlic and soy sauce.\n"
        "Beef Stew: brown the beef, add carrots and potatoes, simmer two hours.\n"
        "Chocolate Cake: flour, cocoa, sugar, eggs, bake at 350F for 30 minutes.\n"
    )


@pytest.fixture
def model_response() -> str:
    recipes = [
        {
            "id": "r1",
            "title": "Chicken Fried Rice",
            "ingredients": ["chicken", "rice", "garlic"],
            "instructions": ["Cook rice", "Fry chicken", "Combine"],
            "estimatedTime": "25 minutes",
            "servings": 2,
            "difficulty": "Easy",
            "description": "Weeknight fried rice",
        },
        {"title": "Chicken Congee", "ingredients": ["chicken", "rice"]},
    ]
    return "Here are your recipes:\n```json\n" + json.dumps(recipes, indent=2) + "\n```"
