from .chunk import Chunk, ScoredChunk
from .recipe import Difficulty, GenerationResult, Recipe
from .search_result import IngestResult, SearchMode, SearchResult

__all__ = [
    "Chunk",
    "ScoredChunk",
    "Difficulty",
    "GenerationResult",
    "Recipe",
    "IngestResult",
    "SearchMode",
    "SearchResult",
]
