"""Recipe pipeline: ingredients -> retrieve cookbook context -> LLM -> parsed recipes (or fallback)."""
import logging
import time
from pathlib import Path

from recipe_rag.errors import CompletionError
from recipe_rag.logging import log_generation_event, log_search_event
from recipe_rag.rag.llm import CompletionClient, build_context, default_completion_client
from recipe_rag.rag.recipes import fallback_recipes, parse_recipes
from recipe_rag.retrievers import BaseRetriever
from recipe_rag.schema import Chunk, GenerationResult, Recipe

logger = logging.getLogger(__name__)

QUERY_PREFIX = "recipes with ingredients: "


def _default_log_dir() -> Path | None:
    try:
        from config.settings import LOG_DIR
        return LOG_DIR
    except ImportError:
        return None


def build_query(ingredients: list[str]) -> str:
    return QUERY_PREFIX + ", ".join(ingredients)


class RecipePipeline:
    """Retrieve context for the ingredients, ask the model for recipes, fall back to templates on any failure."""

    def __init__(
        self,
        retriever: BaseRetriever,
        llm_client: CompletionClient | None = None,
        top_k: int = 8,
        log_dir: Path | str | None = None,
        use_default_client: bool = True,
    ) -> None:
        self.retriever = retriever
        if llm_client is None and use_default_client:
            llm_client = default_completion_client()
        self.llm_client = llm_client
        self.top_k = top_k
        self.log_dir = Path(log_dir) if log_dir else _default_log_dir()

    def _ask_model(self, ingredients: list[str], count: int, chunks: list[Chunk]) -> list[Recipe]:
        if self.llm_client is None:
            raise CompletionError("No completion client configured")
        raw = self.llm_client({
            "ingredients": ", ".join(ingredients),
            "number_of_recipes": str(count),
            "context": build_context(chunks),
        })
        return parse_recipes(raw, count)

    def _fallback(self, ingredients: list[str], count: int, error: Exception, search_mode) -> GenerationResult:
        logger.warning("Recipe generation failed, using fallback recipes: %s", error)
        return GenerationResult(
            recipes=fallback_recipes(ingredients, count),
            source="fallback",
            error=f"{type(error).__name__}: {error}",
            search_mode=search_mode,
        )

    def generate(self, ingredients: list[str], count: int, document_id: str) -> GenerationResult:
        """Exactly count fallback recipes on failure; up to count model recipes on success."""
        t0 = time.perf_counter()
        found = None
        try:
            found = self.retriever.retrieve(build_query(ingredients), top_k=self.top_k)
        except Exception as e:
            result = self._fallback(ingredients, count, e, search_mode=None)
        if found is not None:
            log_search_event(found, self.log_dir)
            try:
                result = GenerationResult(
                    recipes=self._ask_model(ingredients, count, found.chunks),
                    source="model",
                    search_mode=found.mode,
                )
            except Exception as e:
                result = self._fallback(ingredients, count, e, search_mode=found.mode)
        result.latency_seconds = time.perf_counter() - t0
        log_generation_event(ingredients, count, document_id, result, self.log_dir)
        return result

    def generate_recipes(self, ingredients: list[str], count: int, document_id: str) -> list[Recipe]:
        return self.generate(ingredients, count, document_id).recipes
