"""Error taxonomy for the recipe RAG core.

Only structural misuse (empty store, invalid arguments, bad configuration,
unreadable uploads) propagates to callers. Embedding, completion and parse
failures are absorbed by the keyword-search and templated-recipe fallbacks.
"""
from __future__ import annotations


class RecipeRAGError(Exception):
    """Base class for all recipe_rag errors."""


class EmptyStoreError(RecipeRAGError):
    """Search attempted before any document was added."""

    def __init__(self, message: str = "No documents have been indexed yet") -> None:
        super().__init__(message)


class EmbeddingUnavailableError(RecipeRAGError):
    """Embedding backend missing or failing (quota, network, service)."""


class CompletionError(RecipeRAGError):
    """Completion service missing or failing."""


class GenerationParseError(RecipeRAGError):
    """Completion output held no usable JSON recipe array."""


class InvalidInputError(RecipeRAGError, ValueError):
    """Caller-level validation failure (ingredients, count, document id, upload)."""


class ChunkingConfigError(RecipeRAGError, ValueError):
    """chunk_size / overlap outside 0 <= overlap < chunk_size."""


class PDFExtractionError(RecipeRAGError):
    """Uploaded bytes are not a parseable PDF."""
