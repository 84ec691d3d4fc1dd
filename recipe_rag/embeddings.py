"""Embedding backends. An embed_fn is any callable text -> list[float] that may raise."""
from __future__ import annotations

import os
from typing import Callable

from recipe_rag.errors import EmbeddingUnavailableError

EmbedFn = Callable[[str], list[float]]

DEFAULT_OPENAI_MODEL = "text-embedding-ada-002"
DEFAULT_ST_MODEL = "all-MiniLM-L6-v2"


def openai_embed_fn(model: str = DEFAULT_OPENAI_MODEL, api_key: str | None = None) -> EmbedFn:
    """OpenAI embeddings. Requires OPENAI_API_KEY. API errors propagate to the caller."""
    api_key = (api_key or os.getenv("OPENAI_API_KEY") or "").strip()
    if not api_key:
        raise EmbeddingUnavailableError("OPENAI_API_KEY is not set")
    from openai import OpenAI
    client = OpenAI(api_key=api_key)

    def embed(text: str) -> list[float]:
        resp = client.embeddings.create(model=model, input=text)
        return list(resp.data[0].embedding)

    return embed


def sentence_transformer_embed_fn(model_name: str = DEFAULT_ST_MODEL) -> EmbedFn:
    """Local sentence-transformers model."""
    try:
        from sentence_transformers import SentenceTransformer
    except ImportError as e:
        raise EmbeddingUnavailableError(
            "sentence-transformers required for local embeddings. pip install sentence-transformers"
        ) from e
    model = SentenceTransformer(model_name)

    def embed(text: str) -> list[float]:
        return model.encode([text], convert_to_numpy=True).flatten().tolist()

    return embed


def make_embed_fn(backend: str, model: str | None = None) -> EmbedFn | None:
    """Build embed_fn for backend: openai | sentence_transformers | none."""
    backend = backend.strip().lower()
    if backend == "none":
        return None
    if backend == "openai":
        return openai_embed_fn(model or DEFAULT_OPENAI_MODEL)
    if backend == "sentence_transformers":
        return sentence_transformer_embed_fn(model or DEFAULT_ST_MODEL)
    raise EmbeddingUnavailableError(f"Unknown embedding backend: {backend!r}")


def default_embed_fn() -> EmbedFn | None:
    """embed_fn from config settings, or None if the backend cannot be set up (keyword search only)."""
    from config.settings import EMBEDDING_BACKEND, EMBEDDING_MODEL
    try:
        return make_embed_fn(EMBEDDING_BACKEND, EMBEDDING_MODEL)
    except EmbeddingUnavailableError:
        return None
