"""Cosine-similarity search over the document store, with keyword fallback."""
from __future__ import annotations

import logging
import time

import numpy as np

from recipe_rag.embeddings import EmbedFn
from recipe_rag.errors import EmbeddingUnavailableError, EmptyStoreError, InvalidInputError
from recipe_rag.schema import Chunk, ScoredChunk, SearchResult
from .base import BaseRetriever
from .document_store import DocumentStore
from .keyword import keyword_match

logger = logging.getLogger(__name__)


def cosine_similarity(a, b) -> float:
    """dot(a, b) / (|a| |b|); 0.0 when either vector has zero magnitude."""
    a = np.asarray(a, dtype=float)
    b = np.asarray(b, dtype=float)
    if a.shape != b.shape:
        raise ValueError(f"Embedding length mismatch: {a.shape} vs {b.shape}")
    na = np.linalg.norm(a)
    nb = np.linalg.norm(b)
    if na == 0 or nb == 0:
        return 0.0
    return float(np.dot(a, b) / (na * nb))


def rank_chunks(query_vec: list[float], chunks: list[Chunk], top_k: int) -> list[ScoredChunk]:
    """Score chunks that carry an embedding; best first, ties kept in insertion order."""
    scored = [
        ScoredChunk(chunk=c, similarity=cosine_similarity(query_vec, c.embedding))
        for c in chunks
        if c.embedding is not None
    ]
    # sorted() is stable, so equal scores keep insertion order
    return sorted(scored, key=lambda s: -s.similarity)[:top_k]


class SimilarityRetriever(BaseRetriever):
    """Vector ranking over all stored chunks; degrades to keyword matching, never to an error."""

    name = "cookbook"

    def __init__(self, store: DocumentStore, embed_fn: EmbedFn | None = None) -> None:
        self.store = store
        self.embed_fn = embed_fn if embed_fn is not None else store.embed_fn

    def _embed_query(self, query: str) -> list[float]:
        try:
            return self.embed_fn(query)
        except Exception as e:
            raise EmbeddingUnavailableError(str(e)) from e

    def retrieve(self, query: str, top_k: int = 5) -> SearchResult:
        if top_k <= 0:
            raise InvalidInputError(f"top_k must be positive, got {top_k}")
        if self.store.document_count() == 0:
            raise EmptyStoreError()
        t0 = time.perf_counter()
        chunks = self.store.all_chunks()
        if self.embed_fn is None:
            logger.debug("No embedding backend, using keyword match")
            return SearchResult(
                query=query,
                mode="keyword",
                chunks=keyword_match(chunks, query, top_k),
                latency_seconds=time.perf_counter() - t0,
                fallback_reason="no embedding backend",
            )
        reason = None
        try:
            query_vec = self._embed_query(query)
            ranked = rank_chunks(query_vec, chunks, top_k)
            if ranked:
                return SearchResult(
                    query=query,
                    mode="ranked",
                    chunks=[s.chunk for s in ranked],
                    scores=[s.similarity for s in ranked],
                    latency_seconds=time.perf_counter() - t0,
                )
            reason = "no stored chunk has an embedding"
        except Exception as e:
            reason = f"similarity scoring failed: {e}"
            logger.warning("Similarity search failed, using keyword match: %s", e)
        return SearchResult(
            query=query,
            mode="keyword",
            chunks=keyword_match(chunks, query, top_k),
            latency_seconds=time.perf_counter() - t0,
            fallback_reason=reason,
        )
