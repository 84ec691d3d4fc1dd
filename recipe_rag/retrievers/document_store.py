"""In-memory document store: document id -> ordered, immutable tuple of chunks."""
from __future__ import annotations

import logging

from recipe_rag.embeddings import EmbedFn
from recipe_rag.schema import Chunk
from .chunking import DEFAULT_CHUNK_SIZE, DEFAULT_OVERLAP, split_text, validate_chunking

logger = logging.getLogger(__name__)


class DocumentStore:
    """
    Memory-resident chunk store. Grows only; re-adding an id replaces its chunks.

    Each document's chunks are built in full and swapped into the map with a single
    assignment, so concurrent readers see either the old tuple or the new one.
    """

    def __init__(
        self,
        embed_fn: EmbedFn | None = None,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        overlap: int = DEFAULT_OVERLAP,
    ) -> None:
        validate_chunking(chunk_size, overlap)
        self.embed_fn = embed_fn
        self.chunk_size = chunk_size
        self.overlap = overlap
        self._documents: dict[str, tuple[Chunk, ...]] = {}

    def _embed(self, text: str, document_id: str, index: int) -> list[float] | None:
        if self.embed_fn is None:
            return None
        try:
            return [float(x) for x in self.embed_fn(text)]
        except Exception as e:
            # Stored without embedding; never retried
            logger.warning("Embedding failed for chunk %d of %s: %s", index, document_id, e)
            return None

    def add_document(self, document_id: str, content: str, source: str) -> list[Chunk]:
        """Chunk, embed (best effort) and store content under document_id. Last write wins."""
        chunks = []
        for i, piece in enumerate(split_text(content, self.chunk_size, self.overlap)):
            chunks.append(
                Chunk(
                    content=piece,
                    embedding=self._embed(piece, document_id, i),
                    document_id=document_id,
                    chunk_index=i,
                    source=source,
                )
            )
        self._documents[document_id] = tuple(chunks)
        embedded = sum(1 for c in chunks if c.embedding is not None)
        logger.info("Stored %s (%s): %d chunks, %d embedded", document_id, source, len(chunks), embedded)
        return chunks

    def has_document(self, document_id: str) -> bool:
        return document_id in self._documents

    def document_count(self) -> int:
        return len(self._documents)

    def get_chunks(self, document_id: str) -> tuple[Chunk, ...]:
        return self._documents.get(document_id, ())

    def all_chunks(self) -> list[Chunk]:
        """Union of all documents' chunks, documents in insertion order."""
        snapshot = self._documents.copy()
        out: list[Chunk] = []
        for chunks in snapshot.values():
            out.extend(chunks)
        return out
