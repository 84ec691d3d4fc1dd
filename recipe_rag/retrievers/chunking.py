"""Fixed-size character windows with overlap."""
from __future__ import annotations

from recipe_rag.errors import ChunkingConfigError

DEFAULT_CHUNK_SIZE = 1000
DEFAULT_OVERLAP = 200


def validate_chunking(chunk_size: int, overlap: int) -> None:
    """Raise ChunkingConfigError unless chunk_size > 0 and 0 <= overlap < chunk_size."""
    if chunk_size <= 0:
        raise ChunkingConfigError(f"chunk_size must be positive, got {chunk_size}")
    if overlap < 0 or overlap >= chunk_size:
        raise ChunkingConfigError(
            f"overlap must satisfy 0 <= overlap < chunk_size ({chunk_size}), got {overlap}"
        )


def split_text(text: str, chunk_size: int = DEFAULT_CHUNK_SIZE, overlap: int = DEFAULT_OVERLAP) -> list[str]:
    """
    Split text into windows [start, start + chunk_size), advancing by chunk_size - overlap.
    The last window ends at len(text) and may be shorter. Empty text gives no chunks.
    """
    validate_chunking(chunk_size, overlap)
    chunks = []
    start = 0
    length = len(text)
    while start < length:
        end = min(start + chunk_size, length)
        chunks.append(text[start:end])
        if end == length:
            break
        start = end - overlap
    return chunks
