"""Search and ingestion results."""
from typing import Literal

from pydantic import BaseModel

from .chunk import Chunk

SearchMode = Literal["ranked", "keyword"]


class SearchResult(BaseModel):
    """Result of one similarity search: which path ran (ranked or keyword), chunks best first."""
    query: str
    mode: SearchMode
    chunks: list[Chunk]
    scores: list[float] = []  # cosine similarities, ranked mode only
    latency_seconds: float = 0.0
    fallback_reason: str | None = None


class IngestResult(BaseModel):
    """Outcome of adding one cookbook to the store."""
    document_id: str
    source: str
    pages_processed: int = 0
    chunk_count: int
    embedded_count: int
