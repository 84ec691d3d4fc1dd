"""Chunk of cookbook text, the unit of retrieval."""
from pydantic import BaseModel, ConfigDict, Field


class Chunk(BaseModel):
    """One window of a stored document. Frozen once built; embedding is None if embedding failed."""
    model_config = ConfigDict(frozen=True)

    content: str = Field(min_length=1)
    embedding: list[float] | None = None
    document_id: str
    chunk_index: int = Field(ge=0)
    source: str  # original file name


class ScoredChunk(BaseModel):
    """Chunk with its cosine similarity to the query (search-time only)."""
    chunk: Chunk
    similarity: float
