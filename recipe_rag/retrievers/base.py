"""Pluggable retriever interface."""
from abc import ABC, abstractmethod

from recipe_rag.schema import Chunk, SearchResult


class BaseRetriever(ABC):
    """Interface for retrievers: query -> top-k chunks + which search path ran."""

    name: str

    @abstractmethod
    def retrieve(self, query: str, top_k: int = 5) -> SearchResult:
        """Return top-k chunks, best first, with mode and latency."""
        ...

    def search(self, query: str, top_k: int = 5) -> list[Chunk]:
        """Chunks only."""
        return self.retrieve(query, top_k=top_k).chunks
