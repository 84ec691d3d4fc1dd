from .base import BaseRetriever
from .chunking import split_text
from .document_store import DocumentStore
from .keyword import keyword_match
from .similarity import SimilarityRetriever, cosine_similarity

__all__ = [
    "BaseRetriever",
    "split_text",
    "DocumentStore",
    "keyword_match",
    "SimilarityRetriever",
    "cosine_similarity",
]
