"""Keyword containment fallback used when embeddings are unavailable."""
from recipe_rag.schema import Chunk


def _tokenize(text: str) -> list[str]:
    return text.lower().split()


def keyword_matches(content: str, query: str) -> bool:
    """True if content contains the whole query or any query token (case-insensitive)."""
    content_lower = content.lower()
    query_lower = query.lower()
    if query_lower in content_lower:
        return True
    return any(tok in content_lower for tok in _tokenize(query_lower))


def keyword_match(chunks: list[Chunk], query: str, top_k: int) -> list[Chunk]:
    """Matching chunks in insertion order, truncated to top_k. Not ranked by match quality."""
    out: list[Chunk] = []
    for c in chunks:
        if len(out) >= top_k:
            break
        if keyword_matches(c.content, query):
            out.append(c)
    return out
