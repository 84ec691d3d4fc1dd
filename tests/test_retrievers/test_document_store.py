"""Test in-memory document store."""
import sys
from pathlib import Path

import pytest
from pydantic import ValidationError

ROOT = Path(__file__).resolve().parent.parent.parent
sys.path.insert(0, str(ROOT))

from recipe_rag.errors import ChunkingConfigError
from recipe_rag.retrievers import DocumentStore


def test_add_short_document_single_chunk(fake_embed) -> None:
    store = DocumentStore(embed_fn=fake_embed)
    chunks = store.add_document("doc1", "short text", "book.pdf")
    assert len(chunks) == 1
    c = chunks[0]
    assert c.content == "short text"
    assert c.document_id == "doc1" and c.chunk_index == 0 and c.source == "book.pdf"
    assert c.embedding is not None
    assert store.has_document("doc1")
    assert not store.has_document("unknown")
    assert store.document_count() == 1


def test_chunk_indexes_follow_ingestion_order() -> None:
    store = DocumentStore(chunk_size=10, overlap=2)
    store.add_document("d", "x" * 35, "book.pdf")
    assert [c.chunk_index for c in store.get_chunks("d")] == [0, 1, 2, 3]


def test_embedding_failure_is_not_fatal() -> None:
    def embed(text: str) -> list[float]:
        if "bad" in text:
            raise RuntimeError("network down")
        return [1.0, 0.0]

    store = DocumentStore(embed_fn=embed, chunk_size=10, overlap=0)
    chunks = store.add_document("d", "good text bad stuff good more", "book.pdf")
    assert len(chunks) == 3
    assert chunks[0].embedding == [1.0, 0.0]
    assert chunks[1].embedding is None  # "bad stuff "
    assert chunks[2].embedding == [1.0, 0.0]


def test_all_embeddings_fail(failing_embed, cookbook_text: str) -> None:
    store = DocumentStore(embed_fn=failing_embed)
    chunks = store.add_document("d", cookbook_text, "book.pdf")
    assert chunks and all(c.embedding is None for c in chunks)
    assert store.document_count() == 1


def test_no_embed_fn_stores_plain_chunks(cookbook_text: str) -> None:
    store = DocumentStore()
    store.add_document("d", cookbook_text, "book.pdf")
    assert all(c.embedding is None for c in store.all_chunks())


def test_readding_id_replaces_chunks() -> None:
    store = DocumentStore()
    store.add_document("d", "first version", "a.pdf")
    store.add_document("d", "second version", "b.pdf")
    assert store.document_count() == 1
    chunks = store.get_chunks("d")
    assert [c.content for c in chunks] == ["second version"]
    assert chunks[0].source == "b.pdf"


def test_all_chunks_union_in_insertion_order() -> None:
    store = DocumentStore()
    store.add_document("a", "alpha", "a.pdf")
    store.add_document("b", "beta", "b.pdf")
    assert [c.content for c in store.all_chunks()] == ["alpha", "beta"]
    assert store.get_chunks("missing") == ()


def test_chunks_are_immutable() -> None:
    store = DocumentStore()
    (chunk,) = store.add_document("d", "text", "a.pdf")
    with pytest.raises(ValidationError):
        chunk.embedding = [1.0]


def test_bad_chunk_config_rejected_at_construction() -> None:
    with pytest.raises(ChunkingConfigError):
        DocumentStore(chunk_size=100, overlap=100)
