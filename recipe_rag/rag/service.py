"""Caller-facing service: validates requests, ingests cookbooks, generates recipes."""
from __future__ import annotations

from pathlib import Path

from recipe_rag.errors import InvalidInputError
from recipe_rag.retrievers import DocumentStore, SimilarityRetriever
from recipe_rag.retrievers.ingest import extract_pdf_text, is_pdf, new_document_id
from recipe_rag.schema import GenerationResult, IngestResult
from .pipeline import RecipePipeline


class RecipeService:
    """
    Owns one DocumentStore for the process lifetime and the pipeline on top of it.

    Validation errors raise InvalidInputError before any retrieval or model call.
    """

    def __init__(
        self,
        store: DocumentStore,
        pipeline: RecipePipeline,
        max_upload_bytes: int | None = None,
        max_recipes: int | None = None,
    ) -> None:
        from config.settings import MAX_RECIPES, MAX_UPLOAD_BYTES

        self.store = store
        self.pipeline = pipeline
        # Limits default to config/defaults.yaml (env overrides)
        self.max_upload_bytes = max_upload_bytes if max_upload_bytes is not None else MAX_UPLOAD_BYTES
        self.max_recipes = max_recipes if max_recipes is not None else MAX_RECIPES

    @classmethod
    def from_settings(cls, log_dir: Path | str | None = None) -> "RecipeService":
        """Wire store, retriever and pipeline from config.settings."""
        from config import settings
        from recipe_rag.embeddings import default_embed_fn

        store = DocumentStore(
            embed_fn=default_embed_fn(),
            chunk_size=settings.CHUNK_SIZE,
            overlap=settings.CHUNK_OVERLAP,
        )
        pipeline = RecipePipeline(
            SimilarityRetriever(store),
            top_k=settings.SEARCH_TOP_K,
            log_dir=log_dir or settings.LOG_DIR,
        )
        return cls(store, pipeline, settings.MAX_UPLOAD_BYTES, settings.MAX_RECIPES)

    def add_text_document(self, text: str, source: str, document_id: str | None = None) -> IngestResult:
        if not text or not text.strip():
            raise InvalidInputError("Cookbook appears to be empty or could not be parsed")
        document_id = document_id or new_document_id()
        chunks = self.store.add_document(document_id, text, source)
        return IngestResult(
            document_id=document_id,
            source=source,
            chunk_count=len(chunks),
            embedded_count=sum(1 for c in chunks if c.embedding is not None),
        )

    def upload_cookbook(self, data: bytes, filename: str) -> IngestResult:
        """Extract text from a PDF upload and add it under a fresh document id."""
        if not data:
            raise InvalidInputError("No PDF file uploaded")
        if len(data) > self.max_upload_bytes:
            raise InvalidInputError(f"PDF exceeds the {self.max_upload_bytes} byte upload limit")
        if not is_pdf(data):
            raise InvalidInputError("Only PDF files are allowed")
        extracted = extract_pdf_text(data)
        result = self.add_text_document(extracted.text, filename)
        result.pages_processed = extracted.page_count
        return result

    def validate_request(self, ingredients: list[str], count: int, document_id: str) -> list[str]:
        """Return cleaned ingredients or raise InvalidInputError."""
        cleaned = [i.strip() for i in ingredients or [] if i and i.strip()]
        if not cleaned:
            raise InvalidInputError("Please provide at least one ingredient")
        if isinstance(count, bool) or not isinstance(count, int) or not 1 <= count <= self.max_recipes:
            raise InvalidInputError(f"Number of recipes must be between 1 and {self.max_recipes}")
        if not document_id:
            raise InvalidInputError("Document ID is required. Please upload a recipe book first.")
        if not self.store.has_document(document_id):
            raise InvalidInputError("Document not found. Please upload a recipe book first.")
        return cleaned

    def generate_recipes(self, ingredients: list[str], count: int, document_id: str) -> GenerationResult:
        cleaned = self.validate_request(ingredients, count, document_id)
        return self.pipeline.generate(cleaned, count, document_id)
