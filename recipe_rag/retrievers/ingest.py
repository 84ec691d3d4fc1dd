"""Load cookbook text from PDF bytes or text files."""
from __future__ import annotations

import io
import secrets
import string
import time
from pathlib import Path

from pydantic import BaseModel
from pypdf import PdfReader

from recipe_rag.errors import PDFExtractionError

PDF_MAGIC = b"%PDF"
_ID_ALPHABET = string.ascii_lowercase + string.digits


class ExtractedText(BaseModel):
    """Text pulled from an uploaded cookbook."""
    text: str
    page_count: int


def is_pdf(data: bytes) -> bool:
    return data[:1024].lstrip().startswith(PDF_MAGIC)


def extract_pdf_text(data: bytes) -> ExtractedText:
    """Extract page text with pypdf, pages joined by blank lines. Raises PDFExtractionError."""
    try:
        reader = PdfReader(io.BytesIO(data))
        parts = []
        for page in reader.pages:
            page_text = page.extract_text()
            if page_text:
                parts.append(page_text)
        return ExtractedText(text="\n\n".join(parts), page_count=len(reader.pages))
    except Exception as e:
        raise PDFExtractionError(f"Failed to extract text from PDF: {e}") from e


def load_text_file(path: Path | str) -> str:
    """Read a plain-text or markdown cookbook."""
    with open(path, encoding="utf-8", errors="replace") as f:
        return f.read()


def new_document_id() -> str:
    """e.g. doc_1760000000000_k3j9x0abq"""
    suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(9))
    return f"doc_{int(time.time() * 1000)}_{suffix}"
