"""Inspect retrieval for a cookbook without calling the chat model.
Usage:
  python scripts/search_cookbook.py data/raw/cookbook.pdf "chicken rice" -k 8
  Prints which search path ran (ranked or keyword) and the top chunks.
  Set EMBEDDING_BACKEND=none to see the keyword fallback.
"""
import argparse
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(ROOT))

from config.settings import CHUNK_OVERLAP, CHUNK_SIZE, LOG_DIR
from recipe_rag.embeddings import default_embed_fn
from recipe_rag.logging import log_search_event
from recipe_rag.retrievers import DocumentStore, SimilarityRetriever
from recipe_rag.retrievers.ingest import extract_pdf_text, load_text_file


def main() -> None:
    ap = argparse.ArgumentParser(description="Search a cookbook")
    ap.add_argument("cookbook", type=Path)
    ap.add_argument("query")
    ap.add_argument("-k", "--top-k", type=int, default=8)
    args = ap.parse_args()

    if args.cookbook.suffix.lower() == ".pdf":
        text = extract_pdf_text(args.cookbook.read_bytes()).text
    else:
        text = load_text_file(args.cookbook)
    if not text.strip():
        print("No text extracted from", args.cookbook)
        sys.exit(1)

    store = DocumentStore(embed_fn=default_embed_fn(), chunk_size=CHUNK_SIZE, overlap=CHUNK_OVERLAP)
    store.add_document("cli", text, args.cookbook.name)
    result = SimilarityRetriever(store).retrieve(args.query, top_k=args.top_k)
    log_search_event(result, LOG_DIR)

    print(f"Mode: {result.mode}" + (f" ({result.fallback_reason})" if result.fallback_reason else ""))
    for i, chunk in enumerate(result.chunks):
        score = f"{result.scores[i]:.3f}" if result.scores else "-"
        preview = chunk.content[:120].replace("\n", " ")
        print(f"[{chunk.chunk_index}] {score} {preview}")


if __name__ == "__main__":
    main()
