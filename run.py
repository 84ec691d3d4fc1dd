"""Generate recipes from a cookbook: ingest a PDF or text file, then ask for recipes. Install deps first: pip install -e ."""
import argparse
import json
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).resolve().parent
# Load .env first so OPENAI_API_KEY is set before any other code runs
load_dotenv(dotenv_path=str(ROOT / ".env"), encoding="utf-8")
sys.path.insert(0, str(ROOT))


def main() -> int:
    ap = argparse.ArgumentParser(description="Cookbook-grounded recipe generator")
    ap.add_argument("cookbook", type=Path, help="Cookbook PDF (or .txt/.md)")
    ap.add_argument("ingredients", nargs="*", help="Available ingredients")
    ap.add_argument("-n", "--num-recipes", type=int, default=3)
    args = ap.parse_args()

    from recipe_rag.errors import RecipeRAGError
    from recipe_rag.rag import RecipeService
    from recipe_rag.retrievers.ingest import load_text_file

    ingredients = args.ingredients
    if not ingredients:
        ingredients = [i.strip() for i in input("Enter ingredients (comma separated): ").split(",")]

    service = RecipeService.from_settings()
    try:
        print("Ingesting", args.cookbook, "...")
        if args.cookbook.suffix.lower() == ".pdf":
            ingested = service.upload_cookbook(args.cookbook.read_bytes(), args.cookbook.name)
        else:
            ingested = service.add_text_document(load_text_file(args.cookbook), args.cookbook.name)
        print(f"Document {ingested.document_id}: {ingested.chunk_count} chunks, {ingested.embedded_count} embedded")
        result = service.generate_recipes(ingredients, args.num_recipes, ingested.document_id)
    except (RecipeRAGError, OSError) as e:
        print("Error:", e)
        return 1

    if result.source == "fallback":
        print("(Model unavailable, showing templated recipes:", result.error, ")")
    print(json.dumps([r.model_dump(by_alias=True) for r in result.recipes], indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
