"""Load settings from env and config files."""
import os
from pathlib import Path

import yaml
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
# Always load .env from project root so OPENAI_API_KEY is found no matter where you run from
load_dotenv(dotenv_path=str(PROJECT_ROOT / ".env"), encoding="utf-8")

with open(Path(__file__).resolve().parent / "defaults.yaml", encoding="utf-8") as _f:
    DEFAULTS = yaml.safe_load(_f)

LOG_DIR = Path(os.getenv("LOG_DIR", str(PROJECT_ROOT / "data" / "processed" / "logs")))

OPENAI_API_KEY = (os.getenv("OPENAI_API_KEY") or "").strip()
AI_MODEL = os.getenv("AI_MODEL", DEFAULTS["generation"]["model"])
AI_TEMPERATURE = float(os.getenv("AI_TEMPERATURE", DEFAULTS["generation"]["temperature"]))
MAX_RECIPES = int(os.getenv("MAX_RECIPES", DEFAULTS["generation"]["max_recipes"]))

EMBEDDING_BACKEND = os.getenv("EMBEDDING_BACKEND", DEFAULTS["embedding"]["backend"]).strip().lower()
# Model name for whichever backend is selected
EMBEDDING_MODEL = os.getenv(
    "EMBEDDING_MODEL",
    DEFAULTS["embedding"]["sentence_transformers_model"]
    if EMBEDDING_BACKEND == "sentence_transformers"
    else DEFAULTS["embedding"]["openai_model"],
)

CHUNK_SIZE = int(os.getenv("CHUNK_SIZE", DEFAULTS["chunking"]["chunk_size"]))
CHUNK_OVERLAP = int(os.getenv("CHUNK_OVERLAP", DEFAULTS["chunking"]["overlap"]))
SEARCH_TOP_K = int(os.getenv("SEARCH_TOP_K", DEFAULTS["search"]["top_k"]))
MAX_UPLOAD_BYTES = int(os.getenv("MAX_UPLOAD_BYTES", DEFAULTS["upload"]["max_bytes"]))
