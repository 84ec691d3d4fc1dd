"""Log search mode and generation outcome (JSONL) so degraded runs can be audited."""
import json
import logging
from datetime import datetime, timezone
from pathlib import Path

from recipe_rag.schema import GenerationResult, SearchResult

logger = logging.getLogger(__name__)

# Default log dir when none provided (use config.settings in callers)
_DEFAULT_LOG_DIR: Path | None = None


def set_default_log_dir(path: Path | None) -> None:
    global _DEFAULT_LOG_DIR
    _DEFAULT_LOG_DIR = path


def _append(log_dir: Path | None, filename: str, record: dict) -> None:
    """Append one JSON line. A log dir that cannot be written only produces a warning."""
    dir_path = log_dir or _DEFAULT_LOG_DIR
    if not dir_path:
        return
    dir_path = Path(dir_path)
    record["ts_utc"] = datetime.now(timezone.utc).isoformat()
    try:
        dir_path.mkdir(parents=True, exist_ok=True)
        with open(dir_path / filename, "a", encoding="utf-8") as f:
            f.write(json.dumps(record, ensure_ascii=False) + "\n")
    except OSError as e:
        logger.warning("Could not write %s in %s: %s", filename, dir_path, e)


def log_search_event(result: SearchResult, log_dir: Path | None = None) -> None:
    """Append one row to search_log.jsonl."""
    _append(log_dir, "search_log.jsonl", {
        "query": result.query,
        "mode": result.mode,
        "fallback_reason": result.fallback_reason,
        "num_chunks": len(result.chunks),
        "top_score": round(result.scores[0], 4) if result.scores else None,
        "latency_seconds": round(result.latency_seconds, 4),
    })


def log_generation_event(
    ingredients: list[str],
    count: int,
    document_id: str,
    result: GenerationResult,
    log_dir: Path | None = None,
) -> None:
    """Append one row to generation_log.jsonl."""
    _append(log_dir, "generation_log.jsonl", {
        "ingredients": ingredients,
        "count": count,
        "document_id": document_id,
        "source": result.source,
        "error": result.error,
        "search_mode": result.search_mode,
        "num_recipes": len(result.recipes),
        "latency_seconds": round(result.latency_seconds, 4),
    })
