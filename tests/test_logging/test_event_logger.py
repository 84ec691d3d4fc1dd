"""Test JSONL event logs."""
import json
import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent.parent
sys.path.insert(0, str(ROOT))

from recipe_rag.logging import log_generation_event, log_search_event, set_default_log_dir
from recipe_rag.rag.recipes import fallback_recipes
from recipe_rag.schema import Chunk, GenerationResult, SearchResult


def _search_result() -> SearchResult:
    chunk = Chunk(content="rice", document_id="d", chunk_index=0, source="b.pdf")
    return SearchResult(query="rice", mode="ranked", chunks=[chunk], scores=[0.87654], latency_seconds=0.01)


def test_log_search_event(tmp_path: Path) -> None:
    log_search_event(_search_result(), tmp_path / "logs")
    rows = (tmp_path / "logs" / "search_log.jsonl").read_text(encoding="utf-8").splitlines()
    assert len(rows) == 1
    row = json.loads(rows[0])
    assert row["mode"] == "ranked" and row["num_chunks"] == 1
    assert row["top_score"] == 0.8765
    assert "ts_utc" in row


def test_log_generation_event_appends(tmp_path: Path) -> None:
    result = GenerationResult(recipes=fallback_recipes(["egg"], 2), source="fallback", error="boom")
    log_generation_event(["egg"], 2, "d", result, tmp_path)
    log_generation_event(["egg"], 2, "d", result, tmp_path)
    rows = [json.loads(r) for r in (tmp_path / "generation_log.jsonl").read_text(encoding="utf-8").splitlines()]
    assert len(rows) == 2
    assert rows[0]["source"] == "fallback" and rows[0]["error"] == "boom" and rows[0]["num_recipes"] == 2


def test_no_log_dir_is_noop(tmp_path: Path) -> None:
    set_default_log_dir(None)
    log_search_event(_search_result())
    assert list(tmp_path.iterdir()) == []


def test_default_log_dir(tmp_path: Path) -> None:
    set_default_log_dir(tmp_path)
    try:
        log_search_event(_search_result())
    finally:
        set_default_log_dir(None)
    assert (tmp_path / "search_log.jsonl").exists()


def test_unwritable_log_dir_only_warns(tmp_path: Path, caplog) -> None:
    not_a_dir = tmp_path / "not_a_dir"
    not_a_dir.write_text("", encoding="utf-8")
    with caplog.at_level(logging.WARNING):
        log_search_event(_search_result(), not_a_dir)
    assert "search_log.jsonl" in caplog.text
    assert not_a_dir.read_text(encoding="utf-8") == ""
