"""CLI command that segments newsletter PDFs and prints the result as JSON."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path

from dotenv import load_dotenv

from bulletin.config import EngineSettings
from bulletin.engine import extract
from bulletin.ingestion import DocumentLoadError, load_pdf_pages, looks_like_pdf
from bulletin.tags import suggest_tags

logger = logging.getLogger(__name__)


def _collect_inputs(target: Path) -> list[Path]:
    if target.is_file():
        return [target]
    if target.is_dir():
        return sorted(path for path in target.rglob("*") if path.is_file() and looks_like_pdf(path))
    return []


def _summarize(path: Path, settings: EngineSettings, *, include_text: bool, include_tags: bool) -> dict[str, object]:
    loaded = load_pdf_pages(path)
    result = extract(loaded.pages, profile=settings.scoring_profile())

    payload = result.to_dict()
    payload.pop("pages")
    if not include_text:
        payload.pop("cleaned_text")
        payload.pop("structured_text")

    summary: dict[str, object] = {
        "source_path": str(path),
        "title": loaded.info.title,
        "date": loaded.info.date,
        "author": loaded.info.author,
        "keywords": loaded.info.keywords,
        "page_count": loaded.info.page_count,
        **payload,
    }
    if include_tags:
        suggestion = suggest_tags(
            result,
            max_tags=settings.max_suggested_tags,
            max_topics=settings.max_suggested_topics,
        )
        summary["tags"] = {
            "suggested_tags": suggestion.suggested_tags,
            "topics": suggestion.topics,
            "key_terms": suggestion.key_terms,
            "keyword_counts": suggestion.keyword_counts,
        }
    return summary


def main(argv: list[str] | None = None) -> int:
    load_dotenv()

    parser = argparse.ArgumentParser(description="Segment newsletter PDFs into ranked articles")
    parser.add_argument("--path", required=True, help="Source PDF file or directory")
    parser.add_argument("--include-text", action="store_true", help="Include cleaned and structured text")
    parser.add_argument("--tags", action="store_true", help="Include tag and keyword suggestions")
    args = parser.parse_args(argv)

    settings = EngineSettings.from_env()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level_value,
    )

    source_path = Path(args.path)
    results: list[dict[str, object]] = []
    errors: list[dict[str, str]] = []

    for file_path in _collect_inputs(source_path):
        try:
            results.append(
                _summarize(file_path, settings, include_text=args.include_text, include_tags=args.tags)
            )
        except DocumentLoadError as exc:
            logger.error("Extraction failed for %s: %s", file_path.name, exc)
            errors.append({"source_path": str(file_path), "error": str(exc)})

    payload = {
        "path": str(source_path),
        "processed": len(results),
        "results": results,
        "errors": errors,
    }
    print(json.dumps(payload, ensure_ascii=True, indent=2))
    return 0 if not errors else 1


if __name__ == "__main__":
    raise SystemExit(main())
