#!/usr/bin/env python
"""Run the ingestion pipeline on one source and print the result as JSON.

Usage:
    # Web article
    uv run python scripts/preview_ingestion.py --url https://example.com/post

    # Uploaded PDF (title comes from the filename)
    uv run python scripts/preview_ingestion.py --pdf ~/Downloads/paper.pdf

    # Pasted text from a file or stdin
    uv run python scripts/preview_ingestion.py --text notes.txt
    pbpaste | uv run python scripts/preview_ingestion.py --text -

    # Use trafilatura instead of the built-in readability heuristic
    uv run python scripts/preview_ingestion.py --url https://example.com --strategy trafilatura
"""

import argparse
import asyncio
import sys
from pathlib import Path

from pydantic import ValidationError

from reading_library_service.config import settings
from reading_library_service.extraction import ExtractionPipeline, IngestionError, PipelineConfig
from reading_library_service.logging_config import configure_logging
from reading_library_service.schemas import (
    FileIngestionRequest,
    IngestionRequest,
    TextIngestionRequest,
    UrlIngestionRequest,
)
from reading_library_service.services import to_ingestion_response


def build_request(args: argparse.Namespace) -> IngestionRequest:
    """Turn CLI arguments into a validated ingestion request."""
    if args.url:
        return UrlIngestionRequest(url=args.url)
    if args.pdf:
        path = Path(args.pdf).expanduser()
        return FileIngestionRequest(file_bytes=path.read_bytes(), file_name=path.name)

    text = sys.stdin.read() if args.text == "-" else Path(args.text).read_text(encoding="utf-8")
    return TextIngestionRequest(text=text)


async def run(args: argparse.Namespace) -> int:
    config = PipelineConfig.from_settings(settings)
    if args.strategy:
        config.scoring_strategy = args.strategy
    pipeline = ExtractionPipeline(config)

    try:
        request = build_request(args)
    except ValidationError as e:
        print(f"Invalid input: {e}", file=sys.stderr)
        return 2

    try:
        result = await pipeline.ingest(request.to_source())
    except IngestionError as e:
        print(f"{type(e).__name__}: {e}", file=sys.stderr)
        return 1

    response = to_ingestion_response(result)
    if args.no_content:
        response.content = f"<{len(response.content)} chars>"
    print(response.model_dump_json(indent=2))
    return 0


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Preview how a source would be ingested into the library",
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--url", help="Web page to capture")
    source.add_argument("--pdf", help="Path to a PDF file")
    source.add_argument("--text", help="Path to a text file, or - for stdin")
    parser.add_argument(
        "--strategy",
        choices=["readability", "trafilatura"],
        help="Content scoring strategy (default from settings)",
    )
    parser.add_argument(
        "--no-content",
        action="store_true",
        help="Print the content length instead of the content",
    )
    args = parser.parse_args()

    configure_logging(log_level=settings.log_level, json_logs=settings.json_logs)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
