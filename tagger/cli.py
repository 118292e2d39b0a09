"""Command-line interface for tag suggestion."""

import argparse
import json
import logging
import sys
from typing import List, Optional

__all__ = ["main", "parse_args"]

from tagger.config import LOG_LEVEL, OLLAMA_MODEL, OLLAMA_TIMEOUT, OLLAMA_URL
from tagger.fallback import fallback_tags
from tagger.logging_config import setup_logging
from tagger.model_client import OllamaClient
from tagger.models import SOURCE_FALLBACK, TagSuggestion
from tagger.suggester import TagSuggester


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Suggest keyword tags for a product using a local model, with a heuristic fallback",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Ask the default model (OLLAMA_URL / OLLAMA_MODEL)
  python -m tagger.cli "Bluetooth Speaker" "A wireless portable speaker"

  # Use another model with a short timeout
  python -m tagger.cli "Trail Shoes" "Grippy outdoor running shoes" --model llama3 --timeout 5

  # Skip the model entirely
  python -m tagger.cli "Desk Lamp" "LED lamp for the home office" --fallback-only

  # Machine-readable output
  python -m tagger.cli "Desk Lamp" "LED lamp for the home office" --json
        """,
    )

    parser.add_argument("name", help="Product name")
    parser.add_argument("description", help="Product description")

    # Model options
    parser.add_argument(
        "--model",
        default=OLLAMA_MODEL,
        help=f"Model identifier (default: {OLLAMA_MODEL})",
    )
    parser.add_argument(
        "--base-url",
        default=OLLAMA_URL,
        help=f"Model endpoint base URL (default: {OLLAMA_URL})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=OLLAMA_TIMEOUT,
        help=f"Seconds to wait for the model (default: {OLLAMA_TIMEOUT:g})",
    )
    parser.add_argument(
        "--fallback-only",
        action="store_true",
        help="Don't call the model, use keyword heuristics only",
    )

    # Output options
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log model requests and responses",
    )
    parser.add_argument(
        "--log-file",
        action="store_true",
        help="Also write JSONL logs to the logs/ directory",
    )

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)

    level = logging.DEBUG if args.verbose else getattr(logging, LOG_LEVEL, logging.INFO)
    setup_logging(level=level, log_to_file=args.log_file)

    if args.fallback_only:
        result = TagSuggestion(
            tags=fallback_tags(args.name, args.description),
            source=SOURCE_FALLBACK,
        )
    else:
        client = OllamaClient(base_url=args.base_url, timeout=args.timeout)
        result = TagSuggester(client=client, model=args.model).suggest(args.name, args.description)

    if args.json:
        print(json.dumps(result.to_dict(), ensure_ascii=False))
    else:
        for tag in result.tags:
            print(tag)

    return 0


if __name__ == "__main__":
    sys.exit(main())
