#!/usr/bin/env python3
"""Wikipedia TOC pipeline — article title to a nested HTML outline.

query + language → metadata API → TOC tree → nested <ol> → standalone HTML page.

Usage:
    uv run python scripts/wikitoc.py -q Python_(programming_language)
    uv run python scripts/wikitoc.py -q Tel_Aviv -l he
    uv run python scripts/wikitoc.py -q Berlin -l de -o output/berlin.html --log

Configuration:
    Edit scripts/configs/wikitoc.py (API timeout, RTL languages, error stacks)
    and scripts/configs/common.py (LANGUAGES, defaults).
"""

import argparse
import logging
import os
import re
import sys
from datetime import datetime
from pathlib import Path

# Add src/ to Python path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent / "src"))

from configs.common import (  # noqa: E402
    DEFAULT_LANGUAGE,
    LANGUAGES,
    OUTPUT_DIR,
    TeeLogger,
)
from configs.wikitoc import config  # noqa: E402

from outline import generate_outline  # noqa: E402
from shared.wiki_api import get_api_url  # noqa: E402

parser = argparse.ArgumentParser(description="Wikipedia TOC pipeline — article to HTML outline")
parser.add_argument("--query", "-q", default="", help="Article title, e.g. Python_(programming_language)")
parser.add_argument(
    "--language", "-l", default=DEFAULT_LANGUAGE,
    help=f"Wikipedia language code (default: {DEFAULT_LANGUAGE}; known: {', '.join(LANGUAGES)})",
)
parser.add_argument("--output", "-o", default=None, help="Output HTML file")
parser.add_argument(
    "--show-stack", action="store_true",
    help="Append the traceback to the rendered error block",
)
parser.add_argument("--log", action="store_true", help="Tee stdout to a run log next to the output")
args = parser.parse_args()

if args.show_stack:
    config.show_stack = True

safe_query = re.sub(r"[^\w.\-]", "_", args.query)[:80] or "empty"
output_path = args.output or os.path.join(
    OUTPUT_DIR, f"toc_{args.language}_{safe_query}.html"
)
os.makedirs(os.path.dirname(output_path) or ".", exist_ok=True)

if args.log:
    log_path = os.path.splitext(output_path)[0] + f"_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
    sys.stdout = TeeLogger(log_path)

logging.basicConfig(
    level=logging.WARNING,
    format="%(levelname)s %(name)s: %(message)s",
    stream=sys.stdout,
)

print("=" * 60)
print(f"Query: {args.query or '(empty)'}")
print(f"Language: {args.language} ({LANGUAGES.get(args.language, 'unlisted')})")
if args.query and args.language:
    print(f"API: {get_api_url(args.language, args.query, config.api)}")
print("=" * 60)
print("Loading...")

result = generate_outline(args.query, args.language, config)

with open(output_path, "w", encoding="utf-8") as f:
    f.write(result.html)

if result.ok:
    title = result.root.title or args.query
    print(f"\n{title}: {result.root.node_count()} entries ({result.direction})")
    for node in result.root.children:
        print(f"  {node.number or '-'} {node.anchor}")
    print(f"\nArticle: {result.article_url}")
    print(f"Saved to {output_path}")
else:
    print(f"\nERROR: {result.error}")
    print(f"Error page saved to {output_path}")
    sys.exit(1)
