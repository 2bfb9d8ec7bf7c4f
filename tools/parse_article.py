# tools/parse_article.py
import argparse
import json
import logging
from pathlib import Path

from article_parser.config import DEBUG_MODE, INPUT_FILE, OUTPUT_FILE, PREVIEW_CHARS
from article_parser.extractor import UndecodableDocumentError, parse_article

logger = logging.getLogger("article_parser.tools")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Extract title, date and text from a saved article page")
    parser.add_argument("source", nargs="?", default=INPUT_FILE, help="HTML file to read")
    parser.add_argument("--output", "-o", default=OUTPUT_FILE, help="Where to save the extracted text")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if (args.verbose or DEBUG_MODE) else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s:%(lineno)d - %(message)s",
    )

    p = Path(args.source)
    if not p.exists():
        print(f"{p} not found")
        return 1
    try:
        article = parse_article(p.read_bytes())
    except UndecodableDocumentError as e:
        print(f"Cannot read {p}: {e}")
        return 1

    if args.json:
        print(json.dumps(article.to_dict(), indent=2, ensure_ascii=False))
    else:
        print("=== TITLE ===\n")
        print(article.title or "(none)")
        print("\n=== DATE ===\n")
        print(article.date or "(none)")
        if article.content:
            print("\n=== CONTENT SNIPPET ===\n")
            print(article.content[:PREVIEW_CHARS])

    if not article.content:
        if args.json:
            logger.warning("Could not extract article content from %s", p)
        else:
            print("Could not extract article content")
        return 1

    out = Path(args.output)
    out.write_text(f"{article.title or ''}\n\n{article.content}", encoding="utf-8")
    logger.info("Saved to %s", out.resolve())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
