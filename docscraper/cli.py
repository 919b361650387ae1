# docscraper/cli.py

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import List, Optional

from docscraper.crawler.doc_crawler import CrawlerOptions, DocumentCrawler
from docscraper.logger import logger, setup_logger
from docscraper.scraper import Scraper, ScraperOptions
from docscraper.types import ScrapedDocument


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docscraper",
        description="Crawl a documentation site and save its structured content as JSON.",
    )
    parser.add_argument("url", nargs="?", help="Seed URL (e.g. https://docs.example.com)")
    parser.add_argument("--max-depth", type=int, default=3, help="Maximum link depth to follow (default: 3)")
    parser.add_argument("--timeout", type=int, default=60000, help="Per-operation timeout in ms (default: 60000)")
    parser.add_argument("--output-dir", default="scraped-data", help="Directory for the JSON output")
    parser.add_argument("--no-sublinks", action="store_true", help="Do not check or follow sublinks")
    parser.add_argument("--no-save", action="store_true", help="Do not write the JSON output")
    parser.add_argument("--headful", action="store_true", help="Show the browser window")
    parser.add_argument("--verbose", action="store_true", help="Debug logging")
    return parser


def print_summary(document: ScrapedDocument, saved_to: Optional[Path]) -> None:
    print("\nScraping completed!")
    print(f"Title: {document.title}")
    print(f"Summary: {document.summary}")
    print(f"Sections: {len(document.sections)}")
    print(f"Code blocks: {len(document.code_blocks)}")

    if document.sublinks:
        print("\nSublink Status Summary:")
        print(f"Active links: {document.active_sublinks}/{len(document.sublinks)}")

    if saved_to is not None:
        print(f"\nSaved to {saved_to}")


async def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.url:
        sys.stderr.write("Please provide a URL as an argument\n")
        parser.print_usage(sys.stderr)
        return 1

    if args.verbose:
        setup_logger(level=logging.DEBUG)

    crawler = DocumentCrawler(
        scraper=Scraper(ScraperOptions(headless=not args.headful, navigation_timeout=args.timeout)),
        options=CrawlerOptions(
            max_depth=args.max_depth,
            check_sublinks=not args.no_sublinks,
            save_to_file=not args.no_save,
            output_dir=args.output_dir,
        ),
    )

    try:
        logger.info("Initializing scraper...")
        await crawler.initialize()

        logger.info(f"Starting scrape of: {args.url}")
        document = await crawler.scrape_url(args.url)
        saved_to = crawler.save_to_file()

        if document:
            print_summary(document, saved_to)
        else:
            logger.error("Failed to scrape the initial URL")
    except Exception as e:
        logger.error(f"Error during scraping: {e}")
        return 1
    finally:
        await crawler.close()

    return 0


def run() -> None:
    raise SystemExit(asyncio.run(main()))


if __name__ == "__main__":
    run()
