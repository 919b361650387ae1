"""
Crawl a documentation site and extract headings, prose, code samples and
link health from every page.
"""
from docscraper.crawler.doc_crawler import CrawlerOptions, DocumentCrawler
from docscraper.errors import DocScraperError, InitializationError, RenderTimeoutError
from docscraper.extractor import ContentExtractor
from docscraper.link_checker import LinkChecker
from docscraper.logger import setup_logger
from docscraper.scraper import Scraper, ScraperOptions, Viewport
from docscraper.text_processor import TextProcessingOptions, TextProcessor
from docscraper.types import (
    CodeBlock,
    DocumentMetadata,
    LinkStatus,
    ScrapedDocument,
    ScrapedSite,
    Section,
)

__version__ = "0.1.0"
__all__ = [
    "CodeBlock",
    "ContentExtractor",
    "CrawlerOptions",
    "DocScraperError",
    "DocumentCrawler",
    "DocumentMetadata",
    "InitializationError",
    "LinkChecker",
    "LinkStatus",
    "RenderTimeoutError",
    "ScrapedDocument",
    "ScrapedSite",
    "Scraper",
    "ScraperOptions",
    "Section",
    "TextProcessingOptions",
    "TextProcessor",
    "setup_logger",
    "Viewport",
]
