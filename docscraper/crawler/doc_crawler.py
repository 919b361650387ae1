# docscraper/crawler/doc_crawler.py

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Tuple

from playwright.async_api import Page, TimeoutError as PlaywrightTimeoutError

from docscraper.crawler.crawler import Crawler, is_fragment_url
from docscraper.errors import InitializationError, RenderTimeoutError
from docscraper.extractor import (
    MAIN_CONTENT_SELECTOR,
    ContentExtractor,
    parse_html,
    strip_boilerplate,
)
from docscraper.link_checker import LinkChecker
from docscraper.scraper import Scraper
from docscraper.storage import save_site
from docscraper.types import ScrapedDocument, ScrapedSite

logger = logging.getLogger(__name__)

# (url, depth) pairs still to be scraped
Frontier = List[Tuple[str, int]]


@dataclass
class CrawlerOptions:
    max_depth: int = 2
    check_sublinks: bool = True
    save_to_file: bool = True
    output_dir: str = "scraped-data"
    request_delay: float = 2.0  # seconds before each navigation
    settle_delay: float = 3.0  # seconds after main content shows up
    content_selector: str = MAIN_CONTENT_SELECTOR


@dataclass
class RenderedPage:
    html: str
    links: List[str]


class DocumentCrawler(Crawler):
    """
    Depth-bounded crawl of one documentation site. Scrapes each page into a
    ScrapedDocument, checks its same-domain sublinks and follows the ones
    not seen yet.
    """

    def __init__(
        self,
        scraper: Optional[Scraper] = None,
        extractor: Optional[ContentExtractor] = None,
        options: Optional[CrawlerOptions] = None,
        link_checker: Optional[LinkChecker] = None,
    ) -> None:
        self.options = options or CrawlerOptions()
        super().__init__(scraper or Scraper(), extractor or ContentExtractor(), self.options.max_depth)
        self.link_checker = link_checker or LinkChecker(self.scraper)

    async def initialize(self) -> None:
        await self.scraper.start_browser()

    async def close(self) -> None:
        await self.scraper.close_browser()
        self.reset()

    async def __aenter__(self) -> DocumentCrawler:
        await self.initialize()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()

    @property
    def navigation_timeout(self) -> int:
        return self.scraper.options.navigation_timeout

    def _wants_sublinks(self, depth: int) -> bool:
        return self.options.check_sublinks and depth < self.run.max_depth

    async def scrape_url(self, url: str, depth: int = 0) -> Optional[ScrapedDocument]:
        """
        Scrape url and everything reachable from it within the depth budget.
        Returns the document for url itself; pages found below it are only
        added to self.documents.
        """
        if not self.scraper.is_running:
            raise InitializationError("Browser not initialized")

        frontier: Frontier = []
        document = await self._visit(url, depth, frontier)

        while frontier:
            link, level = frontier.pop()
            await self._visit(link, level, frontier)

        return document

    async def _visit(self, url: str, depth: int, frontier: Frontier) -> Optional[ScrapedDocument]:
        if depth > 0 and is_fragment_url(url):
            logger.info(f"Skipping fragment URL: {url}")
            return None

        if not self.run.claim(url):
            logger.debug(f"Already visited {url}")
            return None

        await asyncio.sleep(self.options.request_delay)
        logger.info(f"Scraping {url} (depth: {depth})")

        try:
            document, links = await self._scrape_page(url, depth)
        except RenderTimeoutError as e:
            logger.warning(f"Skipping {url} - {e}")
            return None
        except Exception as e:
            logger.error(f"Error scraping {url}: {e}")
            return None

        if document is None:
            return None

        self.run.documents.append(document)

        # Reversed so the first link on the page is popped first
        for link in reversed(links):
            if link not in self.run.visited:
                frontier.append((link, depth + 1))

        return document

    async def _scrape_page(self, url: str, depth: int) -> Tuple[Optional[ScrapedDocument], List[str]]:
        rendered = await self._render(url, collect_links=self._wants_sublinks(depth))
        if rendered is None:
            return None, []

        soup = strip_boilerplate(parse_html(rendered.html))
        content = self.extractor.extract(soup)

        sublinks = None
        if self._wants_sublinks(depth):
            logger.info(f"Found {len(rendered.links)} sublinks on {url}")
            sublinks = tuple(await self.link_checker.check_all(rendered.links))

        document = ScrapedDocument(
            url=url,
            title=content.title,
            summary=content.summary,
            full_text=content.full_text,
            sections=tuple(content.sections),
            code_blocks=tuple(content.code_blocks),
            metadata=self.extractor.extract_metadata(soup),
            sublinks=sublinks,
        )
        return document, rendered.links

    async def _render(self, url: str, collect_links: bool) -> Optional[RenderedPage]:
        page = await self.scraper.new_page()
        try:
            response = await page.goto(url, wait_until="networkidle", timeout=self.navigation_timeout)
            if response is None or not response.ok:
                status = response.status if response is not None else None
                logger.warning(f"Skipping {url} - Status: {status}")
                return None

            await self._wait_for_content(page, url)
            await asyncio.sleep(self.options.settle_delay)

            html = await page.content()
            links: List[str] = []
            if collect_links:
                links = self._filter_links(await self.scraper.collect_links(page), url)
            return RenderedPage(html=html, links=links)
        finally:
            await page.close()

    async def _wait_for_content(self, page: Page, url: str) -> None:
        try:
            await page.wait_for_selector(
                self.options.content_selector,
                state="attached",
                timeout=self.navigation_timeout,
            )
        except PlaywrightTimeoutError as e:
            raise RenderTimeoutError(url, self.navigation_timeout) from e

    def save_to_file(self) -> Optional[Path]:
        """Write every document collected in this run to the output directory."""
        if not self.options.save_to_file:
            return None
        if self.run.base_url is None:
            logger.warning("Nothing was scraped, skipping save")
            return None

        site = ScrapedSite(base_url=self.run.base_url, pages=tuple(self.run.documents))
        try:
            return save_site(site, self.options.output_dir)
        except OSError as e:
            logger.error(f"Error saving to file: {e}")
            return None
