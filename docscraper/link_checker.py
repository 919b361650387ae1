# docscraper/link_checker.py

from __future__ import annotations

import asyncio
import logging
from typing import Iterable, List, Optional

from playwright.async_api import BrowserContext

from docscraper.scraper import Scraper
from docscraper.types import LinkStatus

logger = logging.getLogger(__name__)

# Status recorded when navigation finishes without a main-frame response
MISSING_RESPONSE_STATUS = 404


class LinkChecker:
    """Reports whether sublinks respond, without extracting or following them."""

    def __init__(self, scraper: Scraper) -> None:
        self.scraper = scraper

    async def check(self, url: str) -> LinkStatus:
        context: Optional[BrowserContext] = None
        try:
            context = await self.scraper.new_context()
            page = await context.new_page()
            response = await page.goto(
                url,
                wait_until="networkidle",
                timeout=self.scraper.options.navigation_timeout,
            )
            status = response.status if response is not None else MISSING_RESPONSE_STATUS
            return LinkStatus.from_status(url, status)
        except Exception as e:
            logger.debug(f"Link check failed for {url}: {e}")
            return LinkStatus.failure(url, str(e))
        finally:
            if context is not None:
                await context.close()

    async def check_all(self, urls: Iterable[str]) -> List[LinkStatus]:
        """Check every URL concurrently; results keep the input order."""
        return list(await asyncio.gather(*(self.check(url) for url in urls)))
