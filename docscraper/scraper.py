# docscraper/scraper.py

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional

from playwright.async_api import Browser, BrowserContext, Page, async_playwright

from docscraper.errors import InitializationError
from docscraper.logger import logger

DEFAULT_USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36"

# Resolved hrefs of every anchor on the live page
_ANCHOR_HREFS_JS = "anchors => anchors.map(a => a.href)"


@dataclass
class Viewport:
    width: int
    height: int
    device_scale_factor: Optional[int] = 1


@dataclass
class ScraperOptions:
    headless: bool = True
    navigation_timeout: int = 30000  # in milliseconds
    user_agent: str = DEFAULT_USER_AGENT
    viewport: Viewport = field(default_factory=lambda: Viewport(width=1920, height=1080, device_scale_factor=1))
    launch_args: List[str] = field(
        default_factory=lambda: [
            "--no-sandbox",
            "--disable-setuid-sandbox",
            "--disable-gpu",
            "--disable-dev-shm-usage",
        ]
    )


class Scraper:
    """
    Owns the Playwright driver and the Chromium browser. Every navigation
    gets its own page, every link check its own context.
    """

    def __init__(self, options: Optional[ScraperOptions] = None) -> None:
        self.options = options or ScraperOptions()
        self.browser: Optional[Browser] = None
        self.playwright = None

    @property
    def is_running(self) -> bool:
        return self.browser is not None

    async def start_browser(self) -> Browser:
        if self.browser:
            return self.browser

        try:
            self.playwright = await async_playwright().start()
            self.browser = await self.playwright.chromium.launch(
                headless=self.options.headless,
                args=self.options.launch_args,
            )
        except Exception as e:
            await self._stop_driver()
            raise InitializationError(f"Could not launch Chromium: {e}") from e

        logger.info('Browser started')
        return self.browser

    def _require_browser(self) -> Browser:
        if not self.browser:
            raise InitializationError("Browser not initialized")
        return self.browser

    def _viewport(self) -> dict:
        return {
            "width": self.options.viewport.width,
            "height": self.options.viewport.height,
        }

    async def new_page(self) -> Page:
        browser = self._require_browser()
        page = await browser.new_page(
            user_agent=self.options.user_agent,
            viewport=self._viewport(),
            device_scale_factor=self.options.viewport.device_scale_factor,
        )
        page.set_default_timeout(self.options.navigation_timeout)
        return page

    async def new_context(self) -> BrowserContext:
        browser = self._require_browser()
        context = await browser.new_context(
            user_agent=self.options.user_agent,
            viewport=self._viewport(),
        )
        context.set_default_timeout(self.options.navigation_timeout)
        return context

    async def collect_links(self, page: Page) -> List[str]:
        return await page.eval_on_selector_all("a[href]", _ANCHOR_HREFS_JS)

    async def _stop_driver(self) -> None:
        if self.playwright:
            await self.playwright.stop()
            self.playwright = None

    async def close_browser(self) -> None:
        if self.browser:
            await self.browser.close()
            self.browser = None
            logger.info('Browser closed')
        await self._stop_driver()

    async def __aenter__(self) -> Scraper:
        await self.start_browser()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close_browser()
