from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Set
from urllib.parse import urlparse

from docscraper.scraper import Scraper
from docscraper.extractor import ContentExtractor
from docscraper.types import ScrapedDocument


@dataclass
class CrawlRun:
    """Visited set and collected documents for one crawl."""
    max_depth: int
    visited: Set[str] = field(default_factory=set)
    documents: List[ScrapedDocument] = field(default_factory=list)
    base_url: Optional[str] = None

    def claim(self, url: str) -> bool:
        """
        Mark url as visited. Returns False if it already was.
        Never awaits, so two discoveries of the same URL can't both win.
        """
        if url in self.visited:
            return False
        self.visited.add(url)
        if self.base_url is None:
            self.base_url = url
        return True


def hostname(url: str) -> Optional[str]:
    try:
        return urlparse(url).hostname
    except ValueError:
        return None


def is_same_domain(url: str, other: str) -> bool:
    host = hostname(url)
    return host is not None and host == hostname(other)


def is_fragment_url(url: str) -> bool:
    return "#" in url


def is_valid_url(url: str) -> bool:
    try:
        parsed = urlparse(url)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class Crawler(ABC):
    def __init__(self, scraper: Scraper, extractor: ContentExtractor, max_depth: int) -> None:
        self.scraper = scraper
        self.extractor = extractor
        self.run = CrawlRun(max_depth=max_depth)

    @property
    def visited_urls(self) -> Set[str]:
        return self.run.visited

    @property
    def documents(self) -> List[ScrapedDocument]:
        return self.run.documents

    def reset(self) -> None:
        self.run = CrawlRun(max_depth=self.run.max_depth)

    def _filter_links(self, links: Iterable[str], base_url: str) -> List[str]:
        """Valid http(s) links on the same hostname as base_url, first occurrence kept."""
        kept = [
            link for link in links
            if link and is_valid_url(link) and is_same_domain(link, base_url)
        ]
        return list(dict.fromkeys(kept))

    @abstractmethod
    async def scrape_url(self, url: str, depth: int = 0) -> Optional[ScrapedDocument]:
        ...
