# docscraper/types.py

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional, Tuple

DEFAULT_LANGUAGE = "text"


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Section:
    heading: str
    content: str
    level: int
    # Always empty for now; sections are extracted as a flat sequence.
    subsections: Tuple[Section, ...] = ()


@dataclass(frozen=True)
class CodeBlock:
    code: str
    language: str = DEFAULT_LANGUAGE
    context: Optional[str] = None
    filename: Optional[str] = None


@dataclass(frozen=True)
class LinkStatus:
    """Health-check result for one discovered sublink."""
    url: str
    status: int
    active: bool
    error: Optional[str] = None

    @classmethod
    def from_status(cls, url: str, status: int) -> LinkStatus:
        return cls(url=url, status=status, active=200 <= status < 400)

    @classmethod
    def failure(cls, url: str, error: str) -> LinkStatus:
        """A check that broke down before any HTTP status was received."""
        return cls(url=url, status=0, active=False, error=error)


@dataclass(frozen=True)
class DocumentMetadata:
    last_updated: datetime = field(default_factory=utc_now)
    description: Optional[str] = None
    keywords: Optional[Tuple[str, ...]] = None
    author: Optional[str] = None


@dataclass(frozen=True)
class ScrapedDocument:
    """One crawled page, keyed by its source URL."""
    url: str
    title: str
    summary: str
    full_text: str
    sections: Tuple[Section, ...] = ()
    code_blocks: Tuple[CodeBlock, ...] = ()
    metadata: DocumentMetadata = field(default_factory=DocumentMetadata)
    sublinks: Optional[Tuple[LinkStatus, ...]] = None

    @property
    def active_sublinks(self) -> int:
        return sum(1 for link in self.sublinks or () if link.active)


@dataclass(frozen=True)
class ScrapedSite:
    base_url: str
    pages: Tuple[ScrapedDocument, ...] = ()
    last_updated: datetime = field(default_factory=utc_now)
