# docscraper/storage.py

from __future__ import annotations

import logging
import re
from dataclasses import asdict
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Union
from urllib.parse import urlparse

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from docscraper.types import (
    CodeBlock,
    DocumentMetadata,
    LinkStatus,
    ScrapedDocument,
    ScrapedSite,
    Section,
)

logger = logging.getLogger(__name__)

# -------------------------------------------------------------------------
# Pydantic models for the persisted JSON form (camelCase keys)
# -------------------------------------------------------------------------
class _JsonModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class SectionModel(_JsonModel):
    heading: str
    content: str
    level: int = Field(ge=1, le=6)
    subsections: List[SectionModel] = Field(default_factory=list)

    def to_section(self) -> Section:
        return Section(
            heading=self.heading,
            content=self.content,
            level=self.level,
            subsections=tuple(s.to_section() for s in self.subsections),
        )


class CodeBlockModel(_JsonModel):
    language: str
    code: str
    context: Optional[str] = None
    filename: Optional[str] = None


class LinkStatusModel(_JsonModel):
    url: str
    status: int
    active: bool
    error: Optional[str] = None


class MetadataModel(_JsonModel):
    description: Optional[str] = None
    last_updated: datetime
    keywords: Optional[List[str]] = None
    author: Optional[str] = None


class ScrapedDocumentModel(_JsonModel):
    url: str
    title: str
    summary: str
    full_text: str
    sections: List[SectionModel] = Field(default_factory=list)
    code_blocks: List[CodeBlockModel] = Field(default_factory=list)
    metadata: MetadataModel
    sublinks: Optional[List[LinkStatusModel]] = None

    def to_document(self) -> ScrapedDocument:
        keywords = self.metadata.keywords
        return ScrapedDocument(
            url=self.url,
            title=self.title,
            summary=self.summary,
            full_text=self.full_text,
            sections=tuple(s.to_section() for s in self.sections),
            code_blocks=tuple(CodeBlock(**c.model_dump()) for c in self.code_blocks),
            metadata=DocumentMetadata(
                last_updated=self.metadata.last_updated,
                description=self.metadata.description,
                keywords=tuple(keywords) if keywords is not None else None,
                author=self.metadata.author,
            ),
            sublinks=(
                tuple(LinkStatus(**s.model_dump()) for s in self.sublinks)
                if self.sublinks is not None
                else None
            ),
        )


class ScrapedSiteModel(_JsonModel):
    base_url: str
    pages: List[ScrapedDocumentModel] = Field(default_factory=list)
    last_updated: datetime

    @classmethod
    def from_site(cls, site: ScrapedSite) -> ScrapedSiteModel:
        return cls.model_validate(asdict(site))

    def to_site(self) -> ScrapedSite:
        return ScrapedSite(
            base_url=self.base_url,
            pages=tuple(p.to_document() for p in self.pages),
            last_updated=self.last_updated,
        )


# -------------------------------------------------------------------------
# File helpers
# -------------------------------------------------------------------------
def output_filename(base_url: str) -> str:
    hostname = urlparse(base_url).hostname or ""
    return f"{re.sub(r'[^a-z0-9]', '_', hostname, flags=re.IGNORECASE)}_full.json"


def output_path(base_url: str, output_dir: Union[str, Path]) -> Path:
    return Path(output_dir) / output_filename(base_url)


def dump_site(site: ScrapedSite) -> str:
    return ScrapedSiteModel.from_site(site).model_dump_json(by_alias=True, exclude_none=True, indent=2)


def save_site(site: ScrapedSite, output_dir: Union[str, Path]) -> Path:
    """Write the site to <output_dir>/<hostname>_full.json, creating the directory."""
    path = output_path(site.base_url, output_dir)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(dump_site(site), encoding="utf-8")
    logger.info(f"Saved all data to {path}")
    return path


def load_site(path: Union[str, Path]) -> ScrapedSite:
    raw = Path(path).read_text(encoding="utf-8")
    return ScrapedSiteModel.model_validate_json(raw).to_site()
