# docscraper/extractor.py

from __future__ import annotations

import copy
import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional, Tuple

from bs4 import BeautifulSoup, Tag

from docscraper.text_processor import TextProcessingOptions, TextProcessor
from docscraper.types import DEFAULT_LANGUAGE, CodeBlock, DocumentMetadata, Section, utc_now

MAIN_CONTENT_SELECTOR = "main, article, .content, .documentation, .doc-content"

BOILERPLATE_SELECTOR = (
    ".navbar, .menu, .toc, script, style, nav, footer, header, .sidebar, .navigation"
)

CODE_BLOCK_SELECTOR = (
    'pre code, .highlight code, .code-block, pre[class*="language-"], code[class*="language-"]'
)

HEADING_TAGS = ["h1", "h2", "h3", "h4", "h5", "h6"]
_HEADING = re.compile(r"^h[1-6]$")

# Sibling tags whose text counts as section body
_BODY_TAGS = {"p", "li", "td", "pre"}
_CONTEXT_TAGS = {"p", "h3", "h4"}


@dataclass
class ExtractedContent:
    title: str = ""
    summary: str = ""
    full_text: str = ""
    sections: List[Section] = field(default_factory=list)
    code_blocks: List[CodeBlock] = field(default_factory=list)


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, "html.parser")


def strip_boilerplate(soup: BeautifulSoup) -> BeautifulSoup:
    """Remove navigation, chrome and script nodes in place."""
    for element in soup.select(BOILERPLATE_SELECTOR):
        element.decompose()
    return soup


def _text(element: Optional[Tag]) -> str:
    if element is None:
        return ""
    return element.get_text().strip()


def _meta(soup: BeautifulSoup, **attrs: str) -> Optional[str]:
    tag = soup.find("meta", attrs=attrs)
    if tag is None or tag.get("content") is None:
        return None
    return tag["content"].strip()


def _classes(element: Tag) -> List[str]:
    classes = element.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    return classes


def _is_heading(element: Tag) -> bool:
    return element.name in HEADING_TAGS


class ContentExtractor:
    """
    Turns a cleaned page tree into title, summary, full text, sections and
    code blocks. Works on any BeautifulSoup tree and never touches the network.
    """

    def __init__(self, text_processor: Optional[TextProcessor] = None) -> None:
        self.text_processor = text_processor or TextProcessor()
        # Full text keeps every character, only whitespace is tidied.
        self._whitespace = TextProcessor(TextProcessingOptions(remove_special_chars=False))

    def main_content(self, soup: BeautifulSoup) -> Optional[Tag]:
        return soup.select_one(MAIN_CONTENT_SELECTOR)

    def extract_title(self, soup: BeautifulSoup) -> str:
        return (
            _text(soup.find("h1"))
            or _text(soup.find("title"))
            or _meta(soup, property="og:title")
            or ""
        )

    def extract_summary(self, soup: BeautifulSoup, main: Optional[Tag]) -> str:
        paragraph = main.find("p") if main is not None else None
        return _text(paragraph) or _meta(soup, name="description") or ""

    def extract_sections(self, main: Optional[Tag]) -> List[Section]:
        if main is None:
            return []

        sections: List[Section] = []
        for heading in main.find_all(_HEADING):
            parts: List[str] = []
            for sibling in heading.find_next_siblings():
                if _is_heading(sibling):
                    break
                if self._is_body(sibling):
                    text = self._prose_text(sibling)
                    if text:
                        parts.append(text)

            title = self.text_processor.normalize(heading.get_text())
            content = self.text_processor.normalize("\n\n".join(parts))
            if title and content:
                sections.append(Section(heading=title, content=content, level=int(heading.name[1])))

        return sections

    def _is_body(self, element: Tag) -> bool:
        if element.name in _BODY_TAGS:
            return True
        return element.name == "div" and "code-block" not in _classes(element)

    def _prose_text(self, element: Tag) -> str:
        """Text of element with any nested code left out."""
        clone = copy.copy(element)
        for code in clone.find_all(["code", "pre"]):
            code.extract()
        return clone.get_text().strip()

    def extract_code_blocks(self, main: Optional[Tag]) -> List[CodeBlock]:
        if main is None:
            return []

        matches = main.select(CODE_BLOCK_SELECTOR)
        matched = {id(m) for m in matches}

        blocks: List[CodeBlock] = []
        for element in matches:
            # One block per sample: wrappers yield to the innermost match
            if any(id(d) in matched for d in element.find_all(True)):
                continue

            code = element.get_text().strip()
            if not code:
                continue

            context, filename = self._code_surroundings(element)
            blocks.append(
                CodeBlock(
                    code=code,
                    language=self._language(element),
                    context=context,
                    filename=filename,
                )
            )
        return blocks

    def _language(self, element: Tag) -> str:
        """First language-* class on the element, else on its enclosing pre."""
        candidates = [element]
        enclosing = element.find_parent("pre")
        if enclosing is not None:
            candidates.append(enclosing)

        for candidate in candidates:
            for cls in _classes(candidate):
                if cls.startswith("language-") and len(cls) > len("language-"):
                    return cls[len("language-"):]
        return DEFAULT_LANGUAGE

    def _code_surroundings(self, element: Tag) -> Tuple[Optional[str], Optional[str]]:
        container = element.parent
        previous = container.find_previous_sibling() if container is not None else None
        if previous is None:
            return None, None

        text = _text(previous) or None
        context = text if previous.name in _CONTEXT_TAGS else None
        is_filename = "filename" in _classes(previous) or previous.has_attr("data-filename")
        filename = text if is_filename else None
        return context, filename

    def extract_metadata(
        self, soup: BeautifulSoup, captured_at: Optional[datetime] = None
    ) -> DocumentMetadata:
        keywords = None
        raw_keywords = _meta(soup, name="keywords")
        if raw_keywords is not None:
            keywords = tuple(dict.fromkeys(k.strip() for k in raw_keywords.split(",") if k.strip()))

        return DocumentMetadata(
            last_updated=captured_at or utc_now(),
            description=_meta(soup, name="description"),
            keywords=keywords,
            author=_meta(soup, name="author"),
        )

    def extract(self, soup: BeautifulSoup) -> ExtractedContent:
        main = self.main_content(soup)
        full_text = self._whitespace.normalize(main.get_text()) if main is not None else ""

        return ExtractedContent(
            title=self.extract_title(soup),
            summary=self.extract_summary(soup, main),
            full_text=full_text,
            sections=self.extract_sections(main),
            code_blocks=self.extract_code_blocks(main),
        )
