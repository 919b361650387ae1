# docscraper/text_processor.py

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import List, Optional

# Anything that is not a word character, whitespace or . , ? ! -
_DISALLOWED_CHARS = re.compile(r"[^\w\s.,?!-]")
_HORIZONTAL_SPACE = re.compile(r"[^\S\n]+")
_NEWLINE_RUN = re.compile(r"\s*\n\s*")
_SENTENCE = re.compile(r"[^.!?]+(?:[.!?]+|\Z)")
_SENTENCE_END = re.compile(r"([.!?])\s+")
_BLANK_LINES = re.compile(r"\n{3,}")


@dataclass
class TextProcessingOptions:
    max_chunk_size: int = 2000
    remove_special_chars: bool = True
    preserve_newlines: bool = True


class TextProcessor:
    """
    Cleans scraped text before it is stored, and splits or reformats it
    for downstream consumers. Holds no state besides its options.
    """

    def __init__(self, options: Optional[TextProcessingOptions] = None) -> None:
        self.options = options or TextProcessingOptions()

    def normalize(self, text: str) -> str:
        """
        Collapse whitespace and, if enabled, drop characters outside the
        allow-list. normalize(normalize(x)) == normalize(x).
        """
        if self.options.remove_special_chars:
            text = _DISALLOWED_CHARS.sub("", text)

        text = _HORIZONTAL_SPACE.sub(" ", text)
        text = _NEWLINE_RUN.sub("\n" if self.options.preserve_newlines else " ", text)
        return text.strip()

    def sentences(self, text: str) -> List[str]:
        """
        Split text into sentences ending in . ! or ?. A trailing fragment
        without a terminator is returned as the last sentence.
        """
        return [s.strip() for s in _SENTENCE.findall(text) if s.strip()]

    def split_into_chunks(self, text: str) -> List[str]:
        """
        Pack whole sentences into chunks of at most max_chunk_size characters.
        A sentence longer than the limit becomes a chunk on its own.
        """
        limit = self.options.max_chunk_size
        chunks: List[str] = []
        current = ""

        for sentence in self.sentences(text):
            candidate = f"{current} {sentence}" if current else sentence
            if current and len(candidate) > limit:
                chunks.append(current)
                current = sentence
            else:
                current = candidate

        if current:
            chunks.append(current)

        return chunks

    def format_text(self, text: str) -> str:
        """Normalize, then put every sentence on its own line."""
        formatted = _SENTENCE_END.sub(r"\1\n", self.normalize(text))
        formatted = _BLANK_LINES.sub("\n\n", formatted)
        return formatted.strip()
