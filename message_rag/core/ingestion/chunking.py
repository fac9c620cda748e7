"""
Sentence chunking for message ingestion.

Splits raw text into ordered, trimmed, non-empty fragments that are
embedded independently.

Dependencies: message_rag.core.ingestion.models
System role: First stage of the ingestion pipeline
"""

from abc import ABC, abstractmethod

from message_rag.core.ingestion.models import Fragment


class SentenceSplitter(ABC):
    """Strategy for breaking text into sentence-like fragments."""

    @abstractmethod
    def split(self, text: str) -> list[str]:
        """
        Split text into fragments.

        Implementations must return trimmed, non-empty strings in source order
        and must be pure (same input, same output).
        """


class PeriodSentenceSplitter(SentenceSplitter):
    """
    Split on every literal period.

    Abbreviations ("Dr."), decimals ("3.5") and ellipses are split too. That
    is the established behaviour for stored embeddings, so it is kept as is;
    swap in another SentenceSplitter for smarter boundaries.
    """

    delimiter = "."

    def split(self, text: str) -> list[str]:
        pieces = (piece.strip() for piece in text.strip().split(self.delimiter))
        return [piece for piece in pieces if piece]


_default_splitter = PeriodSentenceSplitter()


def chunk_text(text: str, splitter: SentenceSplitter | None = None) -> list[str]:
    """
    Chunk text into fragment strings.

    Args:
        text: Raw input, any length, may be blank
        splitter: Splitting strategy (period splitting by default)

    Returns:
        list[str]: Ordered fragments; empty for blank or punctuation-only input

    Usage:
        chunk_text("Hello world. This is great. ")  # ["Hello world", "This is great"]
    """
    return (splitter or _default_splitter).split(text)


def chunk_fragments(text: str, splitter: SentenceSplitter | None = None) -> list[Fragment]:
    """Chunk text into Fragment objects carrying their positional index."""
    return [
        Fragment(index=index, content=content)
        for index, content in enumerate(chunk_text(text, splitter))
    ]
