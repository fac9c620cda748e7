"""
Test suite for sentence chunking.

Covers the fixed scenarios plus the general fragment properties:
trimmed non-empty output, idempotence and the fragment count bound.
"""

import pytest

from message_rag.core.ingestion.chunking import (
    PeriodSentenceSplitter,
    SentenceSplitter,
    chunk_fragments,
    chunk_text,
)


class TestChunkTextScenarios:
    """Fixed input/output examples."""

    def test_splits_sentences_and_drops_trailing_blank(self) -> None:
        assert chunk_text("Hello world. This is great. ") == ["Hello world", "This is great"]

    def test_text_without_periods_is_single_fragment(self) -> None:
        assert chunk_text("No periods here") == ["No periods here"]

    def test_whitespace_only_yields_nothing(self) -> None:
        assert chunk_text("   ") == []

    def test_empty_middle_fragment_dropped(self) -> None:
        assert chunk_text("A..B") == ["A", "B"]

    def test_empty_string_yields_nothing(self) -> None:
        assert chunk_text("") == []

    def test_periods_only_yields_nothing(self) -> None:
        assert chunk_text(" . .. . ") == []

    def test_no_periods_returns_trimmed_input(self) -> None:
        assert chunk_text("  padded text \n") == ["padded text"]

    def test_abbreviations_and_decimals_are_split(self) -> None:
        assert chunk_text("Dr. Smith paid 3.50") == ["Dr", "Smith paid 3", "50"]


SAMPLES = [
    "Hello world. This is great. ",
    "No periods here",
    "   ",
    "A..B",
    " .leading. trailing .",
    "One.Two.Three",
    "line one.\nline two.\t",
    "....",
]


class TestChunkTextProperties:
    """Properties that hold for any input."""

    @pytest.mark.parametrize("text", SAMPLES)
    def test_fragments_are_trimmed_and_non_empty(self, text: str) -> None:
        for fragment in chunk_text(text):
            assert fragment
            assert fragment == fragment.strip()

    @pytest.mark.parametrize("text", SAMPLES)
    def test_chunking_is_idempotent(self, text: str) -> None:
        assert chunk_text(text) == chunk_text(text)

    @pytest.mark.parametrize("text", SAMPLES)
    def test_fragment_count_bounded_by_periods(self, text: str) -> None:
        assert 0 <= len(chunk_text(text)) <= text.count(".") + 1

    @pytest.mark.parametrize("text", SAMPLES)
    def test_rechunking_a_fragment_is_stable(self, text: str) -> None:
        for fragment in chunk_text(text):
            assert chunk_text(fragment) == [fragment]


class TestChunkFragments:
    """Fragment objects carry positional indexes."""

    def test_indexes_follow_source_order(self) -> None:
        fragments = chunk_fragments("First. Second. Third")

        assert [f.index for f in fragments] == [0, 1, 2]
        assert [f.content for f in fragments] == ["First", "Second", "Third"]

    def test_blank_input_has_no_fragments(self) -> None:
        assert chunk_fragments("  \n ") == []

    def test_custom_splitter_is_used(self) -> None:
        class LineSplitter(SentenceSplitter):
            def split(self, text: str) -> list[str]:
                return [line.strip() for line in text.splitlines() if line.strip()]

        fragments = chunk_fragments("a. b\nc", splitter=LineSplitter())

        assert [f.content for f in fragments] == ["a. b", "c"]

    def test_default_splitter_is_period_splitter(self) -> None:
        assert chunk_text("x. y") == PeriodSentenceSplitter().split("x. y")
