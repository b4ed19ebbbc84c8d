"""Tests for word counting, chunking and size limits."""

import sys
from pathlib import Path

import pytest

# Add package root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from humanizex.utils import chunk_text, count_words, format_time, limit_text, truncate_text


class TestCountWords:
    """Tests for count_words."""

    def test_simple_sentence(self):
        assert count_words("The cat sat on the mat.") == 6

    def test_empty_text(self):
        assert count_words("") == 0

    def test_whitespace_only(self):
        assert count_words("   \n\t  ") == 0

    def test_irregular_whitespace(self):
        """Runs of mixed whitespace separate words once."""
        assert count_words("  one\t\ttwo \n three  ") == 3


class TestChunkText:
    """Tests for chunk_text."""

    def test_example_split(self):
        assert chunk_text("a b c d e", max_words=2) == ["a b", "c d", "e"]

    def test_short_text_returned_unchanged(self):
        """Text under the limit keeps its original whitespace."""
        text = "  Hello,\n\n  world!  "
        assert chunk_text(text, max_words=10) == [text]

    def test_exact_limit_is_single_chunk(self):
        text = "one two three"
        assert chunk_text(text, max_words=3) == [text]

    def test_empty_text_is_single_chunk(self):
        assert chunk_text("", max_words=5) == [""]

    def test_split_normalizes_whitespace(self):
        text = "a\n\nb\tc   d e"
        assert chunk_text(text, max_words=2) == ["a b", "c d", "e"]

    def test_coverage_and_sizes(self):
        """Chunks reproduce the word sequence and all but the last are full."""
        words = [f"w{i}" for i in range(103)]
        text = "  ".join(words)

        chunks = chunk_text(text, max_words=10)

        rejoined = [w for chunk in chunks for w in chunk.split()]
        assert rejoined == words
        assert all(count_words(c) == 10 for c in chunks[:-1])
        assert count_words(chunks[-1]) == 3
        assert len(chunks) == 11

    def test_invalid_limit(self):
        with pytest.raises(ValueError):
            chunk_text("a b c", max_words=0)


class TestLimitText:
    """Tests for limit_text."""

    def test_within_limits(self):
        text = "short text here"
        assert limit_text(text, max_words=10, max_chars=100) == (text, False)

    def test_word_limit(self):
        text = "one  two three four"
        limited, truncated = limit_text(text, max_words=2, max_chars=100)
        assert limited == "one two"
        assert truncated is True

    def test_char_limit(self):
        limited, truncated = limit_text("abcdefghij", max_words=10, max_chars=4)
        assert limited == "abcd"
        assert truncated is True

    def test_char_limit_applied_before_word_limit(self):
        limited, truncated = limit_text("aa bb cc dd", max_words=1, max_chars=5)
        assert limited == "aa"
        assert truncated is True


class TestFormatting:
    """Tests for small formatting helpers."""

    def test_truncate_text(self):
        assert truncate_text("abcdefghij", max_length=6) == "abc..."
        assert truncate_text("abc", max_length=6) == "abc"

    def test_format_time(self):
        assert format_time(5) == "5.0s"
        assert format_time(150) == "2m 30s"
        assert format_time(3725) == "1h 2m"
