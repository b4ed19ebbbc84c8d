"""Utility functions for humanizex."""


def count_words(text: str) -> int:
    """
    Count whitespace-delimited words.

    Args:
        text: Input text.

    Returns:
        Number of non-empty tokens. Empty or all-whitespace text has 0 words.
    """
    return len(text.split())


def chunk_text(text: str, max_words: int = 2000) -> list[str]:
    """
    Split text into consecutive chunks of at most ``max_words`` words.

    Text that already fits is returned as a single chunk, unmodified. When
    the text has to be split, each chunk is rebuilt from its words joined
    by single spaces, so runs of whitespace inside split text collapse.

    Args:
        text: Input text to chunk.
        max_words: Maximum number of words per chunk.

    Returns:
        List of text chunks.

    Raises:
        ValueError: If max_words is smaller than 1.

    Example:
        >>> chunk_text("a b c d e", max_words=2)
        ['a b', 'c d', 'e']
    """
    if max_words < 1:
        raise ValueError(f"max_words must be at least 1, got {max_words}")

    if count_words(text) <= max_words:
        return [text]

    words = text.split()
    return [
        " ".join(words[start:start + max_words])
        for start in range(0, len(words), max_words)
    ]


def limit_text(
    text: str,
    max_words: int = 30000,
    max_chars: int = 200000,
) -> tuple[str, bool]:
    """
    Enforce document size limits.

    The character limit is applied first, then the word limit. Text cut by
    the word limit is rebuilt from its first ``max_words`` words.

    Args:
        text: Input text.
        max_words: Maximum number of words.
        max_chars: Maximum number of characters.

    Returns:
        Tuple of (possibly truncated text, whether truncation happened).
    """
    truncated = False

    if len(text) > max_chars:
        text = text[:max_chars]
        truncated = True

    if count_words(text) > max_words:
        text = " ".join(text.split()[:max_words])
        truncated = True

    return text, truncated


def truncate_text(text: str, max_length: int = 500, suffix: str = "...") -> str:
    """
    Truncate text to a maximum length.

    Args:
        text: Input text.
        max_length: Maximum length.
        suffix: Suffix to add if truncated.

    Returns:
        Truncated text.
    """
    if len(text) <= max_length:
        return text
    return text[:max_length - len(suffix)] + suffix


def format_time(seconds: float) -> str:
    """
    Format seconds into human-readable time string.

    Args:
        seconds: Number of seconds.

    Returns:
        Formatted time string (e.g., "2m 30s").
    """
    if seconds < 60:
        return f"{seconds:.1f}s"
    elif seconds < 3600:
        minutes = int(seconds // 60)
        secs = int(seconds % 60)
        return f"{minutes}m {secs}s"
    else:
        hours = int(seconds // 3600)
        minutes = int((seconds % 3600) // 60)
        return f"{hours}h {minutes}m"
