"""Shorten display strings with a single ellipsis, counting codepoints."""

ELLIPSIS = "…"


def ellipt_right(text: str, n: int) -> str:
    """
    Shorten `text` to at most `n` codepoints, cutting at the end.

    >>> ellipt_right("hello", 3)
    'he…'
    """
    if not text or len(text) <= n:
        return text
    if n <= 1:
        return ELLIPSIS
    return text[: n - 1] + ELLIPSIS


def ellipt_left(text: str, n: int) -> str:
    """
    Shorten `text` to at most `n` codepoints, cutting at the start.

    >>> ellipt_left("hello", 3)
    '…lo'
    """
    if not text or len(text) <= n:
        return text
    if n <= 1:
        return ELLIPSIS
    return ELLIPSIS + text[len(text) - n + 1 :]
