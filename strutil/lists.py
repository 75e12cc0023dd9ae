"""Helpers for lists of strings: membership, display quoting, comma lists."""

from bisect import bisect_left
from collections.abc import Iterable, Sequence


def list_contains(items: Sequence[str] | None, value: str) -> bool:
    return value in (items or ())


def sorted_list_contains(items: Sequence[str] | None, value: str) -> bool:
    """Binary search for `value` in `items`, which must be sorted ascending."""
    if not items:
        return False
    i = bisect_left(items, value)
    return i < len(items) and items[i] == value


def quoted(items: Iterable[str] | None) -> str:
    """
    Join strings for display as a double-quoted, comma-separated list.

    >>> quoted(["one", 'tw"'])
    '"one", "tw\\\\""'
    """
    return ", ".join(_quote(item) for item in items or ())


def _quote(item: str) -> str:
    return '"' + item.replace("\\", "\\\\").replace('"', '\\"') + '"'


def comma_separated_list(text: str) -> list[str]:
    """Split on commas, stripping whitespace and dropping empty or repeated entries."""
    return multi_comma_separated_list([text])


def multi_comma_separated_list(texts: Iterable[str]) -> list[str]:
    """
    Flatten several comma-separated strings into one list.

    Entries are stripped, empty ones are dropped, and an entry repeated
    within or across strings is kept only where it first appears.
    """
    result: list[str] = []
    seen: set[str] = set()
    for text in texts:
        for piece in text.split(","):
            piece = piece.strip()
            if piece and piece not in seen:
                seen.add(piece)
                result.append(piece)
    return result
