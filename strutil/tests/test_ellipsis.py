"""Tests for ellipsis truncation."""

import pytest

from strutil.ellipsis import ELLIPSIS, ellipt_left, ellipt_right

# "e" followed by COMBINING ACUTE ACCENT: two codepoints
E_ACUTE = "e\u0301"


@pytest.mark.parametrize(
    ("text", "n", "right", "left"),
    [
        ("", 10, "", ""),
        ("", -1, "", ""),
        ("hello", -1, "…", "…"),
        ("hello", 0, "…", "…"),
        ("hello", 1, "…", "…"),
        ("hello", 2, "h…", "…o"),
        ("hello", 3, "he…", "…lo"),
        ("hello", 4, "hel…", "…llo"),
        ("hello", 5, "hello", "hello"),
        ("hello", 10, "hello", "hello"),
        (f"h{E_ACUTE}llo", 4, f"h{E_ACUTE}…", "…llo"),
        (f"h{E_ACUTE}llo", 3, "he…", "…lo"),
        ("he🐧lo", 4, "he🐧…", "…🐧lo"),
        ("he🐧lo", 3, "he…", "…lo"),
    ],
)
def test_ellipt(text: str, n: int, right: str, left: str) -> None:
    """Both edges are cut by codepoint with a single ellipsis."""
    assert ellipt_right(text, n) == right
    assert ellipt_left(text, n) == left


class TestElliptLength:
    """Tests for the length of shortened strings."""

    def test_result_fits_width(self) -> None:
        """Shortened strings are exactly n codepoints long."""
        text = "the quick brown fox"
        for n in range(2, len(text)):
            assert len(ellipt_right(text, n)) == n
            assert len(ellipt_left(text, n)) == n

    def test_single_marker(self) -> None:
        """Only one ellipsis is inserted."""
        assert ellipt_right("abcdefgh", 4).count(ELLIPSIS) == 1
        assert ellipt_left("abcdefgh", 4).count(ELLIPSIS) == 1

    def test_short_text_is_idempotent(self) -> None:
        """Shortening an already short result changes nothing."""
        once = ellipt_right("abcdefgh", 4)
        assert ellipt_right(once, 4) == once
