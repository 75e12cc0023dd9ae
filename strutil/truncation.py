"""Output truncation utilities for captured process output (stdout, stderr)."""

import logging

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

# Truncation limits
MAX_OUTPUT_BYTES = 100_000  # 100KB
MAX_OUTPUT_LINES = 2000


def truncate_output(data: bytes, max_lines: int, max_bytes: int) -> bytes:
    """
    Keep the tail of `data` that fits both a line and a byte budget.

    Lines are the pieces of `data.split(b"\\n")`, so output ending in a
    newline has an empty last line. The result is first restricted to the
    last `max_lines` lines and then, if still too long, cut from the front
    to `max_bytes` bytes, even if that cuts a line in half.

    Args:
        data: The captured output.
        max_lines: Maximum number of trailing lines to keep.
        max_bytes: Maximum number of trailing bytes to keep.

    Returns:
        The largest suffix of `data` within both budgets. `data` itself is
        returned when it already fits.

    Example:
        >>> truncate_output(b"ab\\ncd\\nef\\ngh\\nij", 3, 500)
        b'ef\\ngh\\nij'
        >>> truncate_output(b"ab\\ncd\\nef\\ngh\\nij", 99, 5)
        b'gh\\nij'
    """
    if max_lines <= 0 or max_bytes <= 0:
        return b""

    start = 0
    pos = len(data)
    for _ in range(max_lines):
        pos = data.rfind(b"\n", 0, pos)
        if pos == -1:
            break
    else:
        start = pos + 1

    start = max(start, len(data) - max_bytes)
    if start == 0:
        return data

    logger.debug("truncated output from %d to %d bytes", len(data), len(data) - start)
    return data[start:]


def truncate_text(text: str, max_lines: int, max_bytes: int) -> str:
    """
    Truncate text by its UTF-8 size, without leaving a broken character.

    Same budgets as `truncate_output`, applied to `text.encode("utf-8")`.
    A character split by the byte cut is dropped entirely, so the result
    may be a few bytes shorter than `max_bytes`.
    """
    data = text.encode("utf-8")
    tail = truncate_output(data, max_lines, max_bytes)
    if tail is data:
        return text

    # skip continuation bytes of a codepoint whose lead byte was cut off
    skip = 0
    while skip < len(tail) and tail[skip] & 0xC0 == 0x80:
        skip += 1
    return tail[skip:].decode("utf-8")


class TruncationBudget(BaseModel):
    max_lines: int = Field(
        default = MAX_OUTPUT_LINES,
        ge = 0
    )
    max_bytes: int = Field(
        default = MAX_OUTPUT_BYTES,
        ge = 0
    )

    def apply(self, data: bytes) -> bytes:
        return truncate_output(data, self.max_lines, self.max_bytes)
