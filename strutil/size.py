"""Decimal byte-size formatting and parsing ("20MB" <-> 20_000_000)."""

import logging
from enum import IntEnum
from typing import NoReturn

from strutil.errors import ParseErrorReason, SizeParseError

logger = logging.getLogger(__name__)

MAX_BYTE_SIZE = 2**63 - 1

_ASCII_DIGITS = "0123456789"
_MAX_DIGITS = len(str(MAX_BYTE_SIZE))


class SizeUnit(IntEnum):
    """Decimal size units; the value is the power of 1000 the unit stands for."""

    B = 0
    KB = 1
    MB = 2
    GB = 3
    TB = 4
    PB = 5
    EB = 6

    @property
    def suffix(self) -> str:
        return "kB" if self is SizeUnit.KB else self.name

    @property
    def multiplier(self) -> int:
        return 1000**self.value


# "KB" is accepted on input; output always uses "kB"
_UNIT_BY_SUFFIX: dict[str, SizeUnit] = {unit.suffix: unit for unit in SizeUnit}
_UNIT_BY_SUFFIX["KB"] = SizeUnit.KB


def format_size(size: int) -> str:
    """
    Format a byte count using the largest decimal unit it reaches.

    The value is truncated, never rounded, and printed without fractional
    digits: 1001 -> "1kB", 999999 -> "999kB".

    Args:
        size: Non-negative number of bytes.

    Returns:
        The compact size string, e.g. "20MB".
    """
    unit = SizeUnit.B
    for candidate in reversed(SizeUnit):
        if size >= candidate.multiplier:
            unit = candidate
            break

    return f"{size // unit.multiplier}{unit.suffix}"


def parse_size(text: str) -> int:
    """
    Parse a decimal byte-size string such as "400B", "1kB" or "8EB".

    Only ASCII digits count as numerals, and the unit suffix is matched
    case-sensitively except for the "k" of "kB".

    Args:
        text: The string to parse.

    Returns:
        The exact number of bytes.

    Raises:
        SizeParseError: If `text` is not a non-negative number followed by a
            known unit, or the result does not fit in a signed 64-bit integer.
    """
    end = 1 if text.startswith("-") else 0
    while end < len(text) and text[end] in _ASCII_DIGITS:
        end += 1
    token = text[:end]

    if not token:
        if not text:
            _fail(text, ParseErrorReason.NOT_A_NUMBER, token)
        _fail(text, ParseErrorReason.NO_NUMERIC_PREFIX)
    if token == "-":
        _fail(text, ParseErrorReason.NOT_A_NUMBER, token)
    if token.startswith("-"):
        _fail(text, ParseErrorReason.NEGATIVE_SIZE)
    if end == len(text):
        _fail(text, ParseErrorReason.MISSING_UNIT)

    unit = _UNIT_BY_SUFFIX.get(text[end:])
    if unit is None:
        _fail(text, ParseErrorReason.UNRECOGNIZED_UNIT)

    # int() refuses digit strings longer than sys.get_int_max_str_digits()
    digits = token.lstrip("0") or "0"
    if len(digits) > _MAX_DIGITS:
        _fail(text, ParseErrorReason.NOT_A_NUMBER, token)
    size = int(digits) * unit.multiplier
    if size > MAX_BYTE_SIZE:
        _fail(text, ParseErrorReason.NOT_A_NUMBER, token)

    return size


def _fail(text: str, reason: ParseErrorReason, token: str = "") -> NoReturn:
    error = SizeParseError(text, reason, token)
    logger.debug("rejected size %r: %s", text, reason)
    raise error
