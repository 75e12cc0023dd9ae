from strutil.ellipsis import ELLIPSIS, ellipt_left, ellipt_right
from strutil.errors import ParseErrorReason, SizeParseError
from strutil.lists import (
    comma_separated_list,
    list_contains,
    multi_comma_separated_list,
    quoted,
    sorted_list_contains,
)
from strutil.randutil import make_random_string
from strutil.size import MAX_BYTE_SIZE, SizeUnit, format_size, parse_size
from strutil.truncation import TruncationBudget, truncate_output, truncate_text

__all__ = [
    "ELLIPSIS",
    "ellipt_left",
    "ellipt_right",
    "ParseErrorReason",
    "SizeParseError",
    "comma_separated_list",
    "list_contains",
    "multi_comma_separated_list",
    "quoted",
    "sorted_list_contains",
    "make_random_string",
    "MAX_BYTE_SIZE",
    "SizeUnit",
    "format_size",
    "parse_size",
    "TruncationBudget",
    "truncate_output",
    "truncate_text",
]
