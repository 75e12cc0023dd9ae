from enum import StrEnum


class ParseErrorReason(StrEnum):
    """
    Why a byte-size string was rejected.

    | Code | Example input | Reason text |
    |------|---------------|-------------|
    | `NOT_A_NUMBER` | `""`, `"-"`, `"-B"` | `"<token>" is not a number` |
    | `NO_NUMERIC_PREFIX` | `"B"`, `"٧kB"` | `no numerical prefix` |
    | `MISSING_UNIT` | `"11"` | `need a number with a unit as input` |
    | `UNRECOGNIZED_UNIT` | `"1k"`, `"200KiB"` | `try 'kB' or 'MB'` |
    | `NEGATIVE_SIZE` | `"-200KB"` | `size cannot be negative` |
    """

    NOT_A_NUMBER = "not_a_number"
    NO_NUMERIC_PREFIX = "no_numeric_prefix"
    MISSING_UNIT = "missing_unit"
    UNRECOGNIZED_UNIT = "unrecognized_unit"
    NEGATIVE_SIZE = "negative_size"

    def describe(self, token: str = "") -> str:
        match self:
            case ParseErrorReason.NOT_A_NUMBER:
                return f'"{token}" is not a number'
            case ParseErrorReason.NO_NUMERIC_PREFIX:
                return "no numerical prefix"
            case ParseErrorReason.MISSING_UNIT:
                return "need a number with a unit as input"
            case ParseErrorReason.UNRECOGNIZED_UNIT:
                return "try 'kB' or 'MB'"
            case ParseErrorReason.NEGATIVE_SIZE:
                return "size cannot be negative"


class SizeParseError(ValueError):
    def __init__(
        self,
        text: str,
        reason: ParseErrorReason,
        token: str = "",
    ):
        super().__init__(f'cannot parse "{text}": {reason.describe(token)}')
        self.text = text
        self.reason = reason
        self.token = token
