"""Parse status enumeration.

Status codes for argument list parse results, each failure status carrying
the negative return code reported alongside it.
"""

from enum import Enum


class ParseStatus(Enum):
    """Status codes for parse results.

    Attributes:
        SUCCESS: All mandatory positions parsed, no input left over
        MISSING_ARGUMENTS: Fewer fields than the mandatory minimum
        TOO_MANY_ARGUMENTS: Input remains after the last declared position
        CONVERSION_ERROR: A field does not match its declared type
        UNSUPPORTED_TYPE: The declared type has no conversion
    """

    SUCCESS = "success"
    MISSING_ARGUMENTS = "missing_arguments"
    TOO_MANY_ARGUMENTS = "too_many_arguments"
    CONVERSION_ERROR = "conversion_error"
    UNSUPPORTED_TYPE = "unsupported_type"

    @property
    def code(self) -> int:
        """Negative return code for failure statuses, 0 for SUCCESS."""
        return _STATUS_CODES[self]


_STATUS_CODES = {
    ParseStatus.SUCCESS: 0,
    ParseStatus.MISSING_ARGUMENTS: -1,
    ParseStatus.TOO_MANY_ARGUMENTS: -2,
    ParseStatus.CONVERSION_ERROR: -3,
    ParseStatus.UNSUPPORTED_TYPE: -4,
}
