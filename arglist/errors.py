"""Argument list parsing errors.

Converters raise these from the field they fail on; the parser catches them
in a single place and turns them into a failed ParseResult, filling in the
position and cursor the converter does not know about.
"""

from typing import Optional

from arglist.operations.status import ParseStatus


class ArgumentListError(Exception):
    """Base error for argument list parsing."""

    status: ParseStatus = ParseStatus.CONVERSION_ERROR

    def __init__(
        self,
        message: str,
        arg_index: Optional[int] = None,
        end_pos: Optional[int] = None,
    ):
        super().__init__(message)
        self.message = message
        self.arg_index = arg_index
        self.end_pos = end_pos

    @property
    def code(self) -> int:
        return self.status.code


class MissingArgumentsError(ArgumentListError):
    """Fewer fields than the mandatory minimum."""

    status = ParseStatus.MISSING_ARGUMENTS


class TooManyArgumentsError(ArgumentListError):
    """Input left over after the last declared position."""

    status = ParseStatus.TOO_MANY_ARGUMENTS


class TypeConversionError(ArgumentListError):
    """Field text does not satisfy the declared type."""

    status = ParseStatus.CONVERSION_ERROR


class UnsupportedTypeError(TypeConversionError):
    """Declared type has no conversion."""

    status = ParseStatus.UNSUPPORTED_TYPE


class DescriptorError(ValueError):
    """Malformed type descriptor."""

    pass


ERRORS_BY_STATUS = {
    ParseStatus.MISSING_ARGUMENTS: MissingArgumentsError,
    ParseStatus.TOO_MANY_ARGUMENTS: TooManyArgumentsError,
    ParseStatus.CONVERSION_ERROR: TypeConversionError,
    ParseStatus.UNSUPPORTED_TYPE: UnsupportedTypeError,
}
