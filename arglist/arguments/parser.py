"""Argument list parsing and validation."""

from typing import List, Optional, Union

from arglist.arguments.conversions import (
    parse_ipv4,
    parse_ipv4_mask,
    parse_ipv6,
    parse_ipv6_mask,
    parse_sint,
    parse_size,
    parse_time,
    parse_uint,
)
from arglist.arguments.descriptor import TypeDescriptor, TypeTag
from arglist.arguments.models import Argument, ArgType, ParsedArguments, type_name
from arglist.core.config import settings
from arglist.core.logging import get_module_logger
from arglist.errors import (
    ArgumentListError,
    MissingArgumentsError,
    TooManyArgumentsError,
    TypeConversionError,
    UnsupportedTypeError,
)
from arglist.operations import ParseResult

logger = get_module_logger()

SEPARATOR = ","


def _is_string(arg_type: TypeTag) -> bool:
    return isinstance(arg_type, ArgType) and arg_type.is_string


class ArgListParser:
    """Parse a comma-separated argument string into typed arguments.

    Handles:
    - One field per declared position, split on commas, no quoting or trimming
    - Per-position type conversion with downgrades (SINT without sign,
      MSK4, TIME and SIZE produce UINT or IPV4 arguments)
    - Mandatory/optional positions and left over input

    Example:
        parser = ArgListParser()

        mask = make_mask(2, ArgType.UINT, ArgType.UINT, ArgType.UINT)
        result = parser.parse("10,20", mask)
        # result.count == 2
        # result.arguments == [
        #     Argument(ArgType.UINT, 10),
        #     Argument(ArgType.UINT, 20),
        #     Argument(),
        #     Argument(),
        # ]
    """

    def __init__(
        self,
        strict_time_units: Optional[bool] = None,
        log_errors: Optional[bool] = None,
    ):
        if strict_time_units is None:
            strict_time_units = settings.parser.STRICT_TIME_UNITS
        if log_errors is None:
            log_errors = settings.parser.LOG_PARSE_ERRORS
        self.strict_time_units = strict_time_units
        self.log_errors = log_errors

    def parse(
        self,
        text: str,
        descriptor: Union[TypeDescriptor, int],
        length: Optional[int] = None,
    ) -> ParseResult:
        """Parse an argument string against a type descriptor.

        Args:
            text: Argument string, e.g. "10,20"
            descriptor: TypeDescriptor or packed descriptor mask
            length: Number of leading characters of text to parse,
                all of it by default

        Returns:
            ParseResult holding ParsedArguments on success, or the error
            message, failing position and stop offset on failure

        Raises:
            DescriptorError: If descriptor is not a valid mask
            ValueError: If length is outside the bounds of text
        """
        if length is None:
            length = len(text)
        elif not 0 <= length <= len(text):
            raise ValueError(f"Length {length} outside of input bounds")
        text = text[:length]

        if not isinstance(descriptor, TypeDescriptor):
            descriptor = TypeDescriptor.from_mask(descriptor)

        try:
            parsed = self._parse_fields(text, descriptor)
        except ArgumentListError as e:
            if self.log_errors:
                logger.warning(
                    "argument_list_parse_error",
                    raw_text=text,
                    status=e.status.value,
                    arg_index=e.arg_index,
                    end_pos=e.end_pos,
                    error=e.message,
                    reason=str(e.__cause__) if e.__cause__ else None,
                )
            return ParseResult.from_exception(e)

        logger.debug(
            "argument_list_parsed",
            count=parsed.count,
            max_args=descriptor.max_args,
        )
        return ParseResult.success(parsed)

    def _parse_fields(self, text: str, descriptor: TypeDescriptor) -> ParsedArguments:
        """Split text into fields and convert each one.

        Raises:
            ArgumentListError: On the first field failing conversion, or if
                the field count does not fit the descriptor
        """
        max_args = descriptor.max_args

        # Nothing to parse: no position declared, or nothing given and
        # nothing required
        if not max_args:
            return ParsedArguments(arguments=[], count=0, end_pos=len(text))
        if not text and not descriptor.min_args:
            return ParsedArguments(arguments=[], count=0, end_pos=0)

        # Kept on purpose: a mandatory string-like first position takes the
        # empty input as one empty field, anything else is missing arguments
        if not text and not _is_string(descriptor.type_at(0)):
            raise self._missing_arguments(descriptor, 0, 0)

        arguments: List[Argument] = [Argument() for _ in range(max_args + 1)]
        pos = 0
        cursor = 0

        while pos < max_args:
            end = text.find(SEPARATOR, cursor)
            if end < 0:
                end = len(text)

            word = text[cursor:end]
            arg_type = descriptor.types[pos]

            try:
                arguments[pos] = self._convert(word, arg_type)
            except TypeConversionError as e:
                raise e.__class__(
                    f"failed to parse '{word}' as type '{type_name(arg_type)}'",
                    arg_index=pos,
                    end_pos=end,
                ) from e

            pos += 1
            cursor = end

            if cursor >= len(text) or pos >= max_args:
                break

            # skip separator
            cursor += 1

        if pos < descriptor.min_args:
            raise self._missing_arguments(descriptor, pos, cursor)

        if cursor < len(text):
            # cursor sits on the separator ending the last accepted field
            remainder = text[cursor + len(SEPARATOR) :]
            raise TooManyArgumentsError(
                f"end of arguments expected at '{remainder}'",
                arg_index=pos,
                end_pos=cursor,
            )

        # Positions between pos and max_args stay at Argument(), they are
        # optional arguments that were not supplied
        return ParsedArguments(arguments=arguments, count=pos, end_pos=cursor)

    def _missing_arguments(
        self, descriptor: TypeDescriptor, pos: int, cursor: int
    ) -> MissingArgumentsError:
        return MissingArgumentsError(
            f"missing arguments (got {pos}/{descriptor.min_args}), "
            f"type '{type_name(descriptor.type_at(pos))}' expected",
            arg_index=pos,
            end_pos=cursor,
        )

    def _convert(self, word: str, arg_type: TypeTag) -> Argument:
        """Convert one field to the argument it declares.

        Returns:
            Argument holding the resulting type, which differs from
            arg_type for downgraded types

        Raises:
            TypeConversionError: If word does not match arg_type
            UnsupportedTypeError: If arg_type has no conversion
        """
        if arg_type == ArgType.SINT:
            result_type, value = parse_sint(word)
            return Argument(result_type, value)
        elif arg_type == ArgType.UINT:
            return Argument(ArgType.UINT, parse_uint(word))
        elif _is_string(arg_type):
            # names to resolve later are kept as strings too
            return Argument(arg_type, word)
        elif arg_type == ArgType.IPV4:
            return Argument(ArgType.IPV4, parse_ipv4(word))
        elif arg_type == ArgType.MSK4:
            return Argument(ArgType.IPV4, parse_ipv4_mask(word))
        elif arg_type == ArgType.IPV6:
            return Argument(ArgType.IPV6, parse_ipv6(word))
        elif arg_type == ArgType.MSK6:
            parse_ipv6_mask(word)  # always raises
        elif arg_type == ArgType.TIME:
            return Argument(
                ArgType.UINT, parse_time(word, strict=self.strict_time_units)
            )
        elif arg_type == ArgType.SIZE:
            return Argument(ArgType.UINT, parse_size(word))

        raise UnsupportedTypeError(f"No conversion for type {type_name(arg_type)}")


def make_arg_list(
    text: str,
    descriptor: Union[TypeDescriptor, int],
    length: Optional[int] = None,
) -> ParseResult:
    """Parse text with a parser using the configured defaults."""
    return ArgListParser().parse(text, descriptor, length)
