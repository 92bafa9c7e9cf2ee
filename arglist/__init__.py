"""Parse comma-separated configuration arguments into typed values."""

from arglist.arguments import (
    MAX_ARGS,
    Argument,
    ArgListParser,
    ArgType,
    ParsedArguments,
    TypeDescriptor,
    make_arg_list,
    make_mask,
    type_name,
)
from arglist.errors import (
    ArgumentListError,
    DescriptorError,
    MissingArgumentsError,
    TooManyArgumentsError,
    TypeConversionError,
    UnsupportedTypeError,
)
from arglist.operations import ParseResult, ParseStatus

__all__ = [
    "MAX_ARGS",
    "Argument",
    "ArgListParser",
    "ArgType",
    "ParsedArguments",
    "TypeDescriptor",
    "make_arg_list",
    "make_mask",
    "type_name",
    "ArgumentListError",
    "DescriptorError",
    "MissingArgumentsError",
    "TooManyArgumentsError",
    "TypeConversionError",
    "UnsupportedTypeError",
    "ParseResult",
    "ParseStatus",
]
