"""Typed argument list parsing.

Example:
    from arglist.arguments import ArgType, make_arg_list, make_mask

    result = make_arg_list("web1,8080", make_mask(1, ArgType.SRV, ArgType.UINT))
    if result.is_success:
        server, port = result.data.values()
"""

from arglist.arguments.models import (
    Argument,
    ArgType,
    ParsedArguments,
    type_name,
)
from arglist.arguments.descriptor import MAX_ARGS, TypeDescriptor, make_mask
from arglist.arguments.parser import ArgListParser, make_arg_list

__all__ = [
    # Models
    "Argument",
    "ArgType",
    "ParsedArguments",
    "type_name",
    # Descriptor
    "MAX_ARGS",
    "TypeDescriptor",
    "make_mask",
    # Core
    "ArgListParser",
    "make_arg_list",
]
