"""Type descriptor packing and decoding.

A descriptor ("mask") packs the number of mandatory arguments in its low
4 bits and the expected type of each position in the following 4-bit
groups, position 0 first. A zero group ends the position list.

Example:
    mask = make_mask(1, ArgType.STR, ArgType.UINT)
    # 0x133: one mandatory string, then an optional unsigned integer

    descriptor = TypeDescriptor.from_mask(mask)
    descriptor.min_args   # 1
    descriptor.types      # (ArgType.STR, ArgType.UINT)
"""

from dataclasses import dataclass
from typing import Tuple, Union

from arglist.arguments.models import ArgType
from arglist.errors import DescriptorError

MAX_ARGS = 8
MAX_MIN_ARGS = 15
TYPE_BITS = 4
TYPE_MASK = 0xF
# mandatory count plus 8 positions of 4 bits each
MASK_LIMIT = (1 << (TYPE_BITS * (MAX_ARGS + 1))) - 1

TypeTag = Union[ArgType, int]


def _tag(code: int) -> TypeTag:
    """Known codes become ArgType members, unknown ones stay raw."""
    try:
        return ArgType(code)
    except ValueError:
        return code


@dataclass(frozen=True)
class TypeDescriptor:
    """Decoded type descriptor.

    Attributes:
        min_args: Number of mandatory leading positions (0-15)
        types: Expected type of each position, at most 8
    """

    min_args: int = 0
    types: Tuple[TypeTag, ...] = ()

    @property
    def max_args(self) -> int:
        return len(self.types)

    def type_at(self, pos: int) -> TypeTag:
        """Expected type at a position, STOP past the last one."""
        if 0 <= pos < len(self.types):
            return self.types[pos]
        return ArgType.STOP

    @classmethod
    def from_mask(cls, mask: int) -> "TypeDescriptor":
        """Decode a packed descriptor.

        Raises:
            DescriptorError: If mask is not an unsigned integer of at most 36 bits
        """
        if not isinstance(mask, int) or mask < 0 or mask > MASK_LIMIT:
            raise DescriptorError(f"Invalid descriptor mask: {mask!r}")

        min_args = mask & TYPE_MASK
        mask >>= TYPE_BITS

        types = []
        while len(types) < MAX_ARGS:
            code = (mask >> (len(types) * TYPE_BITS)) & TYPE_MASK
            if not code:
                break
            types.append(_tag(code))

        return cls(min_args=min_args, types=tuple(types))

    @classmethod
    def of(cls, min_args: int, *types: ArgType) -> "TypeDescriptor":
        """Build a descriptor from explicit type tags.

        Raises:
            DescriptorError: If min_args is out of range, more than 8 types
                are given, or a type is STOP or not a valid code
        """
        if not 0 <= min_args <= MAX_MIN_ARGS:
            raise DescriptorError(
                f"Mandatory argument count must be 0-{MAX_MIN_ARGS}: {min_args}"
            )
        if len(types) > MAX_ARGS:
            raise DescriptorError(
                f"At most {MAX_ARGS} argument types are supported, got {len(types)}"
            )

        tags = []
        for arg_type in types:
            try:
                tag = ArgType(arg_type)
            except ValueError:
                raise DescriptorError(f"Unknown argument type: {arg_type!r}")
            if tag == ArgType.STOP:
                raise DescriptorError("STOP cannot be used as an argument type")
            tags.append(tag)

        return cls(min_args=min_args, types=tuple(tags))

    def to_mask(self) -> int:
        """Pack into the integer descriptor form."""
        mask = self.min_args & TYPE_MASK
        for pos, arg_type in enumerate(self.types[:MAX_ARGS]):
            mask |= (int(arg_type) & TYPE_MASK) << (TYPE_BITS * (pos + 1))
        return mask


def make_mask(min_args: int, *types: ArgType) -> int:
    """Packed descriptor for min_args mandatory arguments of the given types."""
    return TypeDescriptor.of(min_args, *types).to_mask()
