"""Parse result types and status enums."""

from arglist.operations.status import ParseStatus
from arglist.operations.result import ParseResult

__all__ = [
    "ParseResult",
    "ParseStatus",
]
