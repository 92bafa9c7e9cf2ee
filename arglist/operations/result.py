"""Parse result dataclass.

Single result type returned by the argument list parser, carrying either
the parsed arguments or the failure details, never both.
"""

from typing import Any, List, Optional
from dataclasses import dataclass

from arglist.operations.status import ParseStatus


@dataclass
class ParseResult:
    """Result returned from a parse.

    Attributes:
        status: ParseStatus -- high-level outcome
        message: str -- human-friendly message, the error text on failure
        data: Optional[Any] -- ParsedArguments on success, None on failure
        arg_index: int -- positions filled on success, failing position otherwise
        end_pos: int -- input offset where parsing stopped
    """

    status: ParseStatus
    message: str
    data: Optional[Any] = None
    arg_index: int = 0
    end_pos: int = 0

    @property
    def is_success(self) -> bool:
        """Helper property to check if the parse was successful."""
        return self.status == ParseStatus.SUCCESS

    @property
    def code(self) -> int:
        """Argument count on success, a negative status code on failure."""
        if self.is_success:
            return self.data.count
        return self.status.code

    @property
    def count(self) -> Optional[int]:
        """Number of positions filled, None on failure."""
        return self.data.count if self.is_success else None

    @property
    def arguments(self) -> List[Any]:
        """Parsed argument list including its terminator, empty on failure."""
        return self.data.arguments if self.is_success else []

    @classmethod
    def success(cls, data: Any, message: str = "ok") -> "ParseResult":
        """Create a SUCCESS ParseResult.

        Args:
            data: ParsedArguments payload
            message: Human-friendly success message

        Returns:
            ParseResult with SUCCESS status
        """
        return cls(
            status=ParseStatus.SUCCESS,
            message=message,
            data=data,
            arg_index=data.count,
            end_pos=data.end_pos,
        )

    @classmethod
    def error(
        cls,
        status: ParseStatus,
        message: str,
        arg_index: int = 0,
        end_pos: int = 0,
    ) -> "ParseResult":
        """Create a failed ParseResult.

        Args:
            status: ParseStatus indicating the error kind
            message: Human-friendly error message
            arg_index: Position at which parsing failed
            end_pos: Input offset where parsing stopped

        Returns:
            ParseResult with the given error status and no data
        """
        if status == ParseStatus.SUCCESS:
            raise ValueError("error results require a failure status")
        return cls(
            status=status,
            message=message,
            arg_index=arg_index,
            end_pos=end_pos,
        )

    @classmethod
    def from_exception(cls, exc) -> "ParseResult":
        """Create a failed ParseResult from an ArgumentListError."""
        return cls.error(
            exc.status,
            exc.message,
            arg_index=exc.arg_index or 0,
            end_pos=exc.end_pos or 0,
        )

    def raise_for_error(self) -> "ParseResult":
        """Raise the matching ArgumentListError if the parse failed.

        Returns:
            self, so successful results can be chained
        """
        from arglist.errors import ERRORS_BY_STATUS

        if self.is_success:
            return self
        raise ERRORS_BY_STATUS[self.status](
            self.message, arg_index=self.arg_index, end_pos=self.end_pos
        )
