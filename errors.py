from __future__ import annotations

from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    PARSE_ERROR = "parse_error"
    MISSING_PARAMETERS = "missing_parameters"
    INVALID_RANGE = "invalid_range"


class QuestionsError(Exception):
    """
    Request-level failure raised by the question handlers.

    `kind` picks the variant; `detail` carries whatever the variant needs for
    its message (the int parse failure, or the offending range). The HTTP
    layer only ever looks at `kind` and `str(err)`.
    """

    def __init__(self, kind: ErrorKind, detail: Optional[str] = None) -> None:
        self.kind = kind
        self.detail = detail
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.kind is ErrorKind.PARSE_ERROR:
            return f"Cannot parse parameter: {self.detail}"
        if self.kind is ErrorKind.MISSING_PARAMETERS:
            return "Missing parameter"
        return f"Invalid range: {self.detail}"

    @classmethod
    def parse_error(cls, err: ValueError) -> "QuestionsError":
        return cls(ErrorKind.PARSE_ERROR, str(err))

    @classmethod
    def missing_parameters(cls) -> "QuestionsError":
        return cls(ErrorKind.MISSING_PARAMETERS)

    @classmethod
    def invalid_range(cls, start: int, end: int, total: int) -> "QuestionsError":
        return cls(ErrorKind.INVALID_RANGE, f"{start}..{end} of {total} questions")
