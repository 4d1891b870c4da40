"""Errors raised while decoding or encoding boarding pass text."""

# Standard imports
from enum import Enum


class ErrorKind(str, Enum):
    """Identifies which structural rule a boarding pass broke."""
    DATA_LENGTH = "data_length"
    FORMAT_CODE = "format_code"
    SEGMENTS_COUNT = "segments_count"
    FORMAT = "format"
    NAME = "name"
    DATE = "date"
    CONDITIONAL_DATA = "conditional_data"
    CONDITIONAL_DATA_SIZE = "conditional_data_size"
    SECURITY_DATA_SIZE = "security_data_size"
    SECURITY_DATA = "security_data"


class BCBPError(ValueError):
    """Raised when BCBP text cannot be decoded or a pass cannot be encoded."""

    def __init__(self, kind: ErrorKind, message: str | None = None):
        self.kind: ErrorKind = kind
        self.message: str = message or kind.value.replace("_", " ")
        super().__init__(self.message)

    def __repr__(self):
        return f"BCBPError({self.kind.name}, {self.message!r})"
