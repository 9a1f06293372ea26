"""
Error types for the audit pipeline
"""

from enum import Enum
from typing import Optional


class ErrorType(str, Enum):
    """Kinds of failures that abort an audit run"""
    FILE_IO = "file_io"  # missing/unreadable file, directory walk failure
    PARSE = "parse"  # malformed JSON, JSON root is not an object
    CONFIG = "config"  # invalid settings or override file shape
    ACQUISITION = "acquisition"  # git clone/checkout, ssh agent setup


class AuditError(Exception):
    """
    Fatal audit error

    Attributes:
        error_type: kind of failure
        cause: underlying exception, if any
    """

    def __init__(
        self,
        message: str,
        *,
        error_type: ErrorType,
        cause: Optional[Exception] = None
    ):
        super().__init__(message)
        self.error_type = error_type
        self.cause = cause

    def __str__(self) -> str:
        base = f"[{self.error_type.value}] {super().__str__()}"
        if self.cause:
            base += f" (caused by: {type(self.cause).__name__}: {self.cause})"
        return base
