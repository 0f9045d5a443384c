"""
Custom exceptions for the activity analysis pipeline.

Parsing and classification failures abort the whole analysis; there is no
partial result. Invalid synthetic-video counts are not errors and are handled
as no-ops by the aggregator.
"""

from typing import Any, Dict, List, Optional


class AnalysisError(Exception):
    """Base exception for all analysis-related errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class ParseError(AnalysisError):
    """Errors raised while turning raw text into activity labels."""
    pass


class MissingColumnError(ParseError):
    """Raised when the header row has no column matching the requested key."""

    def __init__(self, column_key: str, headers: Optional[List[str]] = None):
        message = f"{column_key} column not found"
        details = {"column_key": column_key}
        if headers is not None:
            details["headers"] = headers
        super().__init__(message, details)
        self.column_key = column_key


class MalformedInputError(ParseError):
    """Raised when the input is empty or cannot be decoded."""

    def __init__(self, message: str, source: Optional[str] = None):
        details = {}
        if source:
            details["source"] = source
        super().__init__(message, details)
