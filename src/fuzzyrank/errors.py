"""
FuzzyRank Error Classification System.

This module provides a hierarchy of exceptions for the failures that can
occur around a search call: validating a query, fetching candidate records,
loading configuration and transliterating field text.

Error Categories:
-----------------
1. Retryable Errors: Transient failures that may succeed on retry
   - Data store unavailable
   - Connection resets while fetching records

2. Permanent Errors: Failures that won't succeed on retry
   - Record type not searchable / unsupported locale
   - Unknown record type
   - Invalid configuration

3. Transliteration Errors: a single field could not be Latin-normalized.
   These never abort a search; the merge engine skips the field.

Usage:
------
    from fuzzyrank.errors import InvalidQueryError, is_retryable

    try:
        result = await orchestrator.search(descriptor, "cafe", locale="fr")
    except InvalidQueryError as e:
        logger.warning(f"Rejected search: {e}")
    except Exception as e:
        if is_retryable(e):
            ...
        raise
"""

from typing import Any


class FuzzyRankError(Exception):
    """
    Base exception for all FuzzyRank errors.

    Attributes:
        message: Human-readable error description
        details: Additional context about the error (optional)
        original_error: The underlying exception that caused this error (optional)
    """

    def __init__(
        self,
        message: str,
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message)
        self.message = message
        self.details = details or {}
        self.original_error = original_error

    def __str__(self) -> str:
        base = self.message
        if self.details:
            base += f" | Details: {self.details}"
        if self.original_error:
            base += f" | Caused by: {type(self.original_error).__name__}: {self.original_error}"
        return base

    def to_dict(self) -> dict[str, Any]:
        """Convert error to dictionary for logging/serialization."""
        return {
            "error_type": type(self).__name__,
            "message": self.message,
            "details": self.details,
            "original_error": str(self.original_error) if self.original_error else None
        }


# =============================================================================
# Retryable Errors - Transient failures that may succeed on retry
# =============================================================================

class RetryableError(FuzzyRankError):
    """
    Base class for errors that may succeed on retry.

    The search core never retries on its own; callers decide.
    """
    pass


class FetchError(RetryableError):
    """
    Raised by record fetchers when the backing store cannot be read.
    """

    def __init__(
        self,
        message: str = "Failed to fetch records",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


# =============================================================================
# Permanent Errors - Failures that won't succeed on retry
# =============================================================================

class PermanentError(FuzzyRankError):
    """
    Base class for errors that will not succeed on retry.
    """
    pass


class InvalidQueryError(PermanentError):
    """
    Raised when a record type or locale combination is not searchable.

    Raised before any fetch or match work happens.
    """

    def __init__(
        self,
        message: str = "Invalid search query",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class NotFoundError(PermanentError):
    """Raised when a record type uid is unknown to a fetcher."""

    def __init__(
        self,
        message: str = "Record type not found",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


class ConfigurationError(PermanentError):
    """
    Raised when there's a configuration problem.

    Common causes:
    - Missing "contentTypes" section
    - Empty or duplicated match keys
    - Non-positive limits
    """

    def __init__(
        self,
        message: str = "Configuration error",
        details: dict[str, Any] | None = None,
        original_error: Exception | None = None
    ):
        super().__init__(message, details, original_error)


# =============================================================================
# Domain-Specific Errors
# =============================================================================

class TransliterationError(FuzzyRankError):
    """Raised when a value cannot be transliterated."""
    pass


# =============================================================================
# Helper Functions
# =============================================================================

def is_retryable(error: Exception) -> bool:
    """
    Check if an error is retryable.

    Args:
        error: The exception to check

    Returns:
        True if the error is an instance of RetryableError
    """
    return isinstance(error, RetryableError)
