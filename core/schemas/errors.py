"""
Error Taxonomy
File: errors.py

Purpose: Standard error taxonomy for the digest utilities.
Defines both Pydantic models for structured error communication
and Python exceptions for control flow.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


# =============================================================================
# Error Codes (Machine-Readable Constants)
# =============================================================================

class ErrorCodes:
    """Stable machine-readable error codes."""

    # Caller contract violations
    INVALID_INPUT = "INVALID_INPUT"
    INVALID_ARGUMENT = "INVALID_ARGUMENT"

    # Runtime environment
    ALGORITHM_UNAVAILABLE = "ALGORITHM_UNAVAILABLE"


# =============================================================================
# Pydantic Error Models (Structured Communication)
# =============================================================================

class DigestError(BaseModel):
    """
    Error model for structured error communication.

    Used where an error has to cross a boundary (API envelope, CLI JSON
    output) without raising.
    """

    model_config = ConfigDict(
        extra="forbid",
        frozen=False,
        validate_assignment=True,
    )

    code: str = Field(
        ...,
        description="Stable machine-readable error code",
        examples=[ErrorCodes.INVALID_INPUT],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] = Field(
        default_factory=dict,
        description="Additional structured details about the error",
    )
    retryable: bool = Field(
        default=False,
        description="Whether the operation can be retried",
    )


# =============================================================================
# Python Exceptions (Control Flow)
# =============================================================================

class DigestException(Exception):
    """
    Base exception for all digest utility errors.

    Carries structured error information and can be converted
    to a DigestError model.
    """

    def __init__(
        self,
        message: str,
        code: str = "DIGEST_ERROR",
        details: dict[str, Any] | None = None,
        retryable: bool = False,
    ) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}
        self.retryable = retryable

    def to_error_model(self) -> DigestError:
        """Convert this exception to a DigestError model."""
        return DigestError(
            code=self.code,
            message=self.message,
            details=self.details,
            retryable=self.retryable,
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(code={self.code!r}, message={self.message!r})"


class InvalidInputException(DigestException, ValueError):
    """Raised when a required value is absent or of an unusable type."""

    def __init__(
        self,
        message: str = "Input cannot be None",
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_INPUT,
            details=details,
            retryable=False,
        )


class InvalidArgumentException(DigestException, ValueError):
    """Raised when an argument is present but outside its allowed range."""

    def __init__(
        self,
        message: str,
        argument: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        if argument:
            full_details["argument"] = argument
        super().__init__(
            message=message,
            code=ErrorCodes.INVALID_ARGUMENT,
            details=full_details,
            retryable=False,
        )


class AlgorithmUnavailableException(DigestException):
    """Raised when the runtime cannot provide the requested hash algorithm."""

    def __init__(
        self,
        algorithm: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        full_details = details or {}
        full_details["algorithm"] = algorithm
        super().__init__(
            message=f"{algorithm.upper()} algorithm not available",
            code=ErrorCodes.ALGORITHM_UNAVAILABLE,
            details=full_details,
            retryable=False,
        )
        self.algorithm = algorithm


__all__ = [
    "ErrorCodes",
    "DigestError",
    "DigestException",
    "InvalidInputException",
    "InvalidArgumentException",
    "AlgorithmUnavailableException",
]
