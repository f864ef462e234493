# 📄 File: domca/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types the tracking app uses to communicate
# what went wrong in a clear, organized way instead of generic error messages.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and proper serialization for API responses and error handling.
# 🔗 Dependencies:
# FastAPI HTTPException, typing, HTTP status constants
# 🔄 Connected Modules / Calls From:
# Identifier generator, domain entities, repository implementations, unit of work

from typing import Any, Dict, Optional

from fastapi import HTTPException, status


class DomcaException(Exception):
    """
    Base exception class for the Domca data-access layer.
    All custom exceptions should inherit from this class.
    """

    def __init__(
        self,
        message: str,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__.upper()
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to dictionary format."""
        return {
            "error": {
                "code": self.error_code,
                "message": self.message,
                "details": self.details,
                "status_code": self.status_code
            }
        }

    def to_http_exception(self) -> HTTPException:
        """Convert to FastAPI HTTPException."""
        return HTTPException(
            status_code=self.status_code,
            detail=self.to_dict()["error"]
        )


# =============================================================================
# ARGUMENT & VALIDATION EXCEPTIONS
# =============================================================================

class InvalidArgumentError(DomcaException):
    """
    Exception raised when a required input is blank, missing,
    or outside its declared numeric range.
    """

    def __init__(
        self,
        message: str = "Invalid argument",
        argument: Optional[str] = None,
        value: Optional[Any] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if argument:
            details["argument"] = argument
        if value is not None:
            details["value"] = str(value)

        self.argument = argument
        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="INVALID_ARGUMENT"
        )


class ValidationError(DomcaException):
    """
    Exception raised when a domain invariant is violated while
    building a new entity.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        entity: Optional[str] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if entity:
            details["entity"] = entity
        if constraint:
            details["constraint"] = constraint

        self.field = field
        super().__init__(
            message=message,
            status_code=422,  # Unprocessable Content
            details=details,
            error_code="VALIDATION_ERROR"
        )


# =============================================================================
# DOMAIN RULE EXCEPTIONS
# =============================================================================

class OwnershipMismatchError(DomcaException):
    """
    Exception raised when a child entity is attached to an aggregate
    it does not belong to.
    """

    def __init__(
        self,
        message: str = "Entity does not belong to this owner",
        expected_owner: Optional[str] = None,
        actual_owner: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if expected_owner:
            details["expected_owner"] = expected_owner
        if actual_owner:
            details["actual_owner"] = actual_owner

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="OWNERSHIP_MISMATCH"
        )


class InvalidOperationError(DomcaException):
    """
    Exception raised when a state-dependent rule forbids an operation.
    """

    def __init__(
        self,
        message: str = "Operation is not valid in the current state",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="INVALID_OPERATION"
        )


# =============================================================================
# DATABASE & INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class DatabaseError(DomcaException):
    """
    Exception raised when the database layer is unavailable.
    Used for missing configuration and connection issues.
    """

    def __init__(
        self,
        message: str = "Database error",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            details=details,
            error_code="DATABASE_ERROR"
        )


class RepositoryError(DomcaException):
    """
    Exception raised for repository/database operation failures.
    Used when database operations fail at the repository layer.
    """

    def __init__(
        self,
        message: str = "Repository operation failed",
        operation: Optional[str] = None,
        entity: Optional[str] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if entity:
            details["entity"] = entity
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="REPOSITORY_ERROR"
        )


# =============================================================================
# EXCEPTION UTILITIES
# =============================================================================

def exception_to_dict(exception: Exception) -> Dict[str, Any]:
    """
    Convert any exception to dictionary format.

    Args:
        exception: Exception to convert

    Returns:
        Dict: Exception data as dictionary
    """
    if isinstance(exception, DomcaException):
        return exception.to_dict()

    return {
        "error": {
            "code": exception.__class__.__name__.upper(),
            "message": str(exception),
            "details": {},
            "status_code": 500
        }
    }
