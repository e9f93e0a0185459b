# 📄 File: app/shared/core/exceptions.py
# 🧭 Purpose (Layman Explanation):
# This file defines all the special error types CigarMap uses to say what went wrong
# (not logged in, lounge missing, upload rejected, save failed) in a clear, organized way.
# 🧪 Purpose (Technical Summary):
# Custom exception hierarchy providing specific error types with HTTP status codes,
# error details, and serialization for API responses, plus the onboarding error taxonomy.
# 🔗 Dependencies:
# typing, enum, FastAPI HTTP status constants
# 🔄 Connected Modules / Calls From:
# All modules for error handling, app.main exception handlers, repositories, domain services

from enum import Enum
from typing import Any, Dict, List, Optional
from fastapi import status


class CigarMapException(Exception):
    """
    Base exception class for the CigarMap backend.
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


# =============================================================================
# AUTHENTICATION & AUTHORIZATION EXCEPTIONS
# =============================================================================

class AuthenticationError(CigarMapException):
    """
    Exception raised for authentication failures.
    Used when the bearer token is missing, expired or rejected by Supabase Auth.
    """

    def __init__(
        self,
        message: str = "Authentication failed",
        details: Optional[Dict[str, Any]] = None,
        user_id: Optional[str] = None
    ):
        if not details:
            details = {}
        if user_id:
            details["user_id"] = user_id

        super().__init__(
            message=message,
            status_code=status.HTTP_401_UNAUTHORIZED,
            details=details,
            error_code="AUTHENTICATION_ERROR"
        )


class AuthorizationError(CigarMapException):
    """
    Exception raised for authorization failures.
    Used when a user lacks the role or ownership to touch a resource.
    """

    def __init__(
        self,
        message: str = "Access denied",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        required_role: Optional[str] = None,
        user_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id
        if required_role:
            details["required_role"] = required_role
        if user_id:
            details["user_id"] = user_id

        super().__init__(
            message=message,
            status_code=status.HTTP_403_FORBIDDEN,
            details=details,
            error_code="AUTHORIZATION_ERROR"
        )


# =============================================================================
# VALIDATION & DATA EXCEPTIONS
# =============================================================================

class ValidationError(CigarMapException):
    """
    Exception raised for data validation failures.
    Used when input data doesn't meet validation requirements.
    """

    def __init__(
        self,
        message: str = "Validation failed",
        field: Optional[str] = None,
        value: Optional[Any] = None,
        constraint: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if field:
            details["field"] = field
        if value is not None:
            details["value"] = str(value)
        if constraint:
            details["constraint"] = constraint

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
            error_code="VALIDATION_ERROR"
        )


class NotFoundError(CigarMapException):
    """
    Exception raised when requested resource is not found.
    Used for missing cities, lounges, plans, profiles and onboarding sessions.
    """

    def __init__(
        self,
        message: str = "Resource not found",
        resource_type: Optional[str] = None,
        resource_id: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if resource_id:
            details["resource_id"] = resource_id

        super().__init__(
            message=message,
            status_code=status.HTTP_404_NOT_FOUND,
            details=details,
            error_code="NOT_FOUND"
        )


class DuplicateResourceError(CigarMapException):
    """
    Exception raised when attempting to create duplicate resources.
    Used for unique constraint violations such as city and plan slugs.
    """

    def __init__(
        self,
        message: str = "Resource already exists",
        resource_type: Optional[str] = None,
        field: Optional[str] = None,
        value: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if resource_type:
            details["resource_type"] = resource_type
        if field:
            details["field"] = field
        if value:
            details["value"] = value

        super().__init__(
            message=message,
            status_code=status.HTTP_409_CONFLICT,
            details=details,
            error_code="DUPLICATE_RESOURCE"
        )


# =============================================================================
# BUSINESS LOGIC EXCEPTIONS
# =============================================================================

class BusinessRuleViolationError(CigarMapException):
    """
    Exception raised when business rules are violated.
    Used for domain-specific rule enforcement.
    """

    def __init__(
        self,
        message: str = "Business rule violation",
        rule: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if rule:
            details["rule"] = rule
        if context:
            details["context"] = context

        super().__init__(
            message=message,
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            details=details,
            error_code="BUSINESS_RULE_VIOLATION"
        )


class OnboardingErrorKind(str, Enum):
    """Failure kinds surfaced by the onboarding flow."""
    VALIDATION_BLOCKED = "validation_blocked"
    UPLOAD_FAILED = "upload_failed"
    PERSISTENCE_FAILED = "persistence_failed"
    DOUBLE_SUBMIT = "double_submit"


class OnboardingPersistenceError(CigarMapException):
    """
    Raised when the onboarding submission cannot write the profile or business record.

    The wizard stays on its final step, so the user can retry the whole submission.
    ``compensated`` says whether the explicit profile restore ran; ``profile_restored``
    says whether the stored profile is back to its pre-submission values, whichever
    way that happened (restore or transaction rollback).
    """

    def __init__(
        self,
        message: str = "Something went wrong. Please try again.",
        stage: Optional[str] = None,
        upload_failures: Optional[List[Dict[str, Any]]] = None,
        compensated: Optional[bool] = None,
        profile_restored: Optional[bool] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        self.kind = OnboardingErrorKind.PERSISTENCE_FAILED
        self.stage = stage
        details["kind"] = self.kind.value
        if stage:
            details["stage"] = stage
        if upload_failures:
            details["upload_failures"] = upload_failures
        if compensated is not None:
            details["compensated"] = compensated
        if profile_restored is not None:
            details["profile_restored"] = profile_restored

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="ONBOARDING_PERSISTENCE_FAILED"
        )


# =============================================================================
# DATABASE & INFRASTRUCTURE EXCEPTIONS
# =============================================================================

class DatabaseError(CigarMapException):
    """
    Exception raised for database operation failures.
    Used for connection issues, query failures, etc.
    """

    def __init__(
        self,
        message: str = "Database error",
        operation: Optional[str] = None,
        table: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if table:
            details["table"] = table

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="DATABASE_ERROR"
        )


class RepositoryError(CigarMapException):
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


class TransactionError(CigarMapException):
    """
    Exception raised when a database transaction fails.
    Used to wrap commit/rollback errors in DB sessions.
    """

    def __init__(
        self,
        message: str = "Database transaction failed",
        operation: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="TRANSACTION_ERROR"
        )


# =============================================================================
# FILE STORAGE EXCEPTIONS
# =============================================================================

class FileStorageError(CigarMapException):
    """
    Exception raised for file storage operation failures.
    Used for Supabase Storage upload errors.
    """

    def __init__(
        self,
        message: str = "File storage error",
        operation: Optional[str] = None,
        bucket: Optional[str] = None,
        storage_path: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if operation:
            details["operation"] = operation
        if bucket:
            details["bucket"] = bucket
        if storage_path:
            details["storage_path"] = storage_path

        super().__init__(
            message=message,
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            details=details,
            error_code="FILE_STORAGE_ERROR"
        )


class FileTooLargeError(CigarMapException):
    """
    Exception raised when uploaded file exceeds allowed size.
    """
    def __init__(
        self,
        message: str = "Uploaded file is too large",
        max_size_mb: Optional[float] = None,
        actual_size_mb: Optional[float] = None,
        filename: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if max_size_mb is not None:
            details["max_size_mb"] = max_size_mb
        if actual_size_mb is not None:
            details["actual_size_mb"] = actual_size_mb
        if filename:
            details["filename"] = filename

        super().__init__(
            message=message,
            status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE,
            details=details,
            error_code="FILE_TOO_LARGE"
        )


class InvalidFileTypeError(CigarMapException):
    """
    Exception raised when the uploaded file type is not supported.
    """
    def __init__(
        self,
        message: str = "Invalid or unsupported file type",
        filename: Optional[str] = None,
        expected_types: Optional[list] = None,
        actual_type: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None
    ):
        if not details:
            details = {}

        if filename:
            details["filename"] = filename
        if expected_types:
            details["expected_types"] = expected_types
        if actual_type:
            details["actual_type"] = actual_type

        super().__init__(
            message=message,
            status_code=status.HTTP_400_BAD_REQUEST,
            details=details,
            error_code="INVALID_FILE_TYPE"
        )
