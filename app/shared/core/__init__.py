"""
Core utilities package for the CigarMap API.
Provides the exception hierarchy, token verification and common dependencies.
"""

from .exceptions import (
    AuthenticationError,
    AuthorizationError,
    BusinessRuleViolationError,
    CigarMapException,
    DatabaseError,
    DuplicateResourceError,
    FileStorageError,
    NotFoundError,
    OnboardingErrorKind,
    OnboardingPersistenceError,
    RepositoryError,
    ValidationError,
)
from .security import SecurityManager, get_security_manager

__all__ = [
    "AuthenticationError",
    "AuthorizationError",
    "BusinessRuleViolationError",
    "CigarMapException",
    "DatabaseError",
    "DuplicateResourceError",
    "FileStorageError",
    "NotFoundError",
    "OnboardingErrorKind",
    "OnboardingPersistenceError",
    "RepositoryError",
    "SecurityManager",
    "ValidationError",
    "get_security_manager",
]
