"""
Domain exceptions.

Typed exceptions for explicit error handling.
Entity methods raise the specific kind; application services wrap
everything into a single service-level error per operation.
"""

from __future__ import annotations


# ═══════════════════════════════════════════════════════════
# BASE EXCEPTION
# ═══════════════════════════════════════════════════════════


class DomainError(Exception):
    """
    Base exception for all domain errors.

    Allows catching all domain errors with single except clause.
    """

    pass


# ═══════════════════════════════════════════════════════════
# ACTIVITY DOMAIN EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class NotFoundError(DomainError):
    """
    Referenced resource not found.

    Raised when:
    - User does not exist
    - No emission factor registered for an activity type
    - No emission factor registered for a unit of that type

    Example:
        >>> raise NotFoundError("Emission factor for food not found")
    """

    pass


class ValidationError(DomainError):
    """
    Activity data failed validation.

    Raised when:
    - Unknown activity type
    - Non-numeric or non-positive value
    - Empty unit or invalid date

    Example:
        >>> raise ValidationError("Invalid activity data")
    """

    pass


class PreconditionError(DomainError):
    """
    Operation attempted without its required inputs.

    Raised when:
    - Comparison attempted before emission was computed
    - No average available for the compared category
    - Average is zero (percentage undefined)

    Example:
        >>> raise PreconditionError("Cannot compare: emission not calculated")
    """

    pass


# ═══════════════════════════════════════════════════════════
# INFRASTRUCTURE EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class CollaboratorError(DomainError):
    """
    Underlying I/O failure in a collaborator adapter.

    Raised when:
    - Database connection lost
    - Query or insert failed
    - Emission factor table could not be loaded

    Example:
        >>> raise CollaboratorError("Activity save error: connection refused")
    """

    pass


# ═══════════════════════════════════════════════════════════
# SERVICE EXCEPTIONS
# ═══════════════════════════════════════════════════════════


class ServiceError(DomainError):
    """
    Base class for service-level wrapped errors.

    Keeps the original message for diagnosis while hiding
    the collaborator exception itself.

    Attributes:
        original_message: Message of the error that aborted the operation
    """

    prefix = "Service error"

    def __init__(self, original_message: str):
        super().__init__(f"{self.prefix}: {original_message}")
        self.original_message = original_message


class CreationError(ServiceError):
    """Activity creation failed at any step."""

    prefix = "Activity creation error"


class FootprintError(ServiceError):
    """Footprint calculation failed at any step."""

    prefix = "Footprint calculation error"


class StatsError(ServiceError):
    """Per-category statistics could not be computed."""

    prefix = "Stats calculation error"
