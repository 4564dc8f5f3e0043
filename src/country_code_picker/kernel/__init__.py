"""Kernel – error hierarchy shared by every subpackage."""

from country_code_picker.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    NotFoundError,
    ValidationError,
)

__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
