"""Observability – structured logging."""

from country_code_picker.observability.logging import (
    JsonLoggerFactory,
    SensitiveFieldsFilter,
    get_logger,
)

__all__ = ["JsonLoggerFactory", "SensitiveFieldsFilter", "get_logger"]
