"""Observability – structlog configuration and helpers."""
from country_code_picker.observability.logging.factory import JsonLoggerFactory
from country_code_picker.observability.logging.processors import (
    DEFAULT_SENSITIVE_FIELDS,
    SensitiveFieldsFilter,
    get_logger,
)

__all__ = [
    "DEFAULT_SENSITIVE_FIELDS",
    "JsonLoggerFactory",
    "SensitiveFieldsFilter",
    "get_logger",
]
