"""Observability – get_logger and the phone-digit redaction processor."""
from __future__ import annotations

from typing import Any, Final

import structlog

# Phone digits are personal data; never render them in log output.
DEFAULT_SENSITIVE_FIELDS: Final[frozenset[str]] = frozenset({
    "raw_digits",
    "phone_number",
    "full_number",
    "candidate",
})


def get_logger(name: str | None = None, **initial_values: Any) -> Any:
    """Return a structlog logger for *name*, with *initial_values* bound."""
    logger = structlog.get_logger(name)
    if initial_values:
        logger = logger.bind(**initial_values)
    return logger


class SensitiveFieldsFilter:
    """structlog processor replacing values of sensitive keys with ``[REDACTED]``.

    Keys match case-insensitively, at any depth of nested dicts.
    """

    REDACTED = "[REDACTED]"

    def __init__(self, sensitive_fields: frozenset[str] | None = None) -> None:
        self._fields = frozenset(f.lower() for f in (sensitive_fields or DEFAULT_SENSITIVE_FIELDS))

    def redact(self, data: dict[str, Any]) -> dict[str, Any]:
        return {k: (self.REDACTED if k.lower() in self._fields else v) for k, v in data.items()}

    def redact_deep(self, data: dict[str, Any]) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for k, v in data.items():
            if k.lower() in self._fields:
                result[k] = self.REDACTED
            elif isinstance(v, dict):
                result[k] = self.redact_deep(v)
            else:
                result[k] = v
        return result

    def __call__(self, logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG002
        return self.redact_deep(event_dict)


__all__ = ["DEFAULT_SENSITIVE_FIELDS", "SensitiveFieldsFilter", "get_logger"]
