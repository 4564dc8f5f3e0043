"""Error hierarchy.

Hierarchy::

    BaseError
    ├── DomainError
    │   ├── ValidationError     malformed country record, snapshot or input
    │   └── NotFoundError       country missing from the catalog / active subset
    └── ApplicationError
        └── ConfigError         (country_code_picker.config.errors)

Every error carries a machine-readable ``code`` and a ``detail`` dict that a
host UI can show or log without parsing the message.
"""

from __future__ import annotations

from typing import Any


class BaseError(Exception):
    """Root of the error hierarchy."""

    default_code: str = "picker_error"

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        detail: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.detail: dict[str, Any] = dict(detail or {})

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.code}: {self.message})"

    def to_dict(self) -> dict[str, Any]:
        """Plain-dict form for logs and host error surfaces.

        The chained exception (``raise ... from``), if any, is included as
        ``cause``.
        """
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.detail:
            payload["detail"] = self.detail
        if self.__cause__ is not None:
            payload["cause"] = repr(self.__cause__)
        return payload


class DomainError(BaseError):
    """A picker rule was broken."""

    default_code = "domain_error"


class ValidationError(DomainError):
    """Malformed data; ``errors`` lists one ``{"field": ..., ...}`` per problem."""

    default_code = "validation_error"

    def __init__(
        self,
        message: str,
        *,
        errors: list[dict[str, Any]] | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(message, **kwargs)
        self.errors: list[dict[str, Any]] = errors or []

    @property
    def fields(self) -> set[str]:
        return {e["field"] for e in self.errors if "field" in e}

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload["errors"] = self.errors
        return payload


class NotFoundError(DomainError):
    """A country code has no entry, or is outside the selectable subset.

    ``restricted`` is true when an allow-list was in force, i.e. the code
    may exist in the catalog but was not selectable.
    """

    default_code = "country_not_found"

    def __init__(self, resource: str, identifier: Any = None, *, restricted: bool = False) -> None:
        where = "in the allowed countries" if restricted else "in the catalog"
        label = resource if identifier is None else f"{resource} {identifier!r}"
        super().__init__(
            f"{label} not found {where}",
            detail={"resource": resource, "identifier": identifier, "restricted": restricted},
        )
        self.resource = resource
        self.identifier = identifier
        self.restricted = restricted


class ApplicationError(BaseError):
    """Wiring or configuration failure outside the picker rules."""

    default_code = "application_error"


__all__ = [
    "ApplicationError",
    "BaseError",
    "DomainError",
    "NotFoundError",
    "ValidationError",
]
