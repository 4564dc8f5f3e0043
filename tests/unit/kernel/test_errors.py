"""Unit tests for the error hierarchy."""

from __future__ import annotations

import pytest

from country_code_picker.config import ConfigError, InvalidSettingValueError
from country_code_picker.kernel.errors import (
    ApplicationError,
    BaseError,
    DomainError,
    NotFoundError,
    ValidationError,
)


class TestBaseError:
    def test_message_is_str(self) -> None:
        err = BaseError("something went wrong")
        assert err.message == "something went wrong"
        assert str(err) == "something went wrong"

    def test_default_code(self) -> None:
        assert BaseError("m").code == "picker_error"

    def test_custom_code(self) -> None:
        assert BaseError("m", code="custom").code == "custom"

    def test_to_dict_basic(self) -> None:
        err = BaseError("m", code="my_code", detail={"key": "val"})
        assert err.to_dict() == {"code": "my_code", "message": "m", "detail": {"key": "val"}}

    def test_to_dict_omits_empty_detail(self) -> None:
        assert BaseError("m").to_dict() == {"code": "picker_error", "message": "m"}

    def test_to_dict_includes_chained_cause(self) -> None:
        with pytest.raises(ApplicationError) as exc_info:
            try:
                raise ValueError("original")
            except ValueError as exc:
                raise ApplicationError("wrapper") from exc
        assert "original" in exc_info.value.to_dict()["cause"]

    def test_repr_contains_code_and_message(self) -> None:
        assert repr(BaseError("hello", code="hi")) == "BaseError(hi: hello)"


class TestNotFoundError:
    def test_catalog_miss(self) -> None:
        err = NotFoundError("Country", "zz")
        assert err.message == "Country 'zz' not found in the catalog"
        assert err.resource == "Country"
        assert err.identifier == "zz"
        assert err.restricted is False
        assert err.code == "country_not_found"

    def test_restricted_miss(self) -> None:
        err = NotFoundError("Country", "ug", restricted=True)
        assert err.message == "Country 'ug' not found in the allowed countries"
        assert err.detail == {"resource": "Country", "identifier": "ug", "restricted": True}

    def test_without_identifier(self) -> None:
        err = NotFoundError("Country")
        assert err.message == "Country not found in the catalog"
        assert err.identifier is None

    def test_is_domain_error(self) -> None:
        assert isinstance(NotFoundError("Country", "zz"), DomainError)


class TestValidationError:
    def test_stores_errors(self) -> None:
        err = ValidationError("invalid", errors=[{"field": "phone_no_code", "value": "254"}])
        assert err.to_dict()["errors"][0]["field"] == "phone_no_code"
        assert err.fields == {"phone_no_code"}

    def test_empty_errors_default(self) -> None:
        err = ValidationError("bad input")
        assert err.errors == []
        assert err.fields == set()

    def test_accepts_detail(self) -> None:
        assert ValidationError("bad", detail={"row": 3}).detail == {"row": 3}


class TestApplicationErrors:
    def test_config_error_is_application_error(self) -> None:
        assert issubclass(ConfigError, ApplicationError)

    def test_application_error_code(self) -> None:
        assert ApplicationError("x").code == "application_error"

    def test_domain_and_application_are_disjoint(self) -> None:
        assert not issubclass(NotFoundError, ApplicationError)
        assert not issubclass(InvalidSettingValueError, DomainError)

    @pytest.mark.parametrize("cls", [DomainError, ValidationError, ApplicationError, ConfigError])
    def test_all_are_base_errors(self, cls: type[BaseError]) -> None:
        assert issubclass(cls, BaseError)
