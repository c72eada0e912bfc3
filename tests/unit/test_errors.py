from __future__ import annotations

import pytest

from smartschool_client.core.error_catalog import ErrorCatalog
from smartschool_client.core.errors import (
    SmartschoolApiError,
    SmartschoolClientClosedError,
    SmartschoolDecodeError,
    SmartschoolError,
    SmartschoolTransportError,
    SmartschoolValidationError,
    classify_decoded_result,
)


@pytest.fixture
def catalog(error_codes) -> ErrorCatalog:
    catalog = ErrorCatalog()
    catalog.populate(error_codes)
    return catalog


def test_classify_known_code_maps_to_domain_error(catalog: ErrorCatalog):
    err = classify_decoded_result("12", catalog)
    assert isinstance(err, SmartschoolError)
    assert err.code == "12"
    assert str(err) == "Deze gebruiker bestaat niet"


def test_classify_decodes_entities_in_message(catalog: ErrorCatalog):
    err = classify_decoded_result("4", catalog)
    assert err is not None
    assert "\n" in err.message
    assert "&lt;" not in err.message


@pytest.mark.parametrize("code", ["0", "999", None])
def test_classify_unknown_code_returns_none(catalog: ErrorCatalog, code: str | None):
    assert classify_decoded_result(code, catalog) is None


def test_classify_with_empty_catalog_returns_none():
    assert classify_decoded_result("12", ErrorCatalog()) is None


@pytest.mark.parametrize(
    "error_type",
    [
        SmartschoolError,
        SmartschoolTransportError,
        SmartschoolDecodeError,
        SmartschoolValidationError,
        SmartschoolClientClosedError,
    ],
)
def test_all_errors_share_base_class(error_type: type[Exception]):
    assert issubclass(error_type, SmartschoolApiError)


def test_domain_error_carries_code_and_cause():
    err = SmartschoolError("Dubbele gebruikersnaam", code="15")
    assert err.code == "15"
    assert err.cause == "domain"
    assert err.http_status is None
