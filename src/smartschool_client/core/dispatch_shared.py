"""Shared request/response steps for sync/async dispatchers."""

from __future__ import annotations

from collections.abc import Mapping

from .error_catalog import ErrorCatalog
from .errors import SmartschoolValidationError, classify_decoded_result
from .response_parsing import decode_response

ACCESSCODE_PARAM = "accesscode"
ERROR_CODES_METHOD = "returnJsonErrorCodes"


def build_call_params(
    method_name: str,
    params: Mapping[str, object] | None,
    *,
    accesscode: str,
    needs_auth: bool,
) -> dict[str, object]:
    """Prepend the access code to the caller's parameters.

    The access code is managed by the client; a caller-supplied
    ``accesscode`` key is rejected rather than allowed to replace it.
    """

    if not method_name:
        raise SmartschoolValidationError("method_name must not be empty")
    params = params or {}
    if ACCESSCODE_PARAM in params:
        raise SmartschoolValidationError(
            f"{ACCESSCODE_PARAM!r} is set by the client and must not be passed in params"
        )
    call_params: dict[str, object] = {
        ACCESSCODE_PARAM: accesscode if needs_auth else None,
    }
    call_params.update(params)
    return call_params


def stringify_result(value: object) -> str | None:
    """Text form of a decoded value used for error code lookup.

    Mappings and sequences never stand for a code, so a list such as
    ``[12]`` is returned as a value rather than matched against the catalog.
    """

    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, (str, int, float)):
        return str(value)
    return None


def resolve_decoded_result(decoded: object, catalog: ErrorCatalog) -> object:
    """Turn a decoded body into the call result or raise the matching domain error."""

    code = stringify_result(decoded)
    error = classify_decoded_result(code, catalog)
    if error is not None:
        raise error
    if code == "0":
        return True
    # A <return> element may itself hold XML or JSON text; decode it once more.
    return decode_response(decoded)


__all__ = [
    "ACCESSCODE_PARAM",
    "ERROR_CODES_METHOD",
    "build_call_params",
    "stringify_result",
    "resolve_decoded_result",
]
