"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

import logging
from collections.abc import Mapping

from .config import SmartschoolClientConfig
from .core.errors import SmartschoolValidationError
from .endpoints import Endpoint, get_endpoint

logger = logging.getLogger("smartschool_client")


def validate_client_config(config: SmartschoolClientConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise SmartschoolValidationError(str(exc)) from exc


def prepare_invocation(
    method_name: str,
    params: Mapping[str, object],
    extra: Mapping[str, object] | None,
) -> tuple[Endpoint, dict[str, object]]:
    endpoint = get_endpoint(method_name)
    if endpoint.deprecated:
        logger.warning("calling deprecated Smartschool method method=%s", endpoint.name)
    return endpoint, endpoint.build_params(params, extra)


__all__ = [
    "validate_client_config",
    "prepare_invocation",
]
