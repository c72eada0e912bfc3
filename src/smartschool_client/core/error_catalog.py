"""Per-client cache of server error codes and their messages."""

from __future__ import annotations

import re
from collections.abc import Mapping
from enum import Enum

_BR_RE = re.compile(r"<br\s*/?>", re.IGNORECASE)

# &amp; last, so "&amp;lt;" decodes to a literal "&lt;".
_ENTITY_REPLACEMENTS = (
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&quot;", '"'),
    ("&apos;", "'"),
    ("&amp;", "&"),
)


def decode_entities(text: str) -> str:
    for entity, char in _ENTITY_REPLACEMENTS:
        text = text.replace(entity, char)
    return _BR_RE.sub("\n", text)


def parse_catalog_payload(payload: object) -> dict[str, str]:
    """Validate a decoded ``returnJsonErrorCodes`` response."""

    if not isinstance(payload, Mapping):
        raise TypeError(
            f"error code catalog must decode to a mapping, got {type(payload).__name__}"
        )
    return {str(code): str(message) for code, message in payload.items()}


class CatalogPhase(Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZING = "initializing"
    READY = "ready"


class ErrorCatalog:
    """Error code -> message table, filled at most once per client.

    The initialization guard is advisory: concurrent first calls may both
    fetch the catalog, which only costs a redundant request.
    """

    def __init__(self) -> None:
        self._codes: dict[str, str] = {}
        self._phase = CatalogPhase.UNINITIALIZED

    @property
    def phase(self) -> CatalogPhase:
        return self._phase

    def begin_initialization(self) -> bool:
        """Move to INITIALIZING; return False if someone already did."""

        if self._phase is not CatalogPhase.UNINITIALIZED:
            return False
        self._phase = CatalogPhase.INITIALIZING
        return True

    def populate(self, payload: object) -> None:
        self._codes = parse_catalog_payload(payload)
        self._phase = CatalogPhase.READY

    def mark_ready(self) -> None:
        self._phase = CatalogPhase.READY

    def is_populated(self) -> bool:
        return bool(self._codes)

    def lookup(self, code: str) -> str | None:
        return self._codes.get(code)

    def as_dict(self) -> dict[str, str]:
        return dict(self._codes)

    def __len__(self) -> int:
        return len(self._codes)

    def __contains__(self, code: object) -> bool:
        return code in self._codes


__all__ = [
    "CatalogPhase",
    "ErrorCatalog",
    "decode_entities",
    "parse_catalog_payload",
]
