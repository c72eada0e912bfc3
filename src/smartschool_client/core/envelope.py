"""SOAP 1.1 request envelope construction."""

from __future__ import annotations

import json
from collections.abc import Mapping
from enum import Enum

from ..config import DEFAULT_NAMESPACE

SOAP_ENV_NS = "http://schemas.xmlsoap.org/soap/envelope/"
XSI_NS = "http://www.w3.org/2001/XMLSchema-instance"

_XML_ESCAPES = {
    "<": "&lt;",
    ">": "&gt;",
    "&": "&amp;",
    "'": "&apos;",
    '"': "&quot;",
}


def escape_xml(text: str) -> str:
    return "".join(_XML_ESCAPES.get(char, char) for char in text)


def _value_to_text(value: object) -> str:
    if isinstance(value, Enum):
        value = value.value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    if isinstance(value, Mapping):
        return json.dumps(dict(value), ensure_ascii=False, separators=(",", ":"))
    if isinstance(value, (list, tuple)):
        return json.dumps(list(value), ensure_ascii=False, separators=(",", ":"))
    return str(value)


def build_envelope(
    method_name: str,
    params: Mapping[str, object],
    *,
    namespace: str = DEFAULT_NAMESPACE,
) -> str:
    """Render ``method_name`` and its parameters as a SOAP request body.

    Parameters are emitted in mapping order. ``None`` values are left out
    entirely: the service treats an empty element differently from a
    missing one.
    """

    lines = [
        '<?xml version="1.0" encoding="utf-8"?>',
        f'<soap:Envelope xmlns:soap="{SOAP_ENV_NS}" xmlns:xsi="{XSI_NS}" xmlns:tns="{namespace}">',
        "  <soap:Body>",
        f"    <tns:{method_name}>",
    ]
    for key, value in params.items():
        if value is None:
            continue
        lines.append(f"      <{key}>{escape_xml(_value_to_text(value))}</{key}>")
    lines.append(f"    </tns:{method_name}>")
    lines.append("  </soap:Body>")
    lines.append("</soap:Envelope>")
    return "\n".join(lines)


__all__ = [
    "SOAP_ENV_NS",
    "XSI_NS",
    "escape_xml",
    "build_envelope",
]
