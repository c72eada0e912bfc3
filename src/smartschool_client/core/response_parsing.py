"""Best-effort decoding of Smartschool response bodies.

The service is not consistent about how it answers: some methods return a
bare status code, some return JSON inside the SOAP body, some a base64
encoded envelope and some plain XML fragments. ``decode_response`` tries a
fixed cascade of strategies and returns the result of the first one that
matches:

1. already-decoded values are passed through unchanged
2. the whole body parsed as JSON
3. the first JSON object/array inside ``<SOAP-ENV:Body>``
4. base64 unwrapping (the remaining steps run on the decoded text)
5. the content of the first ``<return>`` element
6. a flat ``{tag: value}`` mapping of the remaining tag pairs, or the trimmed
   text itself when there are none, so decoding a plain string twice is a no-op
"""

from __future__ import annotations

import base64
import binascii
import json
import re

from .errors import SmartschoolDecodeError

_SOAP_BODY_RE = re.compile(
    r"<SOAP-ENV:Body[^>]*>(.*?)</SOAP-ENV:Body>",
    re.IGNORECASE | re.DOTALL,
)
_BASE64_RE = re.compile(r"[A-Za-z0-9+/]+={0,2}")
_RETURN_RE = re.compile(r"<return[^>]*>(.*?)</return>", re.IGNORECASE | re.DOTALL)
_TAG_PAIR_RE = re.compile(r"<([^>\s]+)>(.*?)</\1>", re.DOTALL)
_DIGITS_RE = re.compile(r"[0-9]+")
_NAMESPACE_PREFIX_RE = re.compile(r"^.*:")

_NO_MATCH = object()


def _reject_constant(name: str) -> object:
    raise ValueError(f"invalid JSON constant {name}")


_JSON_DECODER = json.JSONDecoder(parse_constant=_reject_constant)


def _loads(text: str) -> object:
    return _JSON_DECODER.decode(text)


def _parse_soap_body_json(text: str) -> object:
    match = _SOAP_BODY_RE.search(text)
    if match is None:
        return _NO_MATCH
    body = match.group(1).strip()
    start = next((index for index, char in enumerate(body) if char in "[{"), None)
    if start is None:
        return _NO_MATCH
    try:
        value, _end = _JSON_DECODER.raw_decode(body, start)
    except ValueError:
        return _NO_MATCH
    return value


def _unwrap_base64(text: str) -> str | None:
    if _BASE64_RE.fullmatch(text) is None:
        return None
    data = text.rstrip("=")
    if len(data) % 4 == 1:
        return None
    # Padding is optional on the wire.
    data += "=" * (-len(data) % 4)
    try:
        decoded = base64.b64decode(data, validate=True).decode("utf-8")
    except (binascii.Error, UnicodeDecodeError):
        return None
    # Plain words are valid base64 too; only accept wrapped markup.
    if "<" not in decoded:
        return None
    return decoded


def _parse_return(text: str) -> object:
    match = _RETURN_RE.search(text)
    if match is None:
        return _NO_MATCH
    content = match.group(1).strip()
    try:
        return _loads(content)
    except ValueError:
        pass
    if _DIGITS_RE.fullmatch(content):
        return int(content)
    return content


def _flatten_tags(text: str) -> dict[str, object] | str:
    result: dict[str, object] = {}
    for match in _TAG_PAIR_RE.finditer(text):
        key = _NAMESPACE_PREFIX_RE.sub("", match.group(1))
        value = match.group(2)
        try:
            result[key] = _loads(value)
        except ValueError:
            result[key] = value.strip()
    if not result:
        return text.strip()
    return result


def _decode_text(text: str) -> object:
    try:
        return _loads(text)
    except ValueError:
        pass

    value = _parse_soap_body_json(text)
    if value is not _NO_MATCH:
        return value

    unwrapped = _unwrap_base64(text)
    if unwrapped is not None:
        text = unwrapped

    value = _parse_return(text)
    if value is not _NO_MATCH:
        return value
    return _flatten_tags(text)


def decode_response(raw: object) -> object:
    """Normalize a raw response body into a Python value.

    Decoding an already-decoded (non-string) value is a no-op, so the
    function may safely be applied twice.
    """

    if raw is None:
        raise SmartschoolDecodeError(
            "Failed to parse response: response must be either an object or a string",
            cause="decode",
        )
    if not isinstance(raw, (str, bytes, bytearray)):
        return raw
    try:
        text = raw.decode("utf-8") if isinstance(raw, (bytes, bytearray)) else raw
        return _decode_text(text)
    except (ValueError, TypeError) as exc:
        raise SmartschoolDecodeError(
            f"Failed to parse response: {exc}",
            cause="decode",
        ) from exc


__all__ = [
    "decode_response",
]
