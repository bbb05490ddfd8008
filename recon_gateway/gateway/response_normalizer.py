"""Classifies raw upstream replies into a single ProcessResult."""

import binascii
import json
from base64 import b64decode
from email.message import Message
from pathlib import PurePosixPath
from typing import Any

from recon_gateway.gateway.models import (
    BinaryArtifact,
    ErrorKind,
    Failure,
    ProcessResult,
    RedirectArtifact,
    UpstreamResponse,
)

DEFAULT_FILE_NAME = "processed_data.csv"
DEFAULT_CONTENT_TYPE = "text/csv"

_BINARY_CONTENT_TYPES = ("text/csv", "application/octet-stream")
_EMPTY_SUCCESS_MESSAGE = "Processing finished but the service returned no result file"
_MALFORMED_MESSAGE = "Unexpected response from the processing service"
_REPLACEMENT_CHAR = "\ufffd"


class ResponseNormalizer:
    """Maps every upstream reply to exactly one ProcessResult variant.

    Precedence: HTTP status, then binary content type, then the JSON body's
    ``success`` field. Anything that matches none of these is malformed.
    Holds no mutable state, so repeated calls on the same reply agree.
    """

    def __init__(
        self,
        *,
        default_file_name: str = DEFAULT_FILE_NAME,
        default_content_type: str = DEFAULT_CONTENT_TYPE,
    ) -> None:
        self._default_file_name = default_file_name
        self._default_content_type = default_content_type

    def normalize(self, raw: UpstreamResponse) -> ProcessResult:
        if not 200 <= raw.status_code < 300:
            return self._rejected_by_status(raw)
        if _is_binary_content_type(raw.content_type):
            return BinaryArtifact(
                content=raw.payload,
                content_type=raw.content_type,
                file_name=_disposition_file_name(raw.content_disposition)
                or self._default_file_name,
            )
        body = _parse_json_object(raw.payload)
        if body is None:
            return Failure(ErrorKind.MALFORMED_RESPONSE, _MALFORMED_MESSAGE)
        return self._classify_json(body)

    def _rejected_by_status(self, raw: UpstreamResponse) -> Failure:
        message = None
        if not _is_binary_content_type(raw.content_type):
            body = _parse_json_object(raw.payload)
            message = _declared_message(body) if body is not None else None
        return Failure(
            ErrorKind.UPSTREAM_REJECTED,
            message or f"Upstream service returned HTTP {raw.status_code}",
        )

    def _classify_json(self, body: dict[str, Any]) -> ProcessResult:
        success = body.get("success")
        if success is False:
            return Failure(
                ErrorKind.UPSTREAM_REJECTED,
                _declared_message(body) or "Processing service reported a failure",
            )
        if success is not True:
            return Failure(ErrorKind.MALFORMED_RESPONSE, _MALFORMED_MESSAGE)

        binary_data = _non_empty_str(body.get("binaryData"))
        if binary_data is not None:
            return self._inline_artifact(body, binary_data)
        download_url = _non_empty_str(body.get("downloadUrl"))
        if download_url is not None:
            return RedirectArtifact(url=download_url)
        return Failure(
            ErrorKind.EMPTY_SUCCESS,
            _non_empty_str(body.get("message")) or _EMPTY_SUCCESS_MESSAGE,
        )

    def _inline_artifact(self, body: dict[str, Any], encoded: str) -> ProcessResult:
        try:
            content = b64decode(encoded, validate=True)
        except (binascii.Error, ValueError):
            return Failure(ErrorKind.MALFORMED_RESPONSE, _MALFORMED_MESSAGE)
        return BinaryArtifact(
            content=content,
            content_type=_non_empty_str(body.get("contentType")) or self._default_content_type,
            file_name=_safe_file_name(body.get("fileName")) or self._default_file_name,
        )


def _is_binary_content_type(content_type: str) -> bool:
    return content_type.strip().lower().startswith(_BINARY_CONTENT_TYPES)


def _parse_json_object(payload: bytes) -> dict[str, Any] | None:
    if not payload.strip():
        return None
    try:
        parsed = json.loads(payload)
    except (ValueError, RecursionError):
        return None
    return parsed if isinstance(parsed, dict) else None


def _declared_message(body: dict[str, Any]) -> str | None:
    return _non_empty_str(body.get("message")) or _non_empty_str(body.get("error"))


def _non_empty_str(value: object) -> str | None:
    if isinstance(value, str) and value.strip():
        return value
    return None


def _disposition_file_name(header: str | None) -> str | None:
    """Download name declared in a Content-Disposition header, if usable."""
    if not header:
        return None
    message = Message()
    message["content-disposition"] = header
    return _safe_file_name(message.get_filename())


def _safe_file_name(value: object) -> str | None:
    """Reduce an upstream-declared name to a plain basename."""
    name = _non_empty_str(value)
    if name is None:
        return None
    base_name = PurePosixPath(name.replace("\\", "/")).name.strip()
    if base_name in ("", ".", "..") or _REPLACEMENT_CHAR in base_name:
        return None
    return base_name
