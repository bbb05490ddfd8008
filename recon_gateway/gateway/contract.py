"""Outbound result contract consumed by the browser UI."""

from base64 import b64encode
from http import HTTPStatus

from recon_gateway.gateway.models import (
    BinaryArtifact,
    ErrorKind,
    Failure,
    ProcessResult,
    RedirectArtifact,
)

_FAILURE_STATUS: dict[ErrorKind, HTTPStatus] = {
    ErrorKind.EMPTY_SUCCESS: HTTPStatus.OK,
    ErrorKind.PRECONDITION_FAILED: HTTPStatus.BAD_REQUEST,
    ErrorKind.UPSTREAM_REJECTED: HTTPStatus.BAD_GATEWAY,
    ErrorKind.MALFORMED_RESPONSE: HTTPStatus.BAD_GATEWAY,
    ErrorKind.TLS_CONFIGURATION_ERROR: HTTPStatus.BAD_GATEWAY,
    ErrorKind.SERVICE_UNAVAILABLE: HTTPStatus.SERVICE_UNAVAILABLE,
    ErrorKind.UNKNOWN_TRANSPORT_ERROR: HTTPStatus.INTERNAL_SERVER_ERROR,
}


def to_response_payload(result: ProcessResult) -> dict[str, object]:
    """Render a ProcessResult as the JSON body returned to the UI.

    Exactly one of ``binaryData``/``downloadUrl`` is present on success;
    failures carry ``error`` and neither artifact field.
    """
    if isinstance(result, BinaryArtifact):
        return {
            "success": True,
            "binaryData": b64encode(result.content).decode("ascii"),
            "contentType": result.content_type,
            "fileName": result.file_name,
        }
    if isinstance(result, RedirectArtifact):
        return {"success": True, "downloadUrl": result.url}
    payload: dict[str, object] = {"success": False, "error": result.message}
    if result.kind is ErrorKind.EMPTY_SUCCESS:
        payload["message"] = result.message
    return payload


def http_status_for(result: ProcessResult) -> int:
    if isinstance(result, Failure):
        return int(_FAILURE_STATUS[result.kind])
    return int(HTTPStatus.OK)
