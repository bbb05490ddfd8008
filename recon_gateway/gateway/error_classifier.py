"""Maps transport-level failures onto the gateway's closed error taxonomy."""

import errno
import ssl
from collections.abc import Iterator

import httpx

from recon_gateway.gateway.models import ErrorKind, Failure

_UNREACHABLE_ERRNOS = frozenset({
    errno.ECONNREFUSED,
    errno.EHOSTUNREACH,
    errno.ENETUNREACH,
})
_TLS_MARKERS = ("CERTIFICATE_VERIFY_FAILED", "certificate verify failed")


class ErrorClassifier:
    """Classifies transport errors raised while calling ``endpoint``.

    Messages name the configured endpoint only, never request internals.
    """

    def __init__(self, endpoint: str) -> None:
        self._endpoint = endpoint

    def classify(self, error: BaseException) -> Failure:
        if _is_unreachable(error):
            return Failure(
                ErrorKind.SERVICE_UNAVAILABLE,
                f"Processing service at {self._endpoint} is unavailable",
            )
        if _is_tls_failure(error):
            return Failure(
                ErrorKind.TLS_CONFIGURATION_ERROR,
                f"TLS certificate of {self._endpoint} could not be verified. "
                "Install a trusted certificate or set RECONCILIATION_VERIFY_TLS=false",
            )
        if any(isinstance(exc, httpx.DecodingError) for exc in _chain(error)):
            return Failure(
                ErrorKind.MALFORMED_RESPONSE,
                "Response from the processing service could not be decoded",
            )
        return Failure(
            ErrorKind.UNKNOWN_TRANSPORT_ERROR,
            _root_message(error) or "Error processing files",
        )


def _chain(error: BaseException) -> Iterator[BaseException]:
    """Walk ``error`` and its causes/contexts, outermost first."""
    seen: set[int] = set()
    current: BaseException | None = error
    while current is not None and id(current) not in seen:
        seen.add(id(current))
        yield current
        current = current.__cause__ or current.__context__


def _is_tls_failure(error: BaseException) -> bool:
    for exc in _chain(error):
        if isinstance(exc, ssl.SSLCertVerificationError):
            return True
        if any(marker in str(exc) for marker in _TLS_MARKERS):
            return True
    return False


def _is_unreachable(error: BaseException) -> bool:
    chain = list(_chain(error))
    if _is_tls_failure(error) or any(isinstance(exc, ssl.SSLError) for exc in chain):
        return False
    for exc in chain:
        if isinstance(exc, (httpx.ConnectError, httpx.ConnectTimeout, ConnectionRefusedError)):
            return True
        # any other httpx failure happened on an established connection
        if isinstance(exc, httpx.HTTPError):
            return False
        if isinstance(exc, OSError) and exc.errno in _UNREACHABLE_ERRNOS:
            return True
    return False


def _root_message(error: BaseException) -> str:
    message = ""
    for exc in _chain(error):
        text = str(exc).strip()
        if text:
            message = text
    return message
