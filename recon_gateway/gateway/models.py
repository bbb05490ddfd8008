from dataclasses import dataclass
from enum import Enum


class ErrorKind(str, Enum):
    """Closed taxonomy of gateway failures."""

    UPSTREAM_REJECTED = "UpstreamRejected"
    EMPTY_SUCCESS = "EmptySuccess"
    MALFORMED_RESPONSE = "MalformedResponse"
    SERVICE_UNAVAILABLE = "ServiceUnavailable"
    TLS_CONFIGURATION_ERROR = "TlsConfigurationError"
    UNKNOWN_TRANSPORT_ERROR = "UnknownTransportError"
    PRECONDITION_FAILED = "PreconditionFailed"


FilePart = tuple[str, tuple[str, bytes, str]]


@dataclass(frozen=True)
class MultipartPayload:
    """Multipart parts ready for transport, in dispatch order."""

    parts: tuple[FilePart, ...]

    def field_names(self) -> list[str]:
        return [name for name, _ in self.parts]


@dataclass(frozen=True)
class UpstreamResponse:
    """Raw reply of the reconciliation service."""

    status_code: int
    content_type: str = ""
    payload: bytes = b""
    content_disposition: str | None = None


@dataclass(frozen=True)
class BinaryArtifact:
    """Downloadable result returned directly by the upstream service."""

    content: bytes
    content_type: str
    file_name: str


@dataclass(frozen=True)
class RedirectArtifact:
    """Result the caller must fetch separately from ``url``."""

    url: str


@dataclass(frozen=True)
class Failure:
    """Terminal failure of one processing request."""

    kind: ErrorKind
    message: str


ProcessResult = BinaryArtifact | RedirectArtifact | Failure
