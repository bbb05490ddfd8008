class GatewayError(Exception):
    """Base exception for all gateway-related errors."""


class PreconditionError(GatewayError):
    """Raised when a request is rejected before any network call."""


class EmptyBatchError(PreconditionError):
    """Raised when a batch carries no files at all."""


class UploadLimitError(PreconditionError):
    """Raised when an upload exceeds the configured count or size limits."""

    def __init__(self, message: str, *, too_large: bool = False) -> None:
        super().__init__(message)
        self.too_large = too_large


class GatewayConfigurationError(GatewayError):
    """Raised when the upstream endpoint is missing or invalid."""


class UpstreamTransportError(GatewayError):
    """Raised when the upstream call fails below the HTTP layer.

    The original transport exception is kept as ``__cause__``.
    """

    def __init__(self, message: str, *, endpoint: str) -> None:
        super().__init__(message)
        self.endpoint = endpoint
