from abc import ABC, abstractmethod

from recon_gateway.gateway.models import MultipartPayload, UpstreamResponse


class BaseUpstreamClient(ABC):
    """Contract for clients that deliver a batch to the reconciliation service."""

    @abstractmethod
    def post_multipart(self, url: str, payload: MultipartPayload) -> UpstreamResponse:
        """Send ``payload`` as one multipart POST and return the raw reply.

        Raises:
            UpstreamTransportError: when no HTTP reply could be obtained.
        """
