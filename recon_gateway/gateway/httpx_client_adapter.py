import httpx

from recon_gateway.gateway.client_base import BaseUpstreamClient
from recon_gateway.gateway.exceptions import UpstreamTransportError
from recon_gateway.gateway.models import MultipartPayload, UpstreamResponse
from recon_gateway.logging.logger import Log


class HttpxClientAdapter(BaseUpstreamClient):
    """Upstream client built on httpx.

    A fresh ``httpx.Client`` is opened per call so concurrent requests share
    no connection state. The call blocks until the reply is fully read or the
    timeout expires; it is never cancelled from the outside.
    """

    def __init__(
        self,
        *,
        timeout_seconds: int,
        verify_tls: bool = True,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._timeout = httpx.Timeout(timeout_seconds)
        self._verify_tls = verify_tls
        self._transport = transport
        if not verify_tls:
            Log.warning(
                "TLS certificate verification is disabled for the reconciliation service"
            )

    def post_multipart(self, url: str, payload: MultipartPayload) -> UpstreamResponse:
        try:
            with httpx.Client(
                timeout=self._timeout,
                verify=self._verify_tls,
                transport=self._transport,
            ) as client:
                response = client.post(url, files=list(payload.parts))
                return UpstreamResponse(
                    status_code=response.status_code,
                    content_type=response.headers.get("content-type", ""),
                    payload=response.content,
                    content_disposition=response.headers.get("content-disposition"),
                )
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise UpstreamTransportError(
                f"Reconciliation service transport error: {exc}",
                endpoint=url,
            ) from exc
