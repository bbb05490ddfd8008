"""Example upstream client adapter.

Use this module as a reference when implementing new upstream clients.
Implement BaseUpstreamClient and register it in GatewayFactory.
"""

import csv
import io
from typing import ClassVar

from recon_gateway.gateway.client_base import BaseUpstreamClient
from recon_gateway.gateway.models import MultipartPayload, UpstreamResponse


class ExampleClientAdapter(BaseUpstreamClient):
    """Example client that answers with a CSV listing the submitted files.

    No network calls. Useful for local development without the
    reconciliation service, and as a template for real clients.
    """

    CONTENT_TYPE: ClassVar[str] = "text/csv"
    HEADER: ClassVar[tuple[str, ...]] = ("field", "file_name", "media_type", "size_bytes")

    def post_multipart(self, url: str, payload: MultipartPayload) -> UpstreamResponse:
        _ = url
        buf = io.StringIO()
        writer = csv.writer(buf, lineterminator="\n")
        writer.writerow(self.HEADER)
        for field_name, (file_name, content, media_type) in payload.parts:
            writer.writerow((field_name, file_name, media_type, len(content)))
        return UpstreamResponse(
            status_code=200,
            content_type=self.CONTENT_TYPE,
            payload=buf.getvalue().encode("utf-8"),
        )
