"""Gateway between uploaded batches and the reconciliation service."""

from recon_gateway.files.models import FileBatch
from recon_gateway.gateway.assembler import RequestAssembler
from recon_gateway.gateway.client_base import BaseUpstreamClient
from recon_gateway.gateway.error_classifier import ErrorClassifier
from recon_gateway.gateway.exceptions import UpstreamTransportError
from recon_gateway.gateway.models import (
    BinaryArtifact,
    ErrorKind,
    Failure,
    ProcessResult,
    RedirectArtifact,
)
from recon_gateway.gateway.response_normalizer import ResponseNormalizer
from recon_gateway.logging.logger import Log


class ReconciliationGateway:
    """Submits one batch upstream and returns a stable ProcessResult.

    Pipeline: precondition -> assemble -> post -> normalize | classify.
    Upstream and transport failures are returned as ``Failure``, never raised.
    """

    def __init__(
        self,
        *,
        client: BaseUpstreamClient,
        endpoint_url: str,
        assembler: RequestAssembler | None = None,
        normalizer: ResponseNormalizer | None = None,
        classifier: ErrorClassifier | None = None,
    ) -> None:
        self._client = client
        self._endpoint_url = endpoint_url
        self._assembler = assembler or RequestAssembler()
        self._normalizer = normalizer or ResponseNormalizer()
        self._classifier = classifier or ErrorClassifier(endpoint_url)

    @property
    def endpoint_url(self) -> str:
        return self._endpoint_url

    def process(self, batch: FileBatch) -> ProcessResult:
        """Run the full gateway pipeline for one batch."""
        if batch.is_empty:
            Log.warning("Rejected empty batch before contacting the processing service")
            return Failure(ErrorKind.PRECONDITION_FAILED, "No files uploaded")

        payload = self._assembler.assemble(batch)
        Log.info(
            f"Submitting {batch.file_count} files ({batch.total_bytes} bytes) "
            f"as fields [{', '.join(payload.field_names())}] to {self._endpoint_url}"
        )

        try:
            raw = self._client.post_multipart(self._endpoint_url, payload)
        except UpstreamTransportError as exc:
            failure = self._classifier.classify(exc)
            Log.error(f"Processing service call failed: {failure.kind.value}: {exc}")
            return failure

        Log.debug(
            f"Upstream replied {raw.status_code} '{raw.content_type}' "
            f"with {len(raw.payload)} bytes"
        )
        result = self._normalizer.normalize(raw)
        _log_result(result)
        return result


def _log_result(result: ProcessResult) -> None:
    if isinstance(result, BinaryArtifact):
        Log.info(f"Received result file '{result.file_name}' ({len(result.content)} bytes)")
    elif isinstance(result, RedirectArtifact):
        Log.info("Received result download URL")
    else:
        Log.warning(f"Processing failed: {result.kind.value}: {result.message}")
