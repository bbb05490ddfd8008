from typing import Annotated

from fastapi import Depends, FastAPI, File, Request, UploadFile
from fastapi.responses import JSONResponse

from recon_gateway.api.uploads import UploadBatchBuilder
from recon_gateway.config.settings import Settings
from recon_gateway.gateway.contract import http_status_for, to_response_payload
from recon_gateway.gateway.exceptions import UploadLimitError
from recon_gateway.gateway.factory import GatewayFactory
from recon_gateway.gateway.gateway import ReconciliationGateway
from recon_gateway.gateway.models import ErrorKind, Failure
from recon_gateway.logging.logger import Log


def create_app(
    settings: Settings,
    gateway: ReconciliationGateway | None = None,
) -> FastAPI:
    """Build the FastAPI application.

    The gateway is built from settings unless one is injected; a missing
    service URL therefore fails here, at startup.
    """
    app = FastAPI(
        title="Reconciliation Gateway",
        description="Forwards PDF, EML and XLSX batches to the reconciliation service",
    )
    app.state.gateway = gateway or GatewayFactory.create(settings)
    app.state.batch_builder = UploadBatchBuilder(
        max_files_per_role=settings.upload_max_files_per_role,
        max_file_size_bytes=settings.upload_max_file_size_bytes,
    )

    app.add_api_route("/health", health_check, methods=["GET"])
    app.add_api_route("/api/process-files", process_files, methods=["POST"])
    return app


def get_gateway(request: Request) -> ReconciliationGateway:
    return request.app.state.gateway


def get_batch_builder(request: Request) -> UploadBatchBuilder:
    return request.app.state.batch_builder


def health_check() -> dict[str, str]:
    return {"status": "ok"}


def process_files(
    gateway: Annotated[ReconciliationGateway, Depends(get_gateway)],
    batch_builder: Annotated[UploadBatchBuilder, Depends(get_batch_builder)],
    pdf_files: Annotated[list[UploadFile] | None, File(alias="pdfFiles")] = None,
    eml_files: Annotated[list[UploadFile] | None, File(alias="emlFiles")] = None,
    xlsx_file: Annotated[list[UploadFile] | None, File(alias="xlsxFile")] = None,
) -> JSONResponse:
    """Forward an uploaded batch and answer with the stable result contract."""
    try:
        batch = batch_builder.build(pdf_files, eml_files, xlsx_file)
    except UploadLimitError as exc:
        Log.warning(f"Upload rejected: {exc}")
        failure = Failure(ErrorKind.PRECONDITION_FAILED, str(exc))
        return JSONResponse(
            content=to_response_payload(failure),
            status_code=413 if exc.too_large else 400,
        )

    result = gateway.process(batch)
    return JSONResponse(
        content=to_response_payload(result),
        status_code=http_status_for(result),
    )
