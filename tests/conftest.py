import io
from email.message import EmailMessage

import pytest
from reportlab.lib.pagesizes import letter
from reportlab.pdfgen import canvas

from recon_gateway.files.models import FileBatch, FileBuffer, FileRole

XLSX_MEDIA_TYPE = "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet"


@pytest.fixture()
def sample_pdf_bytes() -> bytes:
    """Generate a minimal single-page PDF with known text content."""
    buf = io.BytesIO()
    c = canvas.Canvas(buf, pagesize=letter)
    c.drawString(72, 720, "Invoice 2024-001 total 1,250.00 EUR")
    c.save()
    return buf.getvalue()


@pytest.fixture()
def sample_eml_bytes() -> bytes:
    """Build a small RFC 822 message referencing the invoice."""
    msg = EmailMessage()
    msg["From"] = "billing@example.com"
    msg["To"] = "ap@example.com"
    msg["Subject"] = "Invoice 2024-001"
    msg.set_content("Please find invoice 2024-001 attached.")
    return msg.as_bytes()


@pytest.fixture()
def sample_xlsx_bytes() -> bytes:
    """Opaque stand-in for a workbook; the gateway never parses it."""
    return b"PK\x03\x04" + b"\x00" * 64


@pytest.fixture()
def pdf_buffer(sample_pdf_bytes: bytes) -> FileBuffer:
    return FileBuffer(
        content=sample_pdf_bytes,
        file_name="invoice.pdf",
        media_type="application/pdf",
        role=FileRole.PDF,
    )


@pytest.fixture()
def eml_buffer(sample_eml_bytes: bytes) -> FileBuffer:
    return FileBuffer(
        content=sample_eml_bytes,
        file_name="invoice.eml",
        media_type="message/rfc822",
        role=FileRole.EML,
    )


@pytest.fixture()
def xlsx_buffer(sample_xlsx_bytes: bytes) -> FileBuffer:
    return FileBuffer(
        content=sample_xlsx_bytes,
        file_name="ledger.xlsx",
        media_type=XLSX_MEDIA_TYPE,
        role=FileRole.XLSX,
    )


@pytest.fixture()
def full_batch(
    pdf_buffer: FileBuffer,
    eml_buffer: FileBuffer,
    xlsx_buffer: FileBuffer,
) -> FileBatch:
    return FileBatch(
        pdf_files=(pdf_buffer,),
        eml_files=(eml_buffer,),
        xlsx_file=xlsx_buffer,
    )
