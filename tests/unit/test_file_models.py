"""Tests for upload buffer and batch models."""

import dataclasses

import pytest

from recon_gateway.files.models import FileBatch, FileBuffer, FileRole


def _buffer(role: FileRole, name: str = "f", content: bytes = b"x") -> FileBuffer:
    return FileBuffer(content=content, file_name=name, media_type="", role=role)


class TestFileRole:
    def test_outbound_field_names(self) -> None:
        assert [r.field_name for r in FileRole] == ["pdf", "eml", "xlsx"]

    def test_upload_field_names(self) -> None:
        assert FileRole.PDF.upload_field_name == "pdfFiles"
        assert FileRole.EML.upload_field_name == "emlFiles"
        assert FileRole.XLSX.upload_field_name == "xlsxFile"

    def test_fallback_media_types(self) -> None:
        assert FileRole.PDF.fallback_media_type == "application/pdf"
        assert FileRole.EML.fallback_media_type == "message/rfc822"


class TestFileBuffer:
    def test_frozen(self, pdf_buffer: FileBuffer) -> None:
        with pytest.raises(dataclasses.FrozenInstanceError):
            pdf_buffer.file_name = "other.pdf"  # type: ignore[misc]

    def test_size(self) -> None:
        assert _buffer(FileRole.PDF, content=b"12345").size == 5


class TestFileBatch:
    def test_empty_batch(self) -> None:
        batch = FileBatch()
        assert batch.is_empty
        assert batch.file_count == 0
        assert batch.buffers() == []

    def test_single_xlsx_is_not_empty(self, xlsx_buffer: FileBuffer) -> None:
        batch = FileBatch(xlsx_file=xlsx_buffer)
        assert not batch.is_empty
        assert batch.file_count == 1

    def test_buffers_in_dispatch_order(self) -> None:
        p1, p2 = _buffer(FileRole.PDF, "a.pdf"), _buffer(FileRole.PDF, "b.pdf")
        e1 = _buffer(FileRole.EML, "c.eml")
        x = _buffer(FileRole.XLSX, "d.xlsx")
        batch = FileBatch(pdf_files=(p1, p2), eml_files=(e1,), xlsx_file=x)
        assert [b.file_name for b in batch.buffers()] == ["a.pdf", "b.pdf", "c.eml", "d.xlsx"]

    def test_total_bytes(self) -> None:
        batch = FileBatch(
            pdf_files=(_buffer(FileRole.PDF, content=b"abc"),),
            eml_files=(_buffer(FileRole.EML, content=b"de"),),
        )
        assert batch.total_bytes == 5

    def test_rejects_buffer_under_wrong_role(self) -> None:
        with pytest.raises(ValueError, match="expected 'pdf'"):
            FileBatch(pdf_files=(_buffer(FileRole.EML, "mail.eml"),))

    def test_rejects_wrong_role_for_xlsx(self) -> None:
        with pytest.raises(ValueError, match="expected 'xlsx'"):
            FileBatch(xlsx_file=_buffer(FileRole.PDF, "doc.pdf"))
