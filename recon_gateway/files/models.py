"""In-memory upload buffers grouped by the role the reconciliation service expects."""

from dataclasses import dataclass, field
from enum import Enum


class FileRole(str, Enum):
    """Closed set of file roles accepted by the reconciliation service."""

    PDF = "pdf"
    EML = "eml"
    XLSX = "xlsx"

    @property
    def field_name(self) -> str:
        """Multipart field name required by the upstream service."""
        return self.value

    @property
    def upload_field_name(self) -> str:
        """Multipart field name used by the browser upload form."""
        return _UPLOAD_FIELD_NAMES[self]

    @property
    def fallback_media_type(self) -> str:
        return _FALLBACK_MEDIA_TYPES[self]


_UPLOAD_FIELD_NAMES: dict[FileRole, str] = {
    FileRole.PDF: "pdfFiles",
    FileRole.EML: "emlFiles",
    FileRole.XLSX: "xlsxFile",
}

_FALLBACK_MEDIA_TYPES: dict[FileRole, str] = {
    FileRole.PDF: "application/pdf",
    FileRole.EML: "message/rfc822",
    FileRole.XLSX: "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
}


@dataclass(frozen=True)
class FileBuffer:
    """One uploaded file held in memory for the duration of a request."""

    content: bytes
    file_name: str
    media_type: str
    role: FileRole

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(frozen=True)
class FileBatch:
    """Files submitted in one processing request.

    Raises:
        ValueError: if a buffer is placed under a role it does not carry.
    """

    pdf_files: tuple[FileBuffer, ...] = field(default_factory=tuple)
    eml_files: tuple[FileBuffer, ...] = field(default_factory=tuple)
    xlsx_file: FileBuffer | None = None

    def __post_init__(self) -> None:
        _require_role(self.pdf_files, FileRole.PDF)
        _require_role(self.eml_files, FileRole.EML)
        if self.xlsx_file is not None:
            _require_role((self.xlsx_file,), FileRole.XLSX)

    @property
    def is_empty(self) -> bool:
        return not self.pdf_files and not self.eml_files and self.xlsx_file is None

    @property
    def file_count(self) -> int:
        return len(self.pdf_files) + len(self.eml_files) + (1 if self.xlsx_file else 0)

    @property
    def total_bytes(self) -> int:
        return sum(buffer.size for buffer in self.buffers())

    def buffers(self) -> list[FileBuffer]:
        """All buffers in dispatch order: pdf, then eml, then xlsx."""
        ordered = [*self.pdf_files, *self.eml_files]
        if self.xlsx_file is not None:
            ordered.append(self.xlsx_file)
        return ordered


def _require_role(buffers: tuple[FileBuffer, ...], role: FileRole) -> None:
    for buffer in buffers:
        if buffer.role is not role:
            raise ValueError(
                f"File '{buffer.file_name}' has role '{buffer.role.value}', "
                f"expected '{role.value}'"
            )
