"""Turns browser uploads into a FileBatch, enforcing upload limits."""

from fastapi import UploadFile

from recon_gateway.files.models import FileBatch, FileBuffer, FileRole
from recon_gateway.gateway.exceptions import UploadLimitError


class UploadBatchBuilder:
    """Reads uploaded files into memory and groups them by role."""

    def __init__(self, *, max_files_per_role: int, max_file_size_bytes: int) -> None:
        self._max_files_per_role = max_files_per_role
        self._max_file_size_bytes = max_file_size_bytes

    def build(
        self,
        pdf_files: list[UploadFile] | None,
        eml_files: list[UploadFile] | None,
        xlsx_files: list[UploadFile] | None,
    ) -> FileBatch:
        """Read every upload and build the batch.

        Raises:
            UploadLimitError: on too many files for a role or an oversized file.
        """
        xlsx = self._read_all(xlsx_files, FileRole.XLSX, max_count=1)
        return FileBatch(
            pdf_files=self._read_all(pdf_files, FileRole.PDF, self._max_files_per_role),
            eml_files=self._read_all(eml_files, FileRole.EML, self._max_files_per_role),
            xlsx_file=xlsx[0] if xlsx else None,
        )

    def _read_all(
        self,
        uploads: list[UploadFile] | None,
        role: FileRole,
        max_count: int,
    ) -> tuple[FileBuffer, ...]:
        uploads = [u for u in uploads or [] if u.filename or u.size]
        if len(uploads) > max_count:
            raise UploadLimitError(
                f"Too many files for '{role.upload_field_name}': "
                f"{len(uploads)} (max {max_count})"
            )
        return tuple(self._read_one(upload, role) for upload in uploads)

    def _read_one(self, upload: UploadFile, role: FileRole) -> FileBuffer:
        content = upload.file.read(self._max_file_size_bytes + 1)
        if len(content) > self._max_file_size_bytes:
            raise UploadLimitError(
                f"File '{upload.filename}' exceeds the maximum size of "
                f"{self._max_file_size_bytes} bytes",
                too_large=True,
            )
        return FileBuffer(
            content=content,
            file_name=upload.filename or "",
            media_type=upload.content_type or "",
            role=role,
        )
