import mimetypes

from recon_gateway.files.models import FileBatch, FileBuffer, FileRole
from recon_gateway.gateway.exceptions import EmptyBatchError
from recon_gateway.gateway.models import FilePart, MultipartPayload


class RequestAssembler:
    """Builds the multipart payload for the reconciliation service."""

    def assemble(self, batch: FileBatch) -> MultipartPayload:
        """Build one multipart payload from every buffer in the batch.

        Original file names and declared media types are preserved, the
        upstream service uses them to select a parser.

        Raises:
            EmptyBatchError: if the batch carries no files.
        """
        if batch.is_empty:
            raise EmptyBatchError("No files uploaded")
        counters: dict[FileRole, int] = {}
        parts: list[FilePart] = []
        for buffer in batch.buffers():
            index = counters.get(buffer.role, 0) + 1
            counters[buffer.role] = index
            parts.append(self._build_part(buffer, index))
        return MultipartPayload(parts=tuple(parts))

    @staticmethod
    def _build_part(buffer: FileBuffer, index: int) -> FilePart:
        file_name = buffer.file_name.strip() or f"{buffer.role.value}-{index}.{buffer.role.value}"
        media_type = buffer.media_type.strip() or _guess_media_type(file_name, buffer.role)
        return buffer.role.field_name, (file_name, buffer.content, media_type)


def _guess_media_type(file_name: str, role: FileRole) -> str:
    guessed, _ = mimetypes.guess_type(file_name)
    return guessed or role.fallback_media_type
