from docextract.logging.logger import Log
from docextract.processor.exceptions import EncodingError
from docextract.processor.models import EncodedFile, SourceFile


class FileEncoder:
    """Reads a source file into a payload the model capability accepts."""

    async def encode(self, source: SourceFile) -> EncodedFile:
        """Read the full content and declared media type of *source*.

        Raises:
            EncodingError: if the underlying read fails.
        """
        try:
            content = await source.read()
        except OSError as exc:
            raise EncodingError(f"Failed to read '{source.name}': {exc}") from exc
        except Exception as exc:
            raise EncodingError(f"Unreadable stream '{source.name}': {exc}") from exc

        if not isinstance(content, bytes):
            raise EncodingError(
                f"Source '{source.name}' returned {type(content).__name__}, expected bytes"
            )
        Log.debug(f"Encoded {len(content)} bytes from {source.name} ({source.media_type})")
        return EncodedFile(content=content, media_type=source.media_type)
