import asyncio
import base64
import mimetypes
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from docextract.records.models import (
    DocumentKind,
    ExtractionFailure,
    NormalizedRecord,
    RecordOutcome,
)

DEFAULT_MEDIA_TYPE = "application/octet-stream"


class SourceFile(ABC):
    """A user-supplied file as handed over by the upload boundary."""

    name: str
    media_type: str

    @abstractmethod
    async def read(self) -> bytes:
        """Return the full binary content of the file."""


class InMemorySourceFile(SourceFile):
    """Upload whose bytes are already held in memory."""

    def __init__(self, name: str, content: bytes, media_type: str) -> None:
        self.name = name
        self.media_type = media_type
        self._content = content

    async def read(self) -> bytes:
        return self._content

    def __repr__(self) -> str:
        return f"InMemorySourceFile(name={self.name!r}, media_type={self.media_type!r})"


class LocalSourceFile(SourceFile):
    """File on local disk; media type is guessed from the extension."""

    def __init__(self, path: Path, media_type: str | None = None) -> None:
        self.path = path
        self.name = path.name
        if media_type is None:
            guessed, _ = mimetypes.guess_type(path.name)
            media_type = guessed or DEFAULT_MEDIA_TYPE
        self.media_type = media_type

    async def read(self) -> bytes:
        return await asyncio.to_thread(self.path.read_bytes)

    def __repr__(self) -> str:
        return f"LocalSourceFile(path={str(self.path)!r}, media_type={self.media_type!r})"


@dataclass(frozen=True)
class EncodedFile:
    """Transport-ready payload for a single model request."""

    content: bytes
    media_type: str

    @property
    def base64_content(self) -> str:
        return base64.b64encode(self.content).decode("ascii")

    def __repr__(self) -> str:
        return f"EncodedFile(media_type={self.media_type!r}, size={len(self.content)})"


class BatchStatus(str, Enum):
    IDLE = "idle"
    PROCESSING = "processing"
    COMPLETED = "completed"


@dataclass
class BatchRun:
    """Transient state of one batch: queue, status and per-file outcomes."""

    kind: DocumentKind
    pending: list[SourceFile] = field(default_factory=list)
    status: BatchStatus = BatchStatus.IDLE
    outcomes: list[RecordOutcome] = field(default_factory=list)

    @property
    def results(self) -> list[NormalizedRecord]:
        """Records in submission order, failures flattened to placeholders."""
        return [outcome.record for outcome in self.outcomes]

    @property
    def failures(self) -> list[ExtractionFailure]:
        return [o for o in self.outcomes if isinstance(o, ExtractionFailure)]

    def reset(self) -> None:
        """Clear queue and results after the consumer is done with them."""
        self.pending = []
        self.outcomes = []
        self.status = BatchStatus.IDLE
