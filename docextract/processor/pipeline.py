from abc import ABC, abstractmethod
from dataclasses import dataclass

from docextract.extraction.models import ExtractionResult
from docextract.processor.models import EncodedFile, SourceFile
from docextract.records.models import DocumentKind, NormalizedRecord


@dataclass(slots=True)
class FileContext:
    """State of one file as it moves through the pipeline steps."""

    source: SourceFile
    kind: DocumentKind
    index: int
    encoded: EncodedFile | None = None
    raw_text: str = ""
    extraction_result: ExtractionResult | None = None
    record: NormalizedRecord | None = None


class PipelineStep(ABC):
    @abstractmethod
    async def run(self, context: FileContext) -> FileContext:
        raise NotImplementedError
