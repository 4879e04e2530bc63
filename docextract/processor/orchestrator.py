from collections.abc import Sequence

from docextract.config.settings import Settings
from docextract.extraction.exceptions import ExtractionError
from docextract.extraction.factory import ExtractionClientFactory
from docextract.extraction.response_parser import ResponseParser
from docextract.logging.logger import Log
from docextract.normalization.normalizer import RecordNormalizer
from docextract.processor.exceptions import EmptyBatchError, ProcessorError
from docextract.processor.file_encoder import FileEncoder
from docextract.processor.models import BatchRun, BatchStatus, SourceFile
from docextract.processor.pipeline import FileContext, PipelineStep
from docextract.processor.steps import EncodeStep, ExtractStep, NormalizeStep, ParseStep
from docextract.records.models import (
    DocumentKind,
    ExtractionFailure,
    ExtractionSuccess,
    NormalizedRecord,
    RecordOutcome,
)
from docextract.schemas.registry import SchemaRegistry


class BatchOrchestrator:
    """Drives a queue of files through the extraction pipeline.

    Pipeline per file: encode -> extract -> parse -> normalize.

    Files are processed one at a time, in submission order. A failure in any
    step is recorded as an ExtractionFailure for that file and the batch
    moves on, so every submitted file yields exactly one outcome.
    """

    SEQUENTIAL = 1

    def __init__(
        self,
        *,
        steps: Sequence[PipelineStep],
        normalizer: RecordNormalizer,
        max_concurrent_files: int = SEQUENTIAL,
    ) -> None:
        if max_concurrent_files != self.SEQUENTIAL:
            raise ValueError(
                f"max_concurrent_files={max_concurrent_files} is not supported; "
                f"files are processed sequentially"
            )
        self._steps = list(steps)
        self._normalizer = normalizer

    async def run(
        self, files: Sequence[SourceFile], kind: DocumentKind
    ) -> list[NormalizedRecord]:
        """Process *files* and return one record per file, in order.

        Raises:
            EmptyBatchError: if *files* is empty.
        """
        batch = await self.run_batch(files, kind)
        return batch.results

    async def run_batch(self, files: Sequence[SourceFile], kind: DocumentKind) -> BatchRun:
        """Process *files* and return the batch with per-file outcomes.

        Raises:
            EmptyBatchError: if *files* is empty.
        """
        if not files:
            raise EmptyBatchError(f"No files to process for {kind.value} batch")

        batch = BatchRun(kind=kind, pending=list(files))
        batch.status = BatchStatus.PROCESSING
        Log.info(f"Starting {kind.value} batch with {len(batch.pending)} file(s)")

        for index, source in enumerate(list(batch.pending)):
            outcome = await self._process_file(source, kind, index)
            batch.outcomes.append(outcome)
            batch.pending.pop(0)

        batch.status = BatchStatus.COMPLETED
        Log.info(
            f"Finished {kind.value} batch: {len(batch.outcomes)} processed, "
            f"{len(batch.failures)} failed"
        )
        return batch

    async def _process_file(
        self, source: SourceFile, kind: DocumentKind, index: int
    ) -> RecordOutcome:
        Log.info(f"Processing file {index + 1}: {source.name}")
        context = FileContext(source=source, kind=kind, index=index)
        try:
            for step in self._steps:
                context = await step.run(context)
            if context.record is None:
                raise ProcessorError(f"Pipeline produced no record for {source.name}")
        except (ProcessorError, ExtractionError) as exc:
            Log.error(f"Error processing {source.name}: {exc}")
            return self._failure(source, kind, exc)
        except Exception as exc:
            Log.exception(f"Unexpected error processing {source.name}: {exc}")
            return self._failure(source, kind, exc)
        return ExtractionSuccess(record=context.record)

    def _failure(
        self, source: SourceFile, kind: DocumentKind, exc: Exception
    ) -> ExtractionFailure:
        return ExtractionFailure(
            record=self._normalizer.failure_placeholder(kind, source.name),
            reason=f"{type(exc).__name__}: {exc}",
        )


def build_orchestrator(settings: Settings) -> BatchOrchestrator:
    """Build a BatchOrchestrator with all required adapters."""
    registry = SchemaRegistry()
    normalizer = RecordNormalizer()
    steps = [
        EncodeStep(FileEncoder()),
        ExtractStep(ExtractionClientFactory.create(settings)),
        ParseStep(ResponseParser(), registry),
        NormalizeStep(normalizer),
    ]
    return BatchOrchestrator(
        steps=steps,
        normalizer=normalizer,
        max_concurrent_files=settings.max_concurrent_files,
    )
