from docextract.extraction.extraction_client import ExtractionClient
from docextract.extraction.response_parser import ResponseParser
from docextract.logging.logger import Log
from docextract.normalization.normalizer import RecordNormalizer
from docextract.processor.file_encoder import FileEncoder
from docextract.processor.pipeline import FileContext, PipelineStep
from docextract.schemas.registry import SchemaRegistry


class EncodeStep(PipelineStep):
    def __init__(self, encoder: FileEncoder) -> None:
        self._encoder = encoder

    async def run(self, context: FileContext) -> FileContext:
        context.encoded = await self._encoder.encode(context.source)
        Log.info(
            f"Loaded {len(context.encoded.content)} bytes from {context.source.name}"
        )
        return context


class ExtractStep(PipelineStep):
    def __init__(self, extraction_client: ExtractionClient) -> None:
        self._extraction_client = extraction_client

    async def run(self, context: FileContext) -> FileContext:
        if context.encoded is None:
            raise ValueError("FileContext.encoded must be set before extraction")
        context.raw_text = await self._extraction_client.extract(
            context.encoded, context.kind
        )
        # The payload is consumed exactly once.
        context.encoded = None
        return context


class ParseStep(PipelineStep):
    def __init__(self, parser: ResponseParser, registry: SchemaRegistry) -> None:
        self._parser = parser
        self._registry = registry

    async def run(self, context: FileContext) -> FileContext:
        context.extraction_result = self._parser.parse(
            context.raw_text,
            schema=self._registry.schema_for(context.kind),
        )
        Log.debug(
            f"Parsed fields for {context.source.name}: "
            f"{list(context.extraction_result.field_names)}"
        )
        return context


class NormalizeStep(PipelineStep):
    def __init__(self, normalizer: RecordNormalizer) -> None:
        self._normalizer = normalizer

    async def run(self, context: FileContext) -> FileContext:
        if context.extraction_result is None:
            raise ValueError("FileContext.extraction_result must be set before normalization")
        context.record = self._normalizer.normalize(
            context.extraction_result,
            context.kind,
            context.source.name,
        )
        return context
