"""Schema-constrained document extraction through a model provider."""

from typing import ClassVar

from docextract.extraction.client_base import BaseModelClient
from docextract.logging.logger import Log
from docextract.processor.models import EncodedFile
from docextract.records.models import DocumentKind
from docextract.schemas.registry import SchemaRegistry, to_json_schema


class ExtractionClient:
    """Issues one model request per document and returns the raw reply.

    The reply is not parsed or validated here.
    """

    INSTRUCTIONS: ClassVar[dict[DocumentKind, str]] = {
        DocumentKind.INVOICE: (
            "Extract the following invoice data from this document. Return JSON."
        ),
        DocumentKind.BUSINESS_CARD: (
            "Extract contact details from this business card. Return JSON."
        ),
    }

    def __init__(
        self,
        *,
        client: BaseModelClient,
        model: str,
        temperature: float = 0.0,
        registry: SchemaRegistry | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = max(0.0, min(0.2, temperature))
        self._registry = registry if registry is not None else SchemaRegistry()

    async def extract(self, encoded: EncodedFile, kind: DocumentKind) -> str:
        """Send *encoded* with the instruction and schema for *kind*.

        Raises:
            ModelError: if the provider call fails or returns no text.
        """
        json_schema = to_json_schema(self._registry.schema_for(kind))
        Log.debug(
            f"Requesting {kind.value} extraction from {self._model} "
            f"({encoded.media_type}, {len(encoded.content)} bytes)"
        )
        raw = await self._client.generate(
            model=self._model,
            temperature=self._temperature,
            document=encoded,
            instruction=self.INSTRUCTIONS[kind],
            json_schema=json_schema,
        )
        Log.debug(f"Model raw response:\n{raw}")
        return raw
