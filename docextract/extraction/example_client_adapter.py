"""Example model client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseModelClient and register the provider in ExtractionClientFactory.
"""

import json
from typing import Any, ClassVar

from docextract.extraction.client_base import BaseModelClient
from docextract.processor.models import EncodedFile


class ExampleClientAdapter(BaseModelClient):
    """Offline adapter that answers with placeholders for required fields.

    No network calls. Useful for local development and tests: the reply is
    derived from the JSON schema alone, so every document kind works.
    """

    PLACEHOLDERS: ClassVar[dict[str, Any]] = {
        "string": "EXAMPLE",
        "number": 0,
        "array": [],
    }

    async def generate(
        self,
        *,
        model: str,
        temperature: float,
        document: EncodedFile,
        instruction: str,
        json_schema: dict[str, object],
    ) -> str:
        _ = model, temperature, document, instruction
        return json.dumps(self._fill_required(json_schema))

    def _fill_required(self, json_schema: dict[str, Any]) -> dict[str, Any]:
        properties: dict[str, Any] = json_schema.get("properties", {})
        return {
            name: self.PLACEHOLDERS.get(properties.get(name, {}).get("type"))
            for name in json_schema.get("required", [])
        }
