import json
import re
from typing import ClassVar

from docextract.extraction.exceptions import ParseError
from docextract.extraction.models import ExtractionResult
from docextract.schemas.models import SchemaDefinition


class ResponseParser:
    """Turns raw model text into an ExtractionResult."""

    _FENCE_RE: ClassVar[re.Pattern[str]] = re.compile(
        r"^```[\w-]*\s*(.*?)\s*(?:```)?\s*$", re.DOTALL
    )

    def parse(self, text: str, schema: SchemaDefinition | None = None) -> ExtractionResult:
        """Deserialize *text* as a JSON object.

        Missing fields stay absent; when *schema* is given, keys it does not
        declare are dropped.

        Raises:
            ParseError: if *text* is not valid JSON or not a JSON object.
        """
        cleaned = self._strip_code_fences(text)
        try:
            parsed = json.loads(cleaned)
        except (json.JSONDecodeError, RecursionError) as exc:
            raise ParseError(f"Failed to parse model response: {exc}") from exc

        if not isinstance(parsed, dict):
            raise ParseError("Model response must be a JSON object")
        if schema is not None:
            declared = set(schema.field_names)
            parsed = {k: v for k, v in parsed.items() if k in declared}
        return ExtractionResult(values=parsed)

    @classmethod
    def _strip_code_fences(cls, raw: str) -> str:
        cleaned = raw.strip()
        match = cls._FENCE_RE.match(cleaned)
        if match is None:
            return cleaned
        return match.group(1)
