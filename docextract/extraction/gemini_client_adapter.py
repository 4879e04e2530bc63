import httpx
from google import genai
from google.genai import errors, types

from docextract.extraction.client_base import BaseModelClient
from docextract.extraction.exceptions import ModelError, ModelNetworkError
from docextract.processor.models import EncodedFile


class GeminiClientAdapter(BaseModelClient):
    """Model client built on the google-genai async API."""

    def __init__(self, *, api_key: str) -> None:
        self._client = genai.Client(api_key=api_key)

    async def generate(
        self,
        *,
        model: str,
        temperature: float,
        document: EncodedFile,
        instruction: str,
        json_schema: dict[str, object],
    ) -> str:
        config = types.GenerateContentConfig(
            temperature=temperature,
            response_mime_type="application/json",
            response_schema=json_schema,
        )
        try:
            response = await self._client.aio.models.generate_content(
                model=model,
                contents=[
                    types.Part.from_bytes(
                        data=document.content, mime_type=document.media_type
                    ),
                    instruction,
                ],
                config=config,
            )
        except httpx.HTTPError as exc:
            raise ModelNetworkError(f"Gemini network error: {exc}") from exc
        except errors.APIError as exc:
            raise ModelNetworkError(f"Gemini API error: {exc}") from exc

        text = response.text
        if not text:
            raise ModelError("No data returned from model")
        return text
