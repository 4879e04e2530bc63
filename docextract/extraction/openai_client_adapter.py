import httpx
import openai

from docextract.extraction.client_base import BaseModelClient
from docextract.extraction.exceptions import ModelError, ModelNetworkError
from docextract.processor.models import EncodedFile


class OpenAIClientAdapter(BaseModelClient):
    """Model client built on the OpenAI-compatible chat API."""

    def __init__(
        self,
        *,
        api_key: str,
        timeout_seconds: int,
        base_url: str | None = None,
    ) -> None:
        self._client = openai.AsyncOpenAI(
            api_key=api_key,
            timeout=timeout_seconds,
            base_url=base_url,
        )

    async def generate(
        self,
        *,
        model: str,
        temperature: float,
        document: EncodedFile,
        instruction: str,
        json_schema: dict[str, object],
    ) -> str:
        try:
            response = await self._client.chat.completions.create(
                model=model,
                temperature=temperature,
                response_format={
                    "type": "json_schema",
                    "json_schema": {
                        "name": "extraction_result",
                        "strict": False,
                        "schema": json_schema,
                    },
                },
                messages=[
                    {
                        "role": "user",
                        "content": [
                            self._document_part(document),
                            {"type": "text", "text": instruction},
                        ],
                    },
                ],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise ModelNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIError as exc:
            raise ModelNetworkError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise ModelError("AI returned no choices")
        text = response.choices[0].message.content
        if not text:
            raise ModelError("No data returned from model")
        return text

    @staticmethod
    def _document_part(document: EncodedFile) -> dict[str, object]:
        data_url = f"data:{document.media_type};base64,{document.base64_content}"
        if document.media_type.startswith("image/"):
            return {"type": "image_url", "image_url": {"url": data_url}}
        return {
            "type": "file",
            "file": {"filename": "document", "file_data": data_url},
        }
