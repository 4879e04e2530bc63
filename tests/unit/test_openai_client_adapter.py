from unittest.mock import AsyncMock, MagicMock, patch

import httpx
import openai
import pytest

from docextract.extraction.exceptions import ModelError, ModelNetworkError
from docextract.extraction.openai_client_adapter import OpenAIClientAdapter
from docextract.processor.models import EncodedFile


def _make_mock_response(content: str | None) -> MagicMock:
    choice = MagicMock()
    choice.message.content = content
    response = MagicMock()
    response.choices = [choice]
    return response


def _make_adapter(mock_client: MagicMock) -> OpenAIClientAdapter:
    with patch(
        "docextract.extraction.openai_client_adapter.openai.AsyncOpenAI",
        return_value=mock_client,
    ):
        return OpenAIClientAdapter(api_key="k", timeout_seconds=30, base_url=None)


def _mock_client(
    content: str | None = '{"ok": true}', side_effect: Exception | None = None
) -> MagicMock:
    mock_client = MagicMock()
    mock_client.chat.completions.create = AsyncMock(
        return_value=_make_mock_response(content), side_effect=side_effect
    )
    return mock_client


async def _generate(adapter: OpenAIClientAdapter, media_type: str = "image/png") -> str:
    return await adapter.generate(
        model="m",
        temperature=0.1,
        document=EncodedFile(content=b"abc", media_type=media_type),
        instruction="Return JSON.",
        json_schema={"type": "object"},
    )


class TestOpenAIClientAdapter:
    @pytest.mark.anyio
    async def test_returns_content(self) -> None:
        adapter = _make_adapter(_mock_client('{"ok": true}'))
        assert await _generate(adapter) == '{"ok": true}'

    @pytest.mark.anyio
    async def test_sends_image_as_data_url(self) -> None:
        mock_client = _mock_client()
        await _generate(_make_adapter(mock_client), media_type="image/png")
        parts = mock_client.chat.completions.create.call_args.kwargs["messages"][0]["content"]
        assert parts[0] == {
            "type": "image_url",
            "image_url": {"url": "data:image/png;base64,YWJj"},
        }
        assert parts[1] == {"type": "text", "text": "Return JSON."}

    @pytest.mark.anyio
    async def test_sends_pdf_as_file_part(self) -> None:
        mock_client = _mock_client()
        await _generate(_make_adapter(mock_client), media_type="application/pdf")
        parts = mock_client.chat.completions.create.call_args.kwargs["messages"][0]["content"]
        assert parts[0]["type"] == "file"
        assert parts[0]["file"]["file_data"] == "data:application/pdf;base64,YWJj"

    @pytest.mark.anyio
    async def test_passes_schema_as_response_format(self) -> None:
        mock_client = _mock_client()
        await _generate(_make_adapter(mock_client))
        response_format = mock_client.chat.completions.create.call_args.kwargs["response_format"]
        assert response_format["type"] == "json_schema"
        assert response_format["json_schema"]["schema"] == {"type": "object"}

    @pytest.mark.anyio
    async def test_raises_error_for_empty_content(self) -> None:
        adapter = _make_adapter(_mock_client(None))
        with pytest.raises(ModelError, match="No data returned"):
            await _generate(adapter)

    @pytest.mark.anyio
    async def test_raises_error_for_no_choices(self) -> None:
        mock_client = _mock_client()
        mock_client.chat.completions.create.return_value.choices = []
        with pytest.raises(ModelError, match="no choices"):
            await _generate(_make_adapter(mock_client))

    @pytest.mark.anyio
    async def test_raises_network_error_on_connection_failure(self) -> None:
        adapter = _make_adapter(
            _mock_client(side_effect=openai.APIConnectionError(request=MagicMock()))
        )
        with pytest.raises(ModelNetworkError, match="network error"):
            await _generate(adapter)

    @pytest.mark.anyio
    async def test_raises_network_error_on_timeout(self) -> None:
        adapter = _make_adapter(_mock_client(side_effect=httpx.TimeoutException("timeout")))
        with pytest.raises(ModelNetworkError, match="network error"):
            await _generate(adapter)

    @pytest.mark.anyio
    async def test_raises_network_error_on_api_error(self) -> None:
        error = openai.APIError(message="server error", request=MagicMock(), body=None)
        adapter = _make_adapter(_mock_client(side_effect=error))
        with pytest.raises(ModelNetworkError, match="API error"):
            await _generate(adapter)
