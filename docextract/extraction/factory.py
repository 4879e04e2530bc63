from typing import ClassVar

from docextract.config.settings import Settings
from docextract.extraction.client_base import BaseModelClient
from docextract.extraction.example_client_adapter import ExampleClientAdapter
from docextract.extraction.extraction_client import ExtractionClient
from docextract.extraction.gemini_client_adapter import GeminiClientAdapter
from docextract.extraction.openai_client_adapter import OpenAIClientAdapter


class ExtractionClientFactory:
    """Creates an ExtractionClient for the configured provider."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "together": "https://api.together.xyz/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> ExtractionClient:
        """Create an extraction client from application settings."""
        provider = settings.extraction_provider.lower()
        client, model = cls._create_model_client(provider, settings)
        return ExtractionClient(
            client=client,
            model=model,
            temperature=settings.extraction_temperature,
        )

    @classmethod
    def _create_model_client(
        cls, provider: str, settings: Settings
    ) -> tuple[BaseModelClient, str]:
        if provider == "example":
            return ExampleClientAdapter(), "example"
        if provider == "gemini":
            if not settings.gemini_api_key:
                raise ValueError("gemini_api_key is required for extraction_provider=gemini")
            return (
                GeminiClientAdapter(api_key=settings.gemini_api_key),
                settings.gemini_model_name,
            )
        base_url = cls._resolve_base_url(provider, settings)
        api_key, model, timeout = cls._resolve_openai_settings(provider, settings)
        client = OpenAIClientAdapter(
            api_key=api_key,
            timeout_seconds=timeout,
            base_url=base_url,
        )
        return client, model

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "openai_compatible_base_url is required for "
                    "extraction_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "gemini",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown extraction provider '{provider}'. Choose from: {supported}"
        )

    @classmethod
    def _resolve_openai_settings(
        cls, provider: str, settings: Settings
    ) -> tuple[str, str, int]:
        """Return (api_key, model_name, timeout_seconds) for an OpenAI-style provider."""
        key_map = {
            "openai": (
                settings.openai_api_key,
                settings.openai_model_name,
                settings.openai_timeout_seconds,
            ),
            "openai_compatible": (
                settings.openai_compatible_api_key,
                settings.openai_compatible_model_name,
                settings.openai_compatible_timeout_seconds,
            ),
            "openrouter": (
                settings.openrouter_api_key,
                settings.openrouter_model_name,
                settings.openrouter_timeout_seconds,
            ),
            "together": (
                settings.together_api_key,
                settings.together_model_name,
                settings.together_timeout_seconds,
            ),
            "ollama": (
                settings.ollama_api_key,
                settings.ollama_model_name,
                settings.ollama_timeout_seconds,
            ),
        }
        return key_map[provider]
