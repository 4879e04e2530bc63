from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    extraction_provider: str = "gemini"
    extraction_temperature: float = 0.0
    max_concurrent_files: int = Field(default=1, ge=1)

    gemini_api_key: str = ""
    gemini_model_name: str = "gemini-2.5-flash"

    openai_api_key: str = ""
    openai_model_name: str = "gpt-4o-mini"
    openai_timeout_seconds: int = 60

    openai_compatible_api_key: str = ""
    openai_compatible_model_name: str = ""
    openai_compatible_base_url: str = ""
    openai_compatible_timeout_seconds: int = 60

    openrouter_api_key: str = ""
    openrouter_model_name: str = ""
    openrouter_timeout_seconds: int = 60

    together_api_key: str = ""
    together_model_name: str = ""
    together_timeout_seconds: int = 60

    ollama_api_key: str = "ollama"
    ollama_model_name: str = ""
    ollama_timeout_seconds: int = 120
