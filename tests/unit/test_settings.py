import pytest
from pydantic import ValidationError

from docextract.config.settings import Settings


class TestSettingsDefaults:
    def test_default_app_env(self) -> None:
        s = Settings()
        assert s.app_env == "dev"

    def test_default_extraction_provider(self) -> None:
        s = Settings()
        assert s.extraction_provider == "gemini"

    def test_default_is_sequential(self) -> None:
        s = Settings()
        assert s.max_concurrent_files == 1

    def test_default_temperature(self) -> None:
        s = Settings()
        assert s.extraction_temperature == 0.0

    def test_default_openai_timeout(self) -> None:
        s = Settings()
        assert s.openai_timeout_seconds == 60


class TestSettingsFromEnv:
    def test_loads_log_level(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("LOG_LEVEL", "DEBUG")
        s = Settings()
        assert s.log_level == "DEBUG"

    def test_loads_extraction_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXTRACTION_PROVIDER", "openai")
        s = Settings()
        assert s.extraction_provider == "openai"

    def test_loads_gemini_credentials(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("GEMINI_API_KEY", "g-key")
        monkeypatch.setenv("GEMINI_MODEL_NAME", "gemini-2.5-pro")
        s = Settings()
        assert s.gemini_api_key == "g-key"
        assert s.gemini_model_name == "gemini-2.5-pro"


class TestSettingsValidation:
    def test_invalid_temperature_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("EXTRACTION_TEMPERATURE", "warm")
        with pytest.raises(ValidationError):
            Settings()

    def test_zero_concurrency_raises(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("MAX_CONCURRENT_FILES", "0")
        with pytest.raises(ValidationError):
            Settings()
