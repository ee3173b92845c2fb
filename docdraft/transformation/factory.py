from typing import ClassVar

from docdraft.config.settings import Settings
from docdraft.transformation.client_base import BaseCompletionClient
from docdraft.transformation.example_client_adapter import ExampleClientAdapter
from docdraft.transformation.openai_client_adapter import OpenAIClientAdapter


class CompletionClientFactory:
    """Creates the configured completion client and resolves model names."""

    OPENAI_COMPATIBLE_BASE_URLS: ClassVar[dict[str, str]] = {
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseCompletionClient:
        """Create a completion client from application settings."""
        provider = settings.completion_provider.lower()
        if provider == "example":
            return ExampleClientAdapter()
        base_url = cls._resolve_base_url(provider, settings)
        return OpenAIClientAdapter(
            api_key=cls._provider_setting(provider, settings, "api_key") or "",
            timeout_seconds=cls._provider_setting(provider, settings, "timeout_seconds") or 60,
            base_url=base_url,
            organization=settings.completion_openai_organization if provider == "openai" else None,
        )

    @classmethod
    def resolve_model(cls, settings: Settings) -> str:
        provider = settings.completion_provider.lower()
        if provider == "example":
            return "example"
        model = cls._provider_setting(provider, settings, "model_name")
        if not model:
            raise ValueError(f"completion_{provider}_model_name is required")
        return str(model)

    @classmethod
    def resolve_synthesis_model(cls, settings: Settings) -> str:
        """Model for metadata synthesis; defaults to the main model."""
        return settings.synthesis_model_name.strip() or cls.resolve_model(settings)

    @classmethod
    def _resolve_base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai":
            return None
        if provider == "openai_compatible":
            url = settings.completion_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "completion_openai_compatible_base_url is required for "
                    "completion_provider=openai_compatible"
                )
            return url
        default_base_url = cls.OPENAI_COMPATIBLE_BASE_URLS.get(provider)
        if default_base_url is not None:
            return default_base_url
        supported = [
            "example",
            "openai",
            "openai_compatible",
            *sorted(cls.OPENAI_COMPATIBLE_BASE_URLS),
        ]
        raise ValueError(
            f"Unknown completion provider '{provider}'. Choose from: {supported}"
        )

    @staticmethod
    def _provider_setting(provider: str, settings: Settings, name: str) -> object:
        return getattr(settings, f"completion_{provider}_{name}", None)
