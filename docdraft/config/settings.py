import tempfile
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    upload_dir: Path = Path(tempfile.gettempdir()) / "docdraft-uploads"
    max_upload_size_bytes: int = 5 * 1024 * 1024
    pdf_engine: str = "pdfplumber"

    input_token_budget: int = 2500
    max_tokens_per_chunk: int = 3000
    chunk_delay_seconds: float = 1.0

    completion_provider: str = "openai"
    synthesis_model_name: str = ""

    completion_openai_api_key: str = ""
    completion_openai_model_name: str = "gpt-3.5-turbo"
    completion_openai_organization: str = ""
    completion_openai_timeout_seconds: int = 60

    completion_openai_compatible_api_key: str = ""
    completion_openai_compatible_model_name: str = ""
    completion_openai_compatible_base_url: str = ""
    completion_openai_compatible_timeout_seconds: int = 60

    completion_openrouter_api_key: str = ""
    completion_openrouter_model_name: str = ""
    completion_openrouter_timeout_seconds: int = 60

    completion_groq_api_key: str = ""
    completion_groq_model_name: str = ""
    completion_groq_timeout_seconds: int = 60

    completion_together_api_key: str = ""
    completion_together_model_name: str = ""
    completion_together_timeout_seconds: int = 60

    completion_deepseek_api_key: str = ""
    completion_deepseek_model_name: str = ""
    completion_deepseek_timeout_seconds: int = 60

    completion_ollama_api_key: str = "ollama"
    completion_ollama_model_name: str = ""
    completion_ollama_timeout_seconds: int = 120
