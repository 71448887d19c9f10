"""Application configuration management."""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Provider API keys are never configured here: every request carries
    its own key and the relay only passes it through.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Application
    app_name: str = "LLM Relay"
    debug: bool = False
    log_level: str = "INFO"
    log_file: str | None = None
    api_prefix: str = "/api"

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # Outbound provider calls
    provider_timeout: float = 60.0
    temperature: float = 0.7
    max_tokens: int = 2000

    # 프로바이더별 모델
    gemini_model: str = "gemini-pro"
    openai_model: str = "gpt-3.5-turbo"
    groq_model: str = "mixtral-8x7b-32768"
    anthropic_model: str = "claude-3-haiku-20240307"
    anthropic_version: str = "2023-06-01"
    openrouter_model: str = "meta-llama/llama-3.1-8b-instruct:free"
    openrouter_referer: str = "https://farishta-engine.vercel.app"
    openrouter_title: str = "Farishta Engine"


# Global settings instance
settings = Settings()
