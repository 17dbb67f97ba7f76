"""Application configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Remote consolidation service
    enhance_base_url: str = "http://localhost:8000/api"
    enhance_endpoint: str = "/recipes/consolidated-list"
    enhance_timeout: float = 10.0  # request timeout in seconds
    enhance_max_retries: int = 3  # transport-level attempts, not session-level
    enhance_access_token: str = ""

    # Remote consolidation is opt-in
    ai_features_enabled: bool = False

    # Application
    environment: str = "development"
    log_level: str = "INFO"
    allowed_origins: str = "http://localhost:3000,http://localhost:8000"

    @property
    def enhance_url(self) -> str:
        """Get the full URL of the remote consolidation endpoint."""
        return f"{self.enhance_base_url.rstrip('/')}/{self.enhance_endpoint.lstrip('/')}"


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()
