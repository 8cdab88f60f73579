"""Library configuration using pydantic-settings."""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class AuditSettings(BaseSettings):
    """Audit settings loaded from ACTIVE_AUDIT_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="ACTIVE_AUDIT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Recording
    default_scope: str = "default"
    global_excluded_columns: list[str] = ["created_at", "updated_at"]

    # Database (used by the CLI)
    database_url: str = "sqlite:///audit.db"
    database_echo: bool = False

    # Observability
    environment: str = "development"  # development, staging, production
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == "production"


@lru_cache
def get_settings() -> AuditSettings:
    """Get cached settings instance."""
    return AuditSettings()

