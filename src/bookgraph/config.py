"""
Configuration management for the bookgraph service
"""

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="BOOKGRAPH_",
        case_sensitive=False,
        extra="ignore",
    )

    # Data source: JSON array of {id, name, genre}; static seed when unset
    data_file: str | None = None

    # API Settings
    api_host: str = "127.0.0.1"
    api_port: int = 8080
    api_reload: bool = False
    cors_origins: list[str] = ["http://localhost:3000", "http://localhost:5173"]
    graphiql: bool = True

    # Environment
    environment: str = "development"  # 'development', 'staging', 'production'
    debug: bool = True
    log_level: str = "INFO"


# Global settings instance
settings = Settings()
