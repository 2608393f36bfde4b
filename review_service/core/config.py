"""
Core configuration and settings for the Review Service
"""

from typing import Optional
from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Config(BaseSettings):
    """Application configuration with environment variable support"""

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    # Service information
    service_name: str = Field(default="review-service")
    service_version: str = Field(default="1.0.0")
    api_version: str = Field(default="1.0.0")
    environment: str = Field(default="development")

    # Server configuration
    port: int = Field(default=5001)
    host: str = Field(default="0.0.0.0")

    # Database configuration
    mongodb_uri: Optional[str] = Field(default=None, validation_alias=AliasChoices("mongodb_uri", "mongo_uri"))
    mongodb_host: str = Field(default="localhost")
    mongodb_port: int = Field(default=27017)
    mongodb_username: Optional[str] = Field(default=None)
    mongodb_password: Optional[str] = Field(default=None)
    mongodb_database: str = Field(default="movieverse")
    mongodb_server_selection_timeout_ms: int = Field(default=5000)

    @property
    def mongodb_url(self) -> str:
        """Construct MongoDB connection URL"""
        if self.mongodb_uri:
            return self.mongodb_uri
        if self.mongodb_username and self.mongodb_password:
            return (
                f"mongodb://{self.mongodb_username}:{self.mongodb_password}"
                f"@{self.mongodb_host}:{self.mongodb_port}/{self.mongodb_database}?authSource=admin"
            )
        return f"mongodb://{self.mongodb_host}:{self.mongodb_port}/{self.mongodb_database}"

    # Logging configuration
    log_level: str = Field(default="INFO")
    log_format: str = Field(default="console")
    log_to_file: bool = Field(default=False)
    log_to_console: bool = Field(default=True)
    log_file_path: str = Field(default="logs/review-service.log")

    # Request tracing
    correlation_id_header: str = Field(default="X-Correlation-ID")

    # Rate limiting for anonymous write endpoints
    rate_limit_enabled: bool = Field(default=True)
    review_rate_limit: str = Field(default="5/minute")
    reply_rate_limit: str = Field(default="10/minute")
    reaction_rate_limit: str = Field(default="10/minute")


# Global config instance
config = Config()
