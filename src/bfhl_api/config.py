"""
Configuration settings for the BFHL Classification API.

All settings are loaded from environment variables with sensible defaults.
Use .env file for local development (see .env.example).
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from bfhl_api.models.identity import IdentityConfig


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""
    
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )
    
    # === Application ===
    APP_NAME: str = "BFHL Classification API"
    APP_VERSION: str = Field(
        default="1.0.0",
        validation_alias=AliasChoices("APP_VERSION", "API_VERSION"),
    )
    ENVIRONMENT: str = "development"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"
    
    # === Server ===
    HOST: str = "0.0.0.0"
    PORT: int = 3000
    
    # === Identity (echoed in every /bfhl response) ===
    USER_ID: str = "default_user_ddmmyyyy"
    EMAIL: str = "default@example.com"
    ROLL_NUMBER: str = "DEFAULT123"
    
    # === HTTP ===
    CORS_ALLOW_ORIGINS: list[str] = ["*"]
    SECURITY_HEADERS_ENABLED: bool = True
    
    # === Monitoring ===
    PROMETHEUS_ENABLED: bool = True
    
    @property
    def is_production(self) -> bool:
        return self.ENVIRONMENT.lower() == "production"
    
    def identity(self) -> IdentityConfig:
        """Freeze the identity fields into an IdentityConfig."""
        return IdentityConfig(
            user_id=self.USER_ID,
            email=self.EMAIL,
            roll_number=self.ROLL_NUMBER,
        )
    
    def identity_configured(self) -> dict[str, bool]:
        """Which identity fields differ from their defaults (never the values)."""
        defaults = type(self).model_fields
        return {
            name.lower(): getattr(self, name) != defaults[name].default
            for name in ("USER_ID", "EMAIL", "ROLL_NUMBER")
        }


# Global settings instance
settings = Settings()
