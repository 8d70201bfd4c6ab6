"""Application configuration via environment variables."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Application
    environment: str = "development"
    debug: bool = False
    service_name: str = "alexa-skill-kit"

    # Skill
    skill_name: str = "Hello World"  # Spoken in the welcome message and used as card title

    # CORS
    cors_origins: list[str] = ["*"]

    class Config:
        env_prefix = "ALEXA_SKILL_"
        case_sensitive = False


settings = Settings()
