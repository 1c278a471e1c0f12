from pydantic_settings import BaseSettings, SettingsConfigDict


# -----------------------------------------------------------------------------
# Settings
# -----------------------------------------------------------------------------
class Settings(BaseSettings):
    """
    Link injection settings managed by Pydantic.
    Reads from HATEOAS_* environment variables and/or .env file.
    """
    # Injection
    LINKS_KEY: str = "_links"
    BY_ALIAS: bool = True
    EXCLUDE_NONE: bool = False

    # Example service
    API_PREFIX: str = "/api/v1"
    LOG_LEVEL: str = "INFO"

    # Config to read from .env file if available
    model_config = SettingsConfigDict(
        env_prefix="HATEOAS_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
        )

settings = Settings()
