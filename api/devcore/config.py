from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "devcore"
    debug: bool = False

    # CORS — comma-separated allowed origins (empty = allow all for dev)
    cors_origins: str = ""

    # Guards /v1/system routes; empty rejects every caller
    admin_api_key: str = ""

    # Forge notification service
    forge_api_url: str = Field(
        default="",
        validation_alias=AliasChoices("BUILT_IN_FORGE_API_URL", "FORGE_API_URL", "forge_api_url"),
    )
    forge_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("BUILT_IN_FORGE_API_KEY", "FORGE_API_KEY", "forge_api_key"),
    )
    notification_timeout_seconds: float = 15

    # Session cookie
    session_cookie_name: str = "app_session_id"

    model_config = {"env_file": ".env", "extra": "ignore", "populate_by_name": True}


settings = Settings()


def get_settings() -> Settings:
    """Return the current process-wide settings (looked up on every call)."""
    return settings
