from pydantic_settings import BaseSettings


class Config(BaseSettings):
    """Application configuration loaded from environment variables."""

    database_url: str
    host: str = "0.0.0.0"  # noqa: S104
    port: int = 5001
    debug: bool = False
    session_secret_key: str  # HMAC secret for signing session tokens
    cors_origins: list[str] = []  # Frontend origins allowed for cross-origin requests

    model_config = {
        "env_file": [".env"],
        "env_prefix": "WALLETSCORE_",
        "extra": "ignore",
    }
