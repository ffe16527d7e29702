from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # Caption Settings
    DEFAULT_LANG: str = "en"
    YOUTUBE_HOST: str = "youtube.com"

    # HTTP Settings
    REQUEST_TIMEOUT: float = 30
    MAX_RETRIES: int = 3
    USER_AGENT: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_7) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
    )
    ACCEPT_LANGUAGE: str = "en-US,en;q=0.9"

    # System Settings
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_file=".env", 
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
