from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # HTTP Configuration
    USER_AGENT: str = (
        "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_4) AppleWebKit/537.36 "
        "(KHTML, like Gecko) Chrome/85.0.4183.83 Safari/537.36,gzip(gfe)"
    )
    REQUEST_TIMEOUT: float = 30.0
    MAX_RETRIES: int = 1

    # Endpoints
    WATCH_URL: str = "https://www.youtube.com/watch?v={video_id}"
    ORIGIN: str = "https://www.youtube.com"
    INNERTUBE_PLAYER_URL: str = "https://www.youtube.com/youtubei/v1/player"
    INNERTUBE_CLIENT_NAME: str = "WEB"
    INNERTUBE_CLIENT_VERSION: str = "2.20250312.04.00"

    # System Settings
    LOG_LEVEL: str = "INFO"

    model_config = SettingsConfigDict(
        env_prefix="YOUTUBE_TRANSCRIPT_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore"
    )

settings = Settings()
