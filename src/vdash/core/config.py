from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8")

    app_env: str = "dev"
    log_level: str = "INFO"
    database_url: str = "sqlite+aiosqlite:///./vdash.db"
    cors_origins: list[str] = ["http://localhost:5173"]

    youtube_api_base_url: str = "https://www.googleapis.com/youtube/v3"
    youtube_api_key: str | None = None
    # videos.update rejects a snippet without a category
    youtube_category_id: str = "22"
    youtube_timeout_seconds: float = 20.0
    comment_page_size: int = 100

    openai_api_key: str | None = None
    openai_model: str = "gpt-3.5-turbo"
    openai_temperature: float = 0.7
    openai_max_tokens: int = 200


def get_settings() -> "Settings":
    return Settings()


settings = get_settings()
