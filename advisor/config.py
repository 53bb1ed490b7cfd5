"""Configuration from .env file."""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    RECOMMEND_API_URL: str = "http://localhost:8000/api/recommend"
    REQUEST_TIMEOUT_S: float = 30.0
    LOG_LEVEL: str = "INFO"

    # Legacy list output: one <ul> from the first list item to the last.
    MARKDOWN_SINGLE_LIST: bool = False

    # Report "must be a number" separately from out-of-range values.
    SPLIT_PARSE_ERRORS: bool = False

    class Config:
        env_file = ".env"


settings = Settings()
