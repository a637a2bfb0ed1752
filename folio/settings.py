from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


def choose_env_file() -> str:
    return ".env.local" if Path(".env.local").exists() else ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=choose_env_file(),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # tolerate unrelated env vars
    )

    # Blog content
    CONTENT_DIR: str = "content/blog"
    POST_EXTENSION: str = ".md"
    WORDS_PER_MINUTE: int = 200

    # Logging
    LOG_LEVEL: str = "INFO"

    # GitHub
    GITHUB_USERNAME: str = ""
    GITHUB_TOKEN: str = ""
    GITHUB_API_URL: str = "https://api.github.com"
    GITHUB_TIMEOUT_SECONDS: float = 10.0
    GITHUB_MAX_REPOS: int = 200
    GITHUB_CACHE_TTL_SECONDS: int = 3600

    @property
    def content_root(self) -> Path:
        return Path(self.CONTENT_DIR).expanduser().resolve()


# Routes read this through dependencies.get_settings so tests can swap it
settings = Settings()
