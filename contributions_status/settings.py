from pathlib import Path

from pydantic import AliasChoices
from pydantic import Field
from pydantic_settings import BaseSettings
from pydantic_settings import SettingsConfigDict


PACKAGE_DIR = Path(__file__).resolve().parent

DEFAULT_FONT_PATHS = [
    str(PACKAGE_DIR / "fonts" / "NotoSans-Regular.ttf"),
    "fonts/NotoSans-Regular.ttf",
    "backend/fonts/NotoSans-Regular.ttf",
    "/usr/share/fonts/truetype/noto/NotoSans-Regular.ttf",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
]


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Values are read from process environment and optionally from `.env`.
    """

    github_token: str | None = None
    github_graphql_url: str = "https://api.github.com/graphql"
    gitlab_base_url: str = "https://gitlab.com"
    http_timeout_seconds: float = 20.0
    user_agent: str = "contributions-status"

    font_paths: list[str] = Field(default_factory=lambda: list(DEFAULT_FONT_PATHS))
    font_size: int = 12

    deployment_id: str = Field(
        default="dev",
        validation_alias=AliasChoices(
            "DEPLOYMENT_ID", "VERCEL_DEPLOYMENT_ID", "VERCEL_GIT_COMMIT_SHA"
        ),
    )
    cors_allow_origins: list[str] = ["*"]

    sentry_dsn: str | None = None
    environment: str = "development"
    release: str | None = None
    sentry_traces_sample_rate: float = 0.1
    rate_limit_per_minute: int = 30
    rate_limit_window_seconds: int = 60
    trust_forwarded_for: bool = False

    log_level: str = "INFO"
    host: str = "0.0.0.0"
    port: int = 3000

    model_config = SettingsConfigDict(
        env_file=".env", extra="ignore", populate_by_name=True
    )
