from functools import lru_cache
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Load .env from the repo root so it works regardless of CWD
_env_file = Path(__file__).resolve().parent.parent.parent / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=_env_file, extra="ignore")

    database_url: str = "postgresql://localhost/alumni"
    jwt_secret: str = "change-me-in-production"
    jwt_algorithm: str = "HS256"
    jwt_expire_minutes: int = 60 * 24 * 7  # 7 days

    log_level: str = "INFO"

    # Rate limiting (per-user when key_func resolves a token; else per IP)
    rate_limit_enabled: bool = True
    auth_login_rate_limit: str = "10/minute"
    auth_signup_rate_limit: str = "5/minute"

    # CORS (comma-separated origins; * allows all)
    cors_origins: str = "*"

    # Global search client
    search_api_base_url: str = "http://localhost:8000"
    search_debounce_ms: int = 300
    search_min_query_length: int = 2
    # History only records queries whose trimmed length is at least this
    search_history_min_query_length: int = 3
    search_result_limit: int = 5
    search_history_size: int = 10
    search_history_path: str | None = None
    # None => no timeout on collection requests
    search_request_timeout_seconds: float | None = None

    @property
    def cors_origins_list(self) -> list[str]:
        """Parsed CORS origins for middleware."""
        raw = self.cors_origins.strip()
        return ["*"] if not raw else [o.strip() for o in raw.split(",") if o.strip()]

    @property
    def search_history_file(self) -> Path:
        if self.search_history_path:
            return Path(self.search_history_path).expanduser()
        return Path.home() / ".alumni_api" / "search_history.json"


@lru_cache
def get_settings() -> Settings:
    return Settings()
