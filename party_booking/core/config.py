from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Resolve .env from the project root so it loads regardless of cwd
_BACKEND_ROOT = Path(__file__).resolve().parent.parent.parent
_ENV_FILE = _BACKEND_ROOT / ".env"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=(str(_ENV_FILE), ".env", "../.env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Database (hosted Postgres)
    database_url: str
    database_ssl: bool = True

    # CORS: the widget is embedded on the venue's site
    cors_origins: str = "http://localhost:5173"

    # Env
    env: str = "development"

    # Confirmed reservations are forwarded here. Leave empty to disable.
    reservation_webhook_url: str = ""
    webhook_timeout_seconds: float = 10.0

    @property
    def cors_origins_list(self) -> list[str]:
        return [o.strip() for o in self.cors_origins.split(",") if o.strip()]

    @property
    def webhook_enabled(self) -> bool:
        return bool(self.reservation_webhook_url)


settings = Settings()
