from datetime import timedelta

from pydantic_settings import BaseSettings, SettingsConfigDict
from sqlalchemy.engine import make_url

ALGORITHM = "HS256"
ACCESS_TOKEN_EXPIRE = timedelta(hours=1)
TOKEN_COOKIE_NAME = "token"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    PORT: int = 5000
    DATABASE_URL: str = "sqlite:///./study_buddy_hub.db"
    DB_USER: str | None = None
    DB_PASS: str | None = None

    # DEV default only, set ACCESS_TOKEN_SECRET in the environment.
    ACCESS_TOKEN_SECRET: str = "change-me-in-production"

    CORS_ORIGINS: str = (
        "https://study-buddy-hub.web.app,"
        "https://study-buddy-hub.firebaseapp.com,"
        "http://localhost:5173"
    )
    LOG_LEVEL: str = "INFO"

    @property
    def cors_origins(self) -> list[str]:
        return [o.strip().rstrip("/") for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def database_url(self):
        url = make_url(self.DATABASE_URL)
        if self.DB_USER:
            url = url.set(username=self.DB_USER, password=self.DB_PASS)
        return url


def get_settings() -> Settings:
    return Settings()
