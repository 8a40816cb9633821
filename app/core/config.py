from pydantic_settings import BaseSettings
from pydantic import field_validator


class Settings(BaseSettings):
    """Application settings loaded from environment variables"""

    PROJECT_NAME: str = "Computer Database"

    # Database Settings
    DATABASE_URL: str = "sqlite:///./computer_database.db"
    DATABASE_ECHO: bool = False

    # Listing Settings
    DEFAULT_PAGE_SIZE: int = 10

    # Logging Settings
    LOG_LEVEL: str = "INFO"
    JSON_LOGS: bool = True

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        """Accept log levels in any case ("debug", "Info", ...)"""
        return v.upper() if isinstance(v, str) else v

    @property
    def is_sqlite(self) -> bool:
        return self.DATABASE_URL.startswith("sqlite")

    class Config:
        env_file = ".env"
        case_sensitive = True


settings = Settings()
