# src/recruiting_api/config.py

from pathlib import Path
from typing import Any, List, Optional, Union

from dotenv import load_dotenv
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# .env is at the project root, two levels up from src/recruiting_api/
CONFIG_FILE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT_DIR = CONFIG_FILE_DIR.parent.parent
ENV_FILE_PATH = PROJECT_ROOT_DIR / ".env"

DEFAULT_JWT_SECRET_KEY = "change-me-in-production"

if ENV_FILE_PATH.exists():
    load_dotenv(dotenv_path=ENV_FILE_PATH, override=True)
    print(f"RecruitingAPI: Successfully loaded .env file from: {ENV_FILE_PATH}")
else:
    print(
        f"RecruitingAPI: .env file not found at {ENV_FILE_PATH}. Relying on environment variables."
    )


class Settings(BaseSettings):
    # === Process ===
    PORT: int = 5000
    NODE_ENV: str = "development"

    # === Frontend bundle (served when NODE_ENV=production) ===
    BUILD_DIR: Path = PROJECT_ROOT_DIR / "build"

    # === CORS ===
    # Seen as a string from the env, turned into List[str] by the validator below.
    CORS_ORIGINS: Union[str, List[str]] = ["*"]

    # === Bearer tokens ===
    JWT_SECRET_KEY: str = DEFAULT_JWT_SECRET_KEY
    JWT_ALGORITHM: str = "HS256"
    JWT_EXPIRES_MINUTES: int = 60

    # === Seed account for the built-in user directory ===
    ADMIN_EMAIL: Optional[str] = None
    ADMIN_PASSWORD: Optional[str] = None

    # === Background services ===
    JOB_MATCHING_INTERVAL_MINUTES: int = 60
    AUTO_SCREENING_INTERVAL_MINUTES: int = 15

    @property
    def IS_PRODUCTION(self) -> bool:
        return self.NODE_ENV == "production"

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False
    )

    @field_validator("CORS_ORIGINS", mode='before')
    @classmethod
    def parse_comma_separated_origins(cls, v: Any) -> List[str]:
        if v is None:
            return ["*"]
        if isinstance(v, str):
            return [origin.strip() for origin in v.split(',') if origin.strip()]
        if isinstance(v, list):
            return v
        raise TypeError(f'CORS_ORIGINS: Expected a comma-separated string or a list, got {type(v)}')

    @model_validator(mode='after')
    def check_intervals(self) -> 'Settings':
        if self.JOB_MATCHING_INTERVAL_MINUTES <= 0 or self.AUTO_SCREENING_INTERVAL_MINUTES <= 0:
            raise ValueError("Background service intervals must be positive numbers of minutes.")
        return self


try:
    settings = Settings()
except Exception as e:
    print(f"RecruitingAPI: Error instantiating Settings: {e}")
    raise
