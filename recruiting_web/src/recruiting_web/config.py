# src/recruiting_web/config.py

from pathlib import Path
from typing import Any, Optional

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# .env is at the project root, two levels up from src/recruiting_web/
CONFIG_FILE_DIR = Path(__file__).resolve().parent
PROJECT_ROOT_DIR = CONFIG_FILE_DIR.parent.parent
ENV_FILE_PATH = PROJECT_ROOT_DIR / ".env"

DEFAULT_API_URL = "http://localhost:5000"

if ENV_FILE_PATH.exists():
    load_dotenv(dotenv_path=ENV_FILE_PATH, override=True)
    print(f"RecruitingWeb: Loaded .env file from: {ENV_FILE_PATH}")


class Settings(BaseSettings):
    # === API Server ===
    # Kept under the name the frontend build has always used.
    REACT_APP_API_URL: str = DEFAULT_API_URL
    API_TIMEOUT_SECONDS: float = 30.0

    # === Diagnostics ===
    API_TRACE: bool = True

    # === Session Persistence ===
    # When unset the session lives in memory for the life of the process.
    SESSION_FILE: Optional[Path] = None

    model_config = SettingsConfigDict(
        env_file=str(ENV_FILE_PATH),
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False
    )

    @field_validator("SESSION_FILE", mode='before')
    @classmethod
    def blank_session_file_is_unset(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("REACT_APP_API_URL", mode='before')
    @classmethod
    def normalize_api_url(cls, v: Any) -> str:
        if v is None or not str(v).strip():
            return DEFAULT_API_URL
        return str(v).strip().rstrip("/")


def resolve_base_url(base_url: Optional[str] = None, config: Optional[Settings] = None) -> str:
    """
    Explicit argument first, then REACT_APP_API_URL, then the local default.
    """
    if base_url:
        return base_url.rstrip("/")
    return (config or settings).REACT_APP_API_URL


try:
    settings = Settings()
except Exception as e:
    print(f"RecruitingWeb: Error instantiating Settings: {e}")
    raise
