# backend/config.py
from pydantic_settings import BaseSettings
from typing import ClassVar, Optional
from pathlib import Path

# Resolve absolute path to the .env file for reliable loading
env_path = Path(__file__).parent.parent / ".env"

# Default location of the JSON data files
data_dir = Path(__file__).parent / "data"

class Settings(BaseSettings):
    DISCS_FILE: str = str(data_dir / "discs.json")
    CARTS_FILE: str = str(data_dir / "carts.json")
    LESSONS_FILE: str = str(data_dir / "lessons.json")
    USERS_FILE: str = str(data_dir / "users.json")

    # Extra CORS origin for the storefront frontend
    FRONTEND_URL: Optional[str] = None

    LOG_LEVEL: str = "INFO"

    class Config:
        env_file: ClassVar[str] = str(env_path)

settings = Settings()
