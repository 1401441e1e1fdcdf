from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings
from dotenv import load_dotenv

load_dotenv()


class Settings(BaseSettings):
    PROJECT_NAME: str = "Wedding Photos"
    API_STR: str = "/api"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Public address guests reach the event page on, encoded into QR codes
    PUBLIC_BASE_URL: str = "http://localhost:5000"

    # Storage
    UPLOAD_FOLDER: str = "./uploads"
    MAX_UPLOAD_SIZE: int = 10 * 1024 * 1024  # 10MB per file
    MAX_FILES_PER_UPLOAD: int = 10
    ALLOWED_IMAGE_TYPES: List[str] = ["jpeg", "jpg", "png", "gif", "webp"]

    CORS_ORIGINS: List[str] = ["*"]

    class Config:
        case_sensitive = True


@lru_cache()
def get_settings() -> Settings:
    return Settings()
