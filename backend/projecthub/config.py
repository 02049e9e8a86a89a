"""Centralizes environment-driven application settings."""

from pydantic_settings import BaseSettings
from typing import List, Optional
from pathlib import Path


class Settings(BaseSettings):
    DATABASE_URL: str = "sqlite:///./projecthub.db"
    DEBUG: bool = True
    PORT: int = 3000
    ALLOWED_ORIGINS: List[str] = [
        "http://localhost:5173",
        "https://projecthub-frontend-alpha.vercel.app",
    ]
    LOG_LEVEL: str = "INFO"

    # Identity provider. Tokens are issued externally; HS* tokens are checked
    # against the shared secret, RS*/ES* tokens against the public key.
    IDENTITY_SECRET_KEY: str = "change-me-to-a-random-secret-key"
    IDENTITY_PUBLIC_KEY: Optional[str] = None
    IDENTITY_ALGORITHMS: List[str] = ["HS256"]
    IDENTITY_AUDIENCE: Optional[str] = None
    IDENTITY_ISSUER: Optional[str] = None
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 480

    # Catalog paging
    DEFAULT_PAGE_SIZE: int = 10
    MAX_PAGE_SIZE: int = 100

    def identity_verification_key(self) -> str:
        public_key = str(self.IDENTITY_PUBLIC_KEY or "").strip()
        if public_key:
            # PEM keys arrive through env vars with escaped newlines.
            return public_key.replace("\\n", "\n")
        return self.IDENTITY_SECRET_KEY

    class Config:
        env_file = str(Path(__file__).resolve().parents[1] / ".env")


settings = Settings()
