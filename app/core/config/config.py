from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import List
from hashlib import sha256
from pathlib import Path

class Settings(BaseSettings):
    """Application settings read from the environment and .env"""

    # General
    app_name: str = "Dealer Inventory API"
    version: str = "1.0.0"
    host: str = "0.0.0.0"
    port: int = 8000
    workers: int = 1
    debug: bool = False

    # Database (tortoise url)
    database_url: str = "sqlite://inventory.sqlite3"

    # App Security
    secret_key: str = "change-me"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 720

    # CORS settings
    CORS_ALLOWED_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://127.0.0.1:3000",
        "http://localhost:5173",
        "http://127.0.0.1:5173",
    ]

    # Listings
    MIN_CAR_IMAGES: int = 4
    MAX_UPLOAD_IMAGES: int = 10
    ALLOWED_IMAGE_TYPES: List[str] = ["image/jpeg", "image/png", "image/webp"]
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    # S3 compatible storage (AWS / MinIO / Contabo)
    S3_ENDPOINT_URL: str | None = None
    S3_ACCESS_KEY: str | None = None
    S3_SECRET_KEY: str | None = None
    S3_BUCKET_NAME: str | None = None
    S3_REGION: str = "us-east-1"
    S3_ADDRESSING_STYLE: str = "path"
    S3_PUBLIC_BASE_URL: str | None = None

    # Local fallback when no bucket is configured
    media_root: Path = Path("./media")
    media_url: str = "/media"

    # Default accounts created on startup
    ADMIN_EMAIL: str | None = None
    ADMIN_PASSWORD: str | None = None
    AGENT_EMAIL: str | None = None
    AGENT_PASSWORD: str | None = None

    model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

    @property
    def s3_enabled(self) -> bool:
        return bool(self.S3_BUCKET_NAME and self.S3_ACCESS_KEY and self.S3_SECRET_KEY)

    def get_user_secret_key(self, user_id, user_salt: str = "") -> str:
        """
        Per-user JWT signing key. Rotating the salt revokes every token of that user.
        """
        base_str = f"{self.secret_key}-{user_id}-{user_salt}"
        return sha256(base_str.encode()).hexdigest()

settings = Settings()
