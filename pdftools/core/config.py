import os
from typing import List


class Settings:
    PROJECT_NAME: str = "PDF Toolkit"
    PROJECT_VERSION: str = "1.0.0"
    API_V1_STR: str = "/api/v1"  # Base path for API v1

    # This is for detecting test mode, but the primary mechanism for setting
    # test config is conftest.py, which will monkeypatch these values.
    TESTING: bool = os.getenv("TESTING", "False").lower() in ("true", "1", "t")

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()

    # Upload limits
    MAX_UPLOAD_SIZE_MB: int = int(os.getenv("MAX_UPLOAD_SIZE_MB", "25"))

    @property
    def MAX_UPLOAD_SIZE_BYTES(self) -> int:
        return self.MAX_UPLOAD_SIZE_MB * 1024 * 1024

    # First-page preview
    THUMBNAIL_WIDTH: int = int(os.getenv("THUMBNAIL_WIDTH", "200"))

    # Shown for metadata fields the document does not carry
    NOT_AVAILABLE_MARKER: str = os.getenv("NOT_AVAILABLE_MARKER", "N/A")

    # Idle workflows are dropped after this many seconds
    WORKFLOW_TTL_SECONDS: int = int(os.getenv("WORKFLOW_TTL_SECONDS", "3600"))

    SUPPORTED_IMAGE_TYPES: List[str] = ["image/png", "image/jpeg", "image/jpg"]

    # CORS
    BACKEND_CORS_ORIGINS: List[str] = [
        "http://localhost",
        "http://localhost:3000",
        "http://localhost:8000",
    ]


settings = Settings()
