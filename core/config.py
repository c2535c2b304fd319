"""App config via env vars"""

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Storage buckets recorded per content group (bytes are never copied there)
    IMAGE_STORAGE_PATH: str = "/data/vault/images"
    VIDEO_STORAGE_PATH: str = "/data/vault/videos"

    # When set, accepted paths must resolve under this directory
    UPLOAD_ROOT: str | None = None

    # Cross-check filename extension against sniffed content on upload
    VERIFY_EXTENSION: bool = True

    # URL validation
    URL_TLD_WHITELIST: list[str] | None = None  # JSON list in env, e.g. '[".com", ".ch"]'
    URL_STRICT_TLD: bool = True
    URL_MAX_LENGTH: int = 2048

    LOG_LEVEL: str = "INFO"

    model_config = {"env_prefix": "", "case_sensitive": True, "env_file": ".env"}


settings = Settings()
