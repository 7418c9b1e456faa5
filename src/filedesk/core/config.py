"""Configuration management for filedesk."""

from typing import Optional

from pydantic_settings import BaseSettings

from .exceptions import StorageConfigurationError


class Settings(BaseSettings):
    """Application settings with environment variable support."""

    log_level: str = "INFO"
    otel_enabled: bool = False
    otel_service_name: str = "filedesk"
    encryption_key: Optional[str] = None

    model_config = {
        "env_prefix": "FILEDESK_",
        "case_sensitive": False,
    }


class StorageSettings(BaseSettings):
    """Object storage settings (bucket, public URL and credentials)."""

    bucket_name: Optional[str] = None
    public_url: str = ""
    account_id: Optional[str] = None
    endpoint_url: Optional[str] = None
    access_key_id: Optional[str] = None
    secret_access_key: Optional[str] = None
    region_name: str = "auto"
    upload_url_expiry: int = 3600

    model_config = {
        "env_prefix": "FILEDESK_STORAGE_",
        "case_sensitive": False,
    }

    def require_bucket(self) -> str:
        """Return the configured bucket name.

        Raises:
            StorageConfigurationError: If no bucket name is configured
        """
        if not self.bucket_name:
            raise StorageConfigurationError("Bucket name missing")
        return self.bucket_name


settings = Settings()
