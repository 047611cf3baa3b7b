"""
Application Settings - Load from YAML configs + .env secrets

Design Philosophy:
- Storage layout (endpoint, bucket, dirname, domain) → YAML file (versioned in git)
- Secrets (access key id/secret) → .env file (gitignored)

The YAML file holds one section per provider:

    oss:
      endpoint: https://oss-cn-hangzhou.aliyuncs.com
      bucket: media
      dirname: uploads
      domain: https://media.oss-cn-hangzhou.aliyuncs.com

Uses Pydantic for validation and type safety
"""

from typing import Any

from pydantic import Field, PrivateAttr
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.models.upload import DestinationConfig
from core.utils.config import load_yaml_safe


class Settings(BaseSettings):
    """
    Application settings

    Usage:
        from config.settings import get_settings

        settings = get_settings()
        print(settings.STORAGE_BUCKET)  # From storage.yaml
        print(settings.STORAGE_ACCESS_KEY_ID)  # From .env
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",  # Ignore extra fields in .env
    )

    _storage_config: dict[str, Any] = PrivateAttr(default_factory=dict)

    def __init__(self, **kwargs):
        super().__init__(**kwargs)
        self._storage_config = load_yaml_safe(self.STORAGE_CONFIG_PATH)

    # ============================================
    # PROVIDER (.env only)
    # ============================================
    STORAGE_PROVIDER: str = Field(
        default="oss",
        description="Storage provider: oss, aws, localstack",
    )
    STORAGE_CONFIG_PATH: str = Field(default="config/providers/storage.yaml")

    # ============================================
    # CREDENTIALS (.env only - secrets)
    # ============================================
    STORAGE_ACCESS_KEY_ID: str | None = Field(default="test")  # LocalStack default
    STORAGE_ACCESS_KEY_SECRET: str | None = Field(default="test")  # LocalStack default

    # ============================================
    # STORAGE LAYOUT (from YAML)
    # ============================================
    @property
    def provider_config(self) -> dict[str, Any]:
        """Section of storage.yaml for the active provider"""
        return self._storage_config.get(self.STORAGE_PROVIDER.lower(), {}) or {}

    @property
    def STORAGE_ENDPOINT(self) -> str | None:
        """Endpoint URL from storage.yaml (None → vendor default)"""
        return self.provider_config.get("endpoint") or None

    @property
    def STORAGE_REGION(self) -> str:
        """Region from storage.yaml"""
        return self.provider_config.get("region", "us-east-1")

    @property
    def STORAGE_BUCKET(self) -> str:
        """Bucket name from storage.yaml"""
        return self.provider_config.get("bucket", "uploads-local")

    @property
    def STORAGE_DIRNAME(self) -> str:
        """Directory prefix inside the bucket from storage.yaml"""
        return self.provider_config.get("dirname", "storage")

    @property
    def STORAGE_DOMAIN(self) -> str:
        """Public domain base for object URLs from storage.yaml"""
        return self.provider_config.get("domain", "http://localhost:4566")

    @property
    def STORAGE_DIR_SEPARATOR(self) -> str:
        """Separator between key parts from storage.yaml"""
        return self.provider_config.get("dir_separator", "/")

    @property
    def storage_destination(self) -> DestinationConfig:
        """Destination config for the uploader"""
        return DestinationConfig(
            directory_prefix=self.STORAGE_DIRNAME,
            path_separator=self.STORAGE_DIR_SEPARATOR,
            domain=self.STORAGE_DOMAIN,
            bucket=self.STORAGE_BUCKET,
        )


# Singleton pattern
_settings_instance: Settings | None = None


def get_settings() -> Settings:
    """
    Get application settings (singleton)

    Returns:
        Settings instance
    """
    global _settings_instance
    if _settings_instance is None:
        _settings_instance = Settings()
    return _settings_instance


def reset_settings() -> None:
    """Drop the cached settings so the next get_settings() reloads them"""
    global _settings_instance
    _settings_instance = None
