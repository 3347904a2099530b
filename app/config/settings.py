# app/config/settings.py

from functools import lru_cache
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class AppSettings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # --- Application ---
    app_name: str = "admin-audit"
    environment: Literal["dev", "test", "prod"] = "dev"
    debug: bool = False
    version: str = "0.1.0"

    # --- Observability ---
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    # --- Audit ---
    audit_logger_name: str = "app.audit.admin"
    audit_timestamp_format: str = "%Y-%m-%d %H:%M:%S"
    audit_none_sentinel: str = Field("none", min_length=1)
    # Fully-qualified names (module.qualname) of handlers audited without the @admin_api marker.
    # Set as a JSON list in the environment, e.g. ADMIN_OPERATIONS='["app.api.routers.x.y"]'.
    admin_operations: list[str] = Field(
        default_factory=lambda: [
            "app.api.routers.comments_admin.delete_comment",
        ]
    )


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
