"""Runtime settings for doh-resolver."""

import os

from pydantic import BaseModel, Field, field_validator


class Settings(BaseModel):
    """Server and client settings.

    Values come from ``DOH_*`` environment variables when present; CLI
    options take precedence over both.
    """

    host: str = Field(default="0.0.0.0", description="Address the API binds to")
    port: int = Field(default=3000, ge=1, le=65535, description="Port the API binds to")
    api_url: str = Field(default="http://localhost:3000", description="Base URL used by the client")
    nameservers: list[str] = Field(
        default_factory=list, description="Nameservers to query, empty for system config"
    )
    log_level: str = Field(default="INFO", description="Logging level")

    @field_validator("nameservers", mode="before")
    @classmethod
    def split_nameservers(cls, value):
        if isinstance(value, str):
            return [ns.strip() for ns in value.split(",") if ns.strip()]
        return value

    @field_validator("log_level")
    @classmethod
    def upper_log_level(cls, value: str) -> str:
        return value.upper()

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Build settings from ``DOH_*`` environment variables."""
        environ = os.environ if environ is None else environ
        values = {}
        for field in cls.model_fields:
            key = f"DOH_{field.upper()}"
            if environ.get(key):
                values[field] = environ[key]
        return cls(**values)
