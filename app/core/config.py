from pydantic import Field, field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    project_name: str = Field(default="sessions-mock", alias="PROJECT_NAME")
    api_prefix: str = Field(default="/v1", alias="API_PREFIX")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Artificial latency applied to POST /sessions, in milliseconds [min, max)
    latency_min_ms: int = Field(default=100, ge=0, alias="LATENCY_MIN_MS")
    latency_max_ms: int = Field(default=1000, gt=0, alias="LATENCY_MAX_MS")

    # Frontend URL allowed by CORS
    frontend_url: str | None = Field(default=None, alias="FRONTEND_URL")

    @field_validator("frontend_url", mode="before")
    @classmethod
    def empty_str_to_none(cls, v: str | None) -> str | None:
        """Convert empty strings to None for optional string fields."""
        if v == "":
            return None
        return v

    @field_validator("api_prefix")
    @classmethod
    def normalize_prefix(cls, v: str) -> str:
        """Ensure the prefix starts with a slash and has no trailing one."""
        v = "/" + v.strip("/")
        return "" if v == "/" else v

    @model_validator(mode="after")
    def check_latency_bounds(self) -> "Settings":
        if self.latency_max_ms <= self.latency_min_ms:
            raise ValueError("LATENCY_MAX_MS must be greater than LATENCY_MIN_MS")
        return self

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
