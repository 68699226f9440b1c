from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    database_url: str = Field(alias="DATABASE_URL")

    # Organization used when a request does not name one
    default_organization_key: str = Field(
        default="default-organization", alias="DEFAULT_ORGANIZATION_KEY"
    )

    # Installed languages, as "key:name" pairs separated by commas
    languages: str = Field(
        default="java:Java,js:JavaScript,py:Python", alias="LANGUAGES"
    )

    # Startup
    run_startup_tasks: bool = Field(default=True, alias="RUN_STARTUP_TASKS")

    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Server
    api_host: str = Field(default="0.0.0.0", alias="API_HOST")
    api_port: int = Field(default=8000, ge=1, le=65535, alias="API_PORT")

    # Frontend URL allowed by CORS
    frontend_url: str | None = Field(default=None, alias="FRONTEND_URL")

    @field_validator("frontend_url", mode="before")
    @classmethod
    def empty_str_to_none(cls, v: str | None) -> str | None:
        """Convert empty strings to None for optional string fields."""
        if v == "":
            return None
        return v

    @field_validator("log_level", mode="before")
    @classmethod
    def normalize_log_level(cls, v: str) -> str:
        return v.strip().upper() if isinstance(v, str) else v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


settings = Settings()
