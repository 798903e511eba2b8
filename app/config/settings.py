"""Typed runtime settings with dotenv support and startup validation."""

from pydantic import AliasChoices, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

LOG_LEVEL_CHOICES = ("debug", "info", "warning", "error", "critical")


class SettingsLoadError(RuntimeError):
    """Raised when runtime settings cannot be loaded or validated."""


class AppSettings(BaseSettings):
    """Application settings for the HTTP info server runtime.

    Field values are read from environment variables or a local `.env` file.
    Several fields accept the variable names orchestration manifests already
    use, for example `PORT` and `NODE_ENV`.

    Attributes:
        application_host: Host interface for web server binding.
        application_port: Web server port, read from `PORT`.
        application_version: Version label reported by `/`, read from `APP_VERSION`.
        environment_name: Deployment environment label, read from `NODE_ENV`,
            `APP_ENV` or `ENVIRONMENT_NAME`.
        log_level: Root logging level name.
        shutdown_timeout_seconds: Upper bound for draining in-flight connections.
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
        populate_by_name=True,
    )

    application_host: str = Field(default="0.0.0.0", validation_alias=AliasChoices("HOST", "application_host"))
    application_port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("PORT", "application_port"),
    )
    application_version: str = Field(
        default="1.0.0",
        validation_alias=AliasChoices("APP_VERSION", "application_version"),
    )
    environment_name: str = Field(
        default="development",
        validation_alias=AliasChoices("NODE_ENV", "APP_ENV", "ENVIRONMENT_NAME", "environment_name"),
    )
    log_level: str = Field(default="info", validation_alias=AliasChoices("LOG_LEVEL", "log_level"))
    shutdown_timeout_seconds: float = Field(
        default=30.0,
        gt=0,
        validation_alias=AliasChoices("SHUTDOWN_TIMEOUT_SECONDS", "shutdown_timeout_seconds"),
    )

    @field_validator("application_host", "application_version", "environment_name")
    @classmethod
    def _validate_non_empty_string(cls, value: str) -> str:
        stripped_value = value.strip()
        if not stripped_value:
            raise ValueError("value must not be blank")
        return stripped_value

    @field_validator("log_level")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        normalized_value = value.strip().lower()
        if normalized_value not in LOG_LEVEL_CHOICES:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVEL_CHOICES)}")
        return normalized_value


def config_load_settings(**overrides: object) -> AppSettings:
    """Load and validate runtime settings from environment and dotenv.

    Args:
        **overrides: Field values that take precedence over the environment,
            for example `application_port` from a command-line flag.

    Returns:
        AppSettings: Validated runtime settings object.

    Raises:
        SettingsLoadError: Raised when settings are invalid.
    """

    try:
        return AppSettings(**overrides)
    except ValidationError as error:
        raise SettingsLoadError(
            f"Startup configuration validation failed. Update .env or environment variables. Details: {error}"
        ) from error
