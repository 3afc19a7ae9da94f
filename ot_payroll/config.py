import os
from functools import lru_cache
from pathlib import Path
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .roster import DEFAULT_ROSTER, StaffRoster, load_roster

BASE_DIR = Path(__file__).resolve().parent.parent


class Settings(BaseSettings):
    env: str = Field(default="dev", description="Deployment environment")
    app_name: str = "Overtime Calculator API"
    log_level: str = "INFO"
    timezone: str = Field(default="Asia/Bangkok", description="Zone clock events are read in")
    attendance_path: Path | None = Field(default=None, description="CSV or JSON attendance export")
    roster_path: Path | None = Field(default=None, description="JSON staff roster overriding the built-in one")
    pdf_font_path: Path | None = Field(default=None, description="TrueType font with Thai glyphs for PDF sheets")
    organization_name: str = "โรงพยาบาลสมเด็จพระเจ้าตากสินมหาราช"
    department_name: str = "งานโสตทัศนศึกษา"
    cors_origins: str = ""
    sentry_dsn: str | None = Field(default=None, description="Sentry DSN for error monitoring")

    model_config = SettingsConfigDict(env_prefix="OTPAY_", extra="ignore")

    @field_validator("timezone")
    @classmethod
    def known_timezone(cls, value: str) -> str:
        try:
            ZoneInfo(value)
        except (ZoneInfoNotFoundError, ValueError) as exc:
            raise ValueError(f"Unknown timezone {value!r}") from exc
        return value

    @property
    def tzinfo(self) -> ZoneInfo:
        return ZoneInfo(self.timezone)

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    return Settings(_env_file=get_settings_env_file())


def get_settings_env_file() -> str | None:
    """Resolve environment-specific env file if it exists."""
    env = os.getenv("OTPAY_ENV", "dev")
    env_file = BASE_DIR / f".env.{env}"
    default_file = BASE_DIR / ".env"
    if env_file.exists():
        return str(env_file)
    if default_file.exists():
        return str(default_file)
    return None


def load_configured_roster(settings: Settings) -> StaffRoster:
    if settings.roster_path is None:
        return DEFAULT_ROSTER
    return load_roster(settings.roster_path)
