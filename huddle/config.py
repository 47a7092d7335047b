"""Application configuration."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, computed_field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class BookingSettings(BaseModel):
    """Booking rules configuration."""

    # Members invited besides the organizer
    # Falling below min_members after a decline or leave cancels the booking
    min_members: int = 3
    max_members: int = 6

    @model_validator(mode="after")
    def validate_bounds(self) -> "BookingSettings":
        """Minimum must be positive and not exceed the maximum."""
        if self.min_members < 1 or self.min_members > self.max_members:
            raise ValueError("min_members must be between 1 and max_members")
        return self


class ResourceSettings(BaseModel):
    """A bookable room as configured."""

    id: str
    name: str
    capacity: int = 4


class CatalogSettings(BaseModel):
    """Resource catalog configuration.

    Static list of rooms and the fixed time slots they can be booked for.
    Override with CATALOG__RESOURCES / CATALOG__SLOTS as JSON.
    """

    resources: list[ResourceSettings] = [
        ResourceSettings(id="room-1", name="Discussion Room A"),
        ResourceSettings(id="room-2", name="Discussion Room B"),
        ResourceSettings(id="room-3", name="Discussion Room C"),
    ]
    slots: list[str] = [
        "08:00-10:00",
        "10:00-12:00",
        "12:00-14:00",
        "14:00-16:00",
        "16:00-18:00",
        "18:00-20:00",
    ]


class DirectorySettings(BaseModel):
    """Participant directory configuration."""

    # Participant identifier -> display name, used only for message text
    # Unknown identifiers fall back to the local part of the e-mail address
    display_names: dict[str, str] = {}


class APISettings(BaseModel):
    """API configuration."""

    host: str
    port: int
    protocol: Literal["http", "https"]

    @computed_field
    @property
    def base_url(self) -> str:
        """Construct base URL from host.

        In development: http://localhost:8000
        In production: https://<host>
        """
        if self.host == "localhost":
            return f"{self.protocol}://{self.host}:{self.port}"
        else:
            # Production uses standard ports (80/443)
            return f"{self.protocol}://{self.host}"


class ObservabilitySettings(BaseModel):
    """Observability configuration for Logfire."""

    # Logfire API token (optional - if not set, logs only go to console)
    # Can be set via OBSERVABILITY__LOGFIRE_TOKEN env var
    logfire_token: str | None = None

    # Whether to send telemetry to Logfire cloud
    # If None, will auto-determine: sends if token is present, otherwise console-only
    send_to_logfire: bool | None = None


class Settings(BaseSettings):
    """Application settings.

    Set environment variables to override, using __ for nested values:

        ENVIRONMENT=production
        HOST=rooms.example.org
        BOOKING__MIN_MEMBERS=3
        DIRECTORY__DISPLAY_NAMES='{"alice@example.com": "Alice White"}'
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",  # Allows BOOKING__MIN_MEMBERS syntax
    )

    # Environment determines protocol and defaults
    environment: Literal["test", "development", "staging", "production"] = "development"
    debug: bool = False

    # Git commit SHA (loaded from version.txt file or defaults to "unknown")
    git_sha: str = "unknown"

    host: str = "localhost"
    port: int = 8000

    # Nested settings
    booking: BookingSettings = BookingSettings()
    catalog: CatalogSettings = CatalogSettings()
    directory: DirectorySettings = DirectorySettings()
    api: APISettings = APISettings(
        host="localhost", port=8000, protocol="http"
    )  # Overwritten in validator
    observability: ObservabilitySettings = ObservabilitySettings()

    @model_validator(mode="after")
    def initialize_api_settings(self) -> "Settings":
        """Initialize API settings from host and environment."""
        protocol: Literal["http", "https"] = (
            "http" if self.environment in ("test", "development") else "https"
        )

        self.api = APISettings(host=self.host, port=self.port, protocol=protocol)

        # Load git SHA from version file if it exists
        self.git_sha = self._load_git_sha()

        return self

    @staticmethod
    def _load_git_sha() -> str:
        """Load git SHA from version file.

        Returns:
            Git SHA if version file exists, otherwise "unknown"
        """
        version_file = Path("/app/version.txt")
        if version_file.exists():
            try:
                return version_file.read_text().strip()
            except OSError:
                return "unknown"
        # In development, version file may not exist
        return "unknown"
