"""
Runtime configuration, read from environment variables.

Uses pydantic-settings, so a local .env file works the same as the
container environment. Every value has a default; see .env.example.
"""

from pathlib import Path

from pydantic import Field, ValidationError
from pydantic_settings import BaseSettings, SettingsConfigDict

from colors import ColorScale
from errors import ConfigurationError
from handler import BadgeHandler
from storage import DEFAULT_LOCK_TIMEOUT, ViewCounter
from template import BadgeTemplate

BASE_DIR = Path(__file__).resolve().parent

DEFAULT_PORT = 3030
DEFAULT_MAX_VIEWS = 10_400
DEFAULT_MARKER = "$MARKER$"


class Settings(BaseSettings):
    # ─── Server ────────────────────────────────────────────────────
    # Bind 0.0.0.0 instead of 127.0.0.1
    host_on_all_interfaces: bool = False
    port: int = Field(default=DEFAULT_PORT, gt=0, lt=65536)

    # ─── Badge ─────────────────────────────────────────────────────
    # View count at which the last color of the scale is reached
    max_views: int = Field(default=DEFAULT_MAX_VIEWS, ge=1)
    colors_path: Path = BASE_DIR / "colors.txt"
    template_path: Path = BASE_DIR / "view_count_template.svg"
    template_marker: str = Field(default=DEFAULT_MARKER, min_length=1)

    # ─── Counter ───────────────────────────────────────────────────
    # Seconds a request waits for the counter before answering 500
    counter_lock_timeout: float = Field(default=DEFAULT_LOCK_TIMEOUT, gt=0)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_ignore_empty=True,
        extra="ignore",  # .env may hold LOG_LEVEL and friends
        frozen=True,
    )

    @classmethod
    def from_env(cls):
        try:
            return cls()
        except ValidationError as exc:
            raise ConfigurationError(f"Invalid settings: {exc}") from exc

    @property
    def host(self):
        return "0.0.0.0" if self.host_on_all_interfaces else "127.0.0.1"


def load_handler(settings):
    """
    Reads the color scale and template from disk and wires the handler.
    OSError and ConfigurationError propagate: the server must not start.
    """
    colors_text = settings.colors_path.read_text(encoding="utf-8")
    template_text = settings.template_path.read_text(encoding="utf-8")

    scale = ColorScale.from_source(colors_text, settings.max_views)
    template = BadgeTemplate.from_source(template_text, settings.template_marker)
    counter = ViewCounter(lock_timeout=settings.counter_lock_timeout)
    return BadgeHandler(counter, scale, template)
