import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from robot_canvas.brain.errors import ConfigurationError

DEFAULT_MODEL = "gemini-robotics-er-1.5-preview"
DEFAULT_API_BASE = "https://generativelanguage.googleapis.com/v1beta"


@dataclass(frozen=True)
class Settings:
    """
    Process-wide configuration, built once at start-up and handed to the
    prompt builder, the planner client and the plan validator.
    Canvas and arm sizes are in pixels.
    """
    gemini_api_key: Optional[str] = None
    robotics_model: str = DEFAULT_MODEL
    api_base: str = DEFAULT_API_BASE
    port: int = 3000
    request_timeout: float = 60.0
    temperature: float = 0.1
    log_level: str = "INFO"
    log_dir: Optional[str] = None

    canvas_width: int = 1200
    canvas_height: int = 600
    upper_arm_length: int = 150
    lower_arm_length: int = 120

    @property
    def base_position(self):
        # Arm base sits at the canvas centre
        return (self.canvas_width / 2, self.canvas_height / 2)

    @property
    def max_reach(self):
        return self.upper_arm_length + self.lower_arm_length

    @property
    def endpoint(self):
        return f"{self.api_base.rstrip('/')}/models/{self.robotics_model}:generateContent"

    @classmethod
    def from_env(cls, environ=None):
        """
        Reads settings from the environment (and a .env file, if present).
        GEMINI_API_KEY may be absent here; planning requests then fail with
        a ConfigurationError instead of the server refusing to start.
        """
        if environ is None:
            load_dotenv()
            environ = os.environ

        return cls(
            gemini_api_key=environ.get("GEMINI_API_KEY") or None,
            robotics_model=environ.get("ROBOTICS_MODEL", DEFAULT_MODEL),
            api_base=environ.get("GEMINI_API_BASE", DEFAULT_API_BASE),
            port=_number(environ, "PORT", 3000, int),
            request_timeout=_number(environ, "PLANNER_TIMEOUT", 60.0, float),
            temperature=_number(environ, "PLANNER_TEMPERATURE", 0.1, float),
            log_level=environ.get("LOG_LEVEL", "INFO").upper(),
            log_dir=environ.get("LOG_DIR") or None,
        )


def _number(environ, name, default, cast):
    raw = environ.get(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return cast(raw)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number, got {raw!r}") from None
