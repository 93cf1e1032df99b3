import logging
import os
import sys
from dataclasses import dataclass

from dotenv import load_dotenv

WEATHER_API_BASE = "https://weather.tsukumijima.net/api/forecast"
USER_AGENT = "weather-app/1.0"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class Settings:
    api_base: str = WEATHER_API_BASE
    log_level: str = "INFO"


def load_settings() -> Settings:
    """Read settings from the environment, after loading a local .env if any."""
    load_dotenv()
    return Settings(
        api_base=os.getenv("TENKI_API_BASE", WEATHER_API_BASE),
        log_level=os.getenv("TENKI_LOG_LEVEL", "INFO").upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    # stdout belongs to the stdio transport
    logging.basicConfig(level=level.upper(), stream=sys.stderr, format=LOG_FORMAT)
