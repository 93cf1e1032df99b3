import logging
from typing import Optional

import requests
from pydantic import ValidationError

from weather_config import USER_AGENT, WEATHER_API_BASE
from weather_models import WeatherResponse

logger = logging.getLogger(__name__)

HEADERS = {
    "User-Agent": USER_AGENT,
    "Accept": "application/json",
}


def fetch_forecast(region_id: str, api_base: str = WEATHER_API_BASE) -> Optional[WeatherResponse]:
    """Fetch the forecast for ``region_id``.

    Returns the parsed payload, or None if the request fails, the upstream
    answers with a non-success status, or the body does not parse. Failures
    are logged here and never raised.
    """
    try:
        response = requests.get(api_base, params={"city": region_id}, headers=HEADERS)
        response.raise_for_status()
        return WeatherResponse.model_validate(response.json())
    except (requests.RequestException, ValidationError) as e:
        logger.error("Error making weather request: %s", e)
        return None
