from typing import Callable, Optional

from weather_client import fetch_forecast
from weather_models import ForecastPeriod, WeatherResponse

SEPARATOR = "---"
NO_DATA_MESSAGE = "No forecast data available for this region."

Fetcher = Callable[[str], Optional[WeatherResponse]]


def failure_message(region_id: str) -> str:
    return (
        f"Failed to retrieve weather data for region ID: {region_id}. "
        "Please check if the region ID is valid."
    )


def format_period(forecast: ForecastPeriod) -> str:
    """Render one day's forecast as a block of lines ending in the separator."""
    parts = [
        f"{forecast.date_label or 'Unknown'}:",
        f"天気: {forecast.telop or '不明'}",
    ]

    temp = forecast.temperature
    if temp is not None:
        if temp.max is not None and temp.max.celsius:
            parts.append(f"最高気温: {temp.max.celsius}℃")
        if temp.min is not None and temp.min.celsius:
            parts.append(f"最低気温: {temp.min.celsius}℃")

    detail = forecast.detail
    if detail is not None:
        if detail.weather:
            parts.append(f"詳細: {detail.weather}")
        if detail.wind:
            parts.append(f"風: {detail.wind}")
        if detail.wave:
            parts.append(f"波: {detail.wave}")

    parts.append(SEPARATOR)
    return "\n".join(parts)


def format_forecast(region_id: str, weather: WeatherResponse) -> str:
    """Render a full forecast payload: title, publish time, overview, periods, link."""
    title = weather.title or f"地域ID {region_id} の天気予報"
    # the pre-formatted publish time wins over the raw one
    public_time = weather.public_time_formatted or weather.public_time
    description = weather.description.text if weather.description is not None else None

    text = f"{title}\n"
    if public_time:
        text += f"発表時刻: {public_time}\n"
    if description:
        text += f"\n概況:\n{description}\n"
    text += "\n予報:\n" + "\n".join(format_period(forecast) for forecast in weather.forecasts or [])

    if weather.link:
        text += f"\n詳細情報: {weather.link}"

    return text


def get_forecast(region_id: str, fetch: Fetcher = fetch_forecast) -> str:
    """Fetch and format the forecast for a region. Always returns text."""
    weather = fetch(region_id)
    if weather is None:
        return failure_message(region_id)

    if not weather.forecasts:
        return NO_DATA_MESSAGE

    return format_forecast(region_id, weather)
