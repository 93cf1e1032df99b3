"""Models for the tsukumijima forecast API payload.

The upstream schema is not guaranteed, so every field is optional and
absent values are ``None``. Keys arrive in camelCase (``dateLabel``,
``publicTimeFormatted``) and are exposed here in snake_case.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UpstreamModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        coerce_numbers_to_str=True,
        extra="ignore",
    )


class TemperatureValue(UpstreamModel):
    celsius: Optional[str] = None
    fahrenheit: Optional[str] = None


class Temperature(UpstreamModel):
    celsius: Optional[str] = None
    max: Optional[TemperatureValue] = None
    min: Optional[TemperatureValue] = None


class WeatherDetail(UpstreamModel):
    weather: Optional[str] = None
    wind: Optional[str] = None
    wave: Optional[str] = None


class ForecastPeriod(UpstreamModel):
    date_label: Optional[str] = None
    telop: Optional[str] = None
    detail: Optional[WeatherDetail] = None
    temperature: Optional[Temperature] = None


class WeatherDescription(UpstreamModel):
    public_time: Optional[str] = None
    public_time_formatted: Optional[str] = None
    headline_text: Optional[str] = None
    body_text: Optional[str] = None
    text: Optional[str] = None


class WeatherResponse(UpstreamModel):
    public_time: Optional[str] = None
    public_time_formatted: Optional[str] = None
    title: Optional[str] = None
    link: Optional[str] = None
    description: Optional[WeatherDescription] = None
    forecasts: Optional[list[ForecastPeriod]] = None
