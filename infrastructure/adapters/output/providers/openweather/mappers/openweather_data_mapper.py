"""
OpenWeather Data Mapper - Transforma respostas da API OpenWeather em Weather
LOCALIZAÇÃO: infrastructure (transforma dados externos → domínio)
"""
from typing import List, TypeVar

from domain.entities.weather import Weather
from domain.exceptions import MalformedResponseException
from domain.value_objects.temperature import Temperature
from infrastructure.adapters.output.providers.openweather.schemas import (
    OpenWeatherCurrentResponse,
    OpenWeatherForecastResponse,
    OpenWeatherHistoryResponse,
)

T = TypeVar('T')


def _last_or_fail(items: List[T], endpoint: str, field_path: str) -> T:
    # A API devolve listas; só um elemento é consumido (o último, cnt=1)
    if not items:
        raise MalformedResponseException(endpoint, field_path)
    return items[-1]


class OpenWeatherDataMapper:
    """
    Mapper para transformar respostas da API OpenWeather em entities de domínio

    Temperaturas chegam em Kelvin (sem 'units' na query).
    """

    @staticmethod
    def map_current_to_weather(data: OpenWeatherCurrentResponse, endpoint: str) -> Weather:
        condition = _last_or_fail(data.weather, endpoint, "weather")
        return Weather.current(Temperature.from_kelvin(data.temp), condition.main)

    @staticmethod
    def map_forecast_to_weather(data: OpenWeatherForecastResponse, endpoint: str) -> Weather:
        day = _last_or_fail(data.days, endpoint, "./list")
        temp = Temperature.from_kelvin(day.temp_day)
        condition = _last_or_fail(day.weather, endpoint, "./list/[0]/weather")
        return Weather.forecast(temp, condition.main)

    @staticmethod
    def map_history_to_weather(data: OpenWeatherHistoryResponse, endpoint: str) -> Weather:
        entry = _last_or_fail(data.entries, endpoint, "./list")
        condition = _last_or_fail(entry.weather, endpoint, "./list/[0]/weather")
        return Weather.history(Temperature.from_kelvin(entry.temp), condition.main)
