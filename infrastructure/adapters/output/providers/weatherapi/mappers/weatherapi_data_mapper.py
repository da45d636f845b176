"""
WeatherAPI Data Mapper - Transforma respostas de weatherapi.com em Weather
"""
from domain.entities.weather import Weather
from domain.exceptions import MalformedResponseException
from domain.value_objects.temperature import Temperature
from infrastructure.adapters.output.providers.weatherapi.schemas import (
    WeatherApiCurrentResponse,
    WeatherApiForecastDay,
    WeatherApiForecastResponse,
)

FORECASTDAY_PATH = "./forecast.forecastday"


class WeatherApiDataMapper:
    """
    Mapper WeatherAPI → Domain entities

    Temperaturas em Celsius (temp_c / avgtemp_c).
    """

    @staticmethod
    def requested_day(data: WeatherApiForecastResponse, endpoint: str) -> WeatherApiForecastDay:
        """
        Dia consumido da lista 'forecastday'

        forecast.json?days=N devolve N dias terminando no dia pedido, por isso
        o último elemento é o consumido.

        Raises:
            MalformedResponseException: Se a lista vier vazia
        """
        if not data.forecastday:
            raise MalformedResponseException(endpoint, FORECASTDAY_PATH)
        return data.forecastday[-1]

    @staticmethod
    def map_current_to_weather(data: WeatherApiCurrentResponse) -> Weather:
        return Weather.current(Temperature.from_celsius(data.temp_c), data.condition.text)

    @staticmethod
    def map_history_to_weather(data: WeatherApiForecastResponse, endpoint: str) -> Weather:
        day = WeatherApiDataMapper.requested_day(data, endpoint)
        return Weather.history(Temperature.from_celsius(day.avgtemp_c), day.condition.text)

    @staticmethod
    def map_forecast_to_weather(data: WeatherApiForecastResponse, endpoint: str) -> Weather:
        day = WeatherApiDataMapper.requested_day(data, endpoint)
        return Weather.forecast(Temperature.from_celsius(day.avgtemp_c), day.condition.text)
