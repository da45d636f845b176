"""OpenWeather Provider - Implementação do provider para OpenWeatherMap 2.5"""

from datetime import date, datetime, timezone
from typing import Any, Dict, Optional

from ddtrace import tracer

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import OpenWeather
from domain.entities.weather import Weather
from infrastructure.adapters.helpers.date_routing_helper import (
    OPEN_WEATHER_ROUTING,
    WeatherRoute,
    utc_today,
)
from infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager
from infrastructure.adapters.output.http.response_decoder import decode_response
from infrastructure.adapters.output.providers.openweather.api_config import (
    OpenWeatherApiConfig,
    OpenWeatherEndpoints,
)
from infrastructure.adapters.output.providers.openweather.mappers import OpenWeatherDataMapper
from infrastructure.adapters.output.providers.openweather.schemas import (
    OpenWeatherCurrentResponse,
    OpenWeatherErrorResponse,
    OpenWeatherForecastResponse,
    OpenWeatherHistoryResponse,
)
from shared.config.logger_config import get_logger
from shared.config.settings import ConfigSnapshot, get_provider_section

logger = get_logger(child=True)


def _midnight_timestamp(day: date) -> int:
    """Unix timestamp de 00:00 UTC do dia"""
    return int(datetime(day.year, day.month, day.day, tzinfo=timezone.utc).timestamp())


class OpenWeatherProvider(IWeatherProvider):
    """
    Provider para OpenWeatherMap

    Roteamento por data (dias a partir de hoje, UTC):
    - sem data ou hoje -> /data/2.5/weather (atual)
    - 1 a 16 dias -> /data/2.5/forecast/daily
    - entre 1979-01-02 e ontem -> /data/2.5/history/city
    - demais -> UnsupportedDateException
    """

    def __init__(
        self,
        api_key: str,
        endpoints: OpenWeatherEndpoints,
        session_manager: Optional[AiohttpSessionManager] = None
    ):
        self.api_key = api_key
        self.endpoints = endpoints
        self.session_manager = session_manager or AiohttpSessionManager()

    @classmethod
    def from_config(
        cls,
        config: ConfigSnapshot,
        session_manager: Optional[AiohttpSessionManager] = None
    ) -> 'OpenWeatherProvider':
        """
        Constrói o provider a partir da seção 'open-weather'

        Raises:
            MissingConfigurationException: Se apiKey não configurada
            InvalidConfigurationException: Se alguma base URL for inválida
        """
        api_config = OpenWeatherApiConfig.from_section(
            get_provider_section(config, OpenWeather.PROVIDER_NAME)
        )
        api_key = api_config.require_api_key()
        endpoints = OpenWeatherEndpoints.from_config(api_config)
        return cls(api_key=api_key, endpoints=endpoints, session_manager=session_manager)

    @property
    def provider_name(self) -> str:
        return OpenWeather.PROVIDER_NAME

    @tracer.wrap(resource="openweather.get_weather")
    async def get_weather(self, address: str, date: Optional[date] = None) -> Weather:
        if date is None:
            return await self.today(address)

        route = OPEN_WEATHER_ROUTING.route(utc_today(), date)
        logger.info("Routing weather request", provider=self.provider_name, route=route.value)

        if route == WeatherRoute.FORECAST:
            return await self.forecast(address, date)
        if route == WeatherRoute.HISTORY:
            return await self.history(address, date)
        return await self.today(address)

    def _default_params(self, address: str) -> Dict[str, Any]:
        return {'q': address, 'appid': self.api_key}

    async def today(self, address: str) -> Weather:
        endpoint = self.endpoints.weather
        response = await self.session_manager.fetch(endpoint, self._default_params(address))
        data = decode_response(
            response, OpenWeatherCurrentResponse.from_dict, OpenWeatherErrorResponse.from_dict
        )
        return OpenWeatherDataMapper.map_current_to_weather(data, endpoint)

    async def forecast(self, address: str, day: date) -> Weather:
        endpoint = self.endpoints.forecast
        params = self._default_params(address)
        params.update({'start': str(_midnight_timestamp(day)), 'cnt': '1'})

        response = await self.session_manager.fetch(endpoint, params)
        data = decode_response(
            response, OpenWeatherForecastResponse.from_dict, OpenWeatherErrorResponse.from_dict
        )
        return OpenWeatherDataMapper.map_forecast_to_weather(data, endpoint)

    async def history(self, address: str, day: date) -> Weather:
        endpoint = self.endpoints.history
        params = self._default_params(address)
        params.update({'start': str(_midnight_timestamp(day)), 'cnt': '1'})

        response = await self.session_manager.fetch(endpoint, params)
        data = decode_response(
            response, OpenWeatherHistoryResponse.from_dict, OpenWeatherErrorResponse.from_dict
        )
        return OpenWeatherDataMapper.map_history_to_weather(data, endpoint)

    async def close(self) -> None:
        await self.session_manager.close()
