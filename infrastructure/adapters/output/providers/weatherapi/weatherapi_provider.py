"""WeatherAPI Provider - Implementação do provider para weatherapi.com v1"""

from datetime import date
from typing import Any, Dict, Optional

from ddtrace import tracer

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import WeatherApi
from domain.entities.weather import Weather
from infrastructure.adapters.helpers.date_routing_helper import (
    WEATHER_API_ROUTING,
    WeatherRoute,
    day_offset,
    utc_today,
)
from infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager
from infrastructure.adapters.output.http.endpoints import endpoint_path
from infrastructure.adapters.output.http.response_decoder import decode_response
from infrastructure.adapters.output.providers.weatherapi.api_config import (
    WeatherApiConfig,
    WeatherApiEndpoints,
)
from infrastructure.adapters.output.providers.weatherapi.mappers import WeatherApiDataMapper
from infrastructure.adapters.output.providers.weatherapi.schemas import (
    WeatherApiCurrentResponse,
    WeatherApiErrorResponse,
    WeatherApiForecastResponse,
)
from shared.config.logger_config import get_logger
from shared.config.settings import ConfigSnapshot, get_provider_section

logger = get_logger(child=True)


class WeatherApiProvider(IWeatherProvider):
    """
    Provider para WeatherAPI.com

    Características:
    - current.json para hoje
    - forecast.json para 1 a 14 dias (days=offset, sem aqi/alertas)
    - future.json para 15 a 300 dias
    - history.json para datas entre 2010-01-02 e ontem
    """

    def __init__(
        self,
        api_key: str,
        endpoints: WeatherApiEndpoints,
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
    ) -> 'WeatherApiProvider':
        """
        Constrói o provider a partir da seção 'weather-api'

        Raises:
            MissingConfigurationException: Se apiKey não configurada
            InvalidConfigurationException: Se baseUrl for inválida
        """
        api_config = WeatherApiConfig.from_section(
            get_provider_section(config, WeatherApi.PROVIDER_NAME)
        )
        api_key = api_config.require_api_key()
        endpoints = WeatherApiEndpoints.from_config(api_config)
        return cls(api_key=api_key, endpoints=endpoints, session_manager=session_manager)

    @property
    def provider_name(self) -> str:
        return WeatherApi.PROVIDER_NAME

    @tracer.wrap(resource="weatherapi.get_weather")
    async def get_weather(self, address: str, date: Optional[date] = None) -> Weather:
        if date is None:
            return await self.current(address)

        today = utc_today()
        route = WEATHER_API_ROUTING.route(today, date)
        logger.info("Routing weather request", provider=self.provider_name, route=route.value)

        if route == WeatherRoute.FORECAST:
            return await self.forecast(address, day_offset(today, date))
        if route == WeatherRoute.FUTURE:
            return await self.future(address, date)
        if route == WeatherRoute.HISTORY:
            return await self.history(address, date)
        return await self.current(address)

    def _default_params(self, address: str) -> Dict[str, Any]:
        return {'q': address, 'key': self.api_key}

    async def current(self, address: str) -> Weather:
        response = await self.session_manager.fetch(
            self.endpoints.current, self._default_params(address)
        )
        data = decode_response(
            response, WeatherApiCurrentResponse.from_dict, WeatherApiErrorResponse.from_dict
        )
        return WeatherApiDataMapper.map_current_to_weather(data)

    async def history(self, address: str, day: date) -> Weather:
        endpoint = self.endpoints.history
        params = self._default_params(address)
        params['dt'] = day.isoformat()

        response = await self.session_manager.fetch(endpoint, params)
        data = decode_response(
            response, WeatherApiForecastResponse.from_dict, WeatherApiErrorResponse.from_dict
        )
        return WeatherApiDataMapper.map_history_to_weather(data, endpoint_path(endpoint))

    async def forecast(self, address: str, days: int) -> Weather:
        endpoint = self.endpoints.forecast
        params = self._default_params(address)
        params.update({'days': str(days), 'aqi': 'no', 'alerts': 'no'})

        response = await self.session_manager.fetch(endpoint, params)
        data = decode_response(
            response, WeatherApiForecastResponse.from_dict, WeatherApiErrorResponse.from_dict
        )
        return WeatherApiDataMapper.map_forecast_to_weather(data, endpoint_path(endpoint))

    async def future(self, address: str, day: date) -> Weather:
        endpoint = self.endpoints.future
        params = self._default_params(address)
        params['dt'] = day.isoformat()

        response = await self.session_manager.fetch(endpoint, params)
        data = decode_response(
            response, WeatherApiForecastResponse.from_dict, WeatherApiErrorResponse.from_dict
        )
        return WeatherApiDataMapper.map_forecast_to_weather(data, endpoint_path(endpoint))

    async def close(self) -> None:
        await self.session_manager.close()
