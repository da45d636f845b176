"""
OpenWeather API Config - Chave + endpoints resolvidos a partir da configuração
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from domain.constants import Config, OpenWeather
from domain.exceptions import MissingConfigurationException
from infrastructure.adapters.output.http.endpoints import build_endpoint, parse_base_url


@dataclass(frozen=True)
class OpenWeatherApiConfig:
    """Seção 'open-weather' da configuração, com defaults"""
    api_key: Optional[str] = None
    base_url: str = OpenWeather.BASE_URL
    history_base_url: str = OpenWeather.HISTORY_BASE_URL
    weather_path: str = OpenWeather.WEATHER_PATH
    history_path: str = OpenWeather.HISTORY_PATH
    forecast_path: str = OpenWeather.FORECAST_PATH

    @classmethod
    def from_section(cls, section: Mapping[str, Any]) -> 'OpenWeatherApiConfig':
        defaults = cls()
        return cls(
            api_key=section.get(Config.API_KEY),
            base_url=section.get(Config.BASE_URL, defaults.base_url),
            history_base_url=section.get('historyBaseUrl', defaults.history_base_url),
            weather_path=section.get('weatherPath', defaults.weather_path),
            history_path=section.get('historyPath', defaults.history_path),
            forecast_path=section.get('forecastPath', defaults.forecast_path),
        )

    def require_api_key(self) -> str:
        if not self.api_key:
            raise MissingConfigurationException(Config.API_KEY, OpenWeather.PROVIDER_NAME)
        return self.api_key


@dataclass(frozen=True)
class OpenWeatherEndpoints:
    """URLs completas, resolvidas uma única vez na construção do provider"""
    weather: str
    history: str
    forecast: str

    @classmethod
    def from_config(cls, api_config: OpenWeatherApiConfig) -> 'OpenWeatherEndpoints':
        base_url = parse_base_url(
            f"{OpenWeather.PROVIDER_NAME}/baseUrl", api_config.base_url
        )
        history_base_url = parse_base_url(
            f"{OpenWeather.PROVIDER_NAME}/historyBaseUrl", api_config.history_base_url
        )
        return cls(
            weather=build_endpoint(base_url, api_config.weather_path),
            history=build_endpoint(history_base_url, api_config.history_path),
            forecast=build_endpoint(base_url, api_config.forecast_path),
        )
