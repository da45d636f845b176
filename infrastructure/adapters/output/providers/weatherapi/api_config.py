"""
WeatherAPI Config - Chave + endpoints resolvidos a partir da configuração
"""
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from domain.constants import Config, WeatherApi
from domain.exceptions import MissingConfigurationException
from infrastructure.adapters.output.http.endpoints import build_endpoint, parse_base_url


@dataclass(frozen=True)
class WeatherApiConfig:
    """Seção 'weather-api' da configuração, com defaults"""
    api_key: Optional[str] = None
    base_url: str = WeatherApi.BASE_URL
    current_path: str = WeatherApi.CURRENT_PATH
    history_path: str = WeatherApi.HISTORY_PATH
    forecast_path: str = WeatherApi.FORECAST_PATH
    future_path: str = WeatherApi.FUTURE_PATH

    @classmethod
    def from_section(cls, section: Mapping[str, Any]) -> 'WeatherApiConfig':
        defaults = cls()
        return cls(
            api_key=section.get(Config.API_KEY),
            base_url=section.get(Config.BASE_URL, defaults.base_url),
            current_path=section.get('currentPath', defaults.current_path),
            history_path=section.get('historyPath', defaults.history_path),
            forecast_path=section.get('forecastPath', defaults.forecast_path),
            future_path=section.get('futurePath', defaults.future_path),
        )

    def require_api_key(self) -> str:
        if not self.api_key:
            raise MissingConfigurationException(Config.API_KEY, WeatherApi.PROVIDER_NAME)
        return self.api_key


@dataclass(frozen=True)
class WeatherApiEndpoints:
    """URLs completas, resolvidas uma única vez na construção do provider"""
    current: str
    history: str
    forecast: str
    future: str

    @classmethod
    def from_config(cls, api_config: WeatherApiConfig) -> 'WeatherApiEndpoints':
        base_url = parse_base_url(f"{WeatherApi.PROVIDER_NAME}/baseUrl", api_config.base_url)
        return cls(
            current=build_endpoint(base_url, api_config.current_path),
            history=build_endpoint(base_url, api_config.history_path),
            forecast=build_endpoint(base_url, api_config.forecast_path),
            future=build_endpoint(base_url, api_config.future_path),
        )
