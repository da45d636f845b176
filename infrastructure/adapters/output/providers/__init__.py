"""Infrastructure Providers - Implementações de provedores climáticos"""

from infrastructure.adapters.output.providers.openweather import OpenWeatherProvider
from infrastructure.adapters.output.providers.weatherapi import WeatherApiProvider
from infrastructure.adapters.output.providers.provider_manager import (
    LazyProvider,
    ProviderManager,
    build_provider_manager,
)

__all__ = [
    'OpenWeatherProvider',
    'WeatherApiProvider',
    'LazyProvider',
    'ProviderManager',
    'build_provider_manager',
]
