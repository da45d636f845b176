"""
Infrastructure Layer - Clean Architecture
Contém os adapters HTTP e os providers de clima
"""

from infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager
from infrastructure.adapters.output.providers import (
    OpenWeatherProvider,
    WeatherApiProvider,
    ProviderManager,
    build_provider_manager
)

__all__ = [
    'AiohttpSessionManager',
    'OpenWeatherProvider',
    'WeatherApiProvider',
    'ProviderManager',
    'build_provider_manager'
]
