"""Application Use Cases"""
from .get_weather_use_case import GetWeatherUseCase
from .get_providers_info_use_case import GetProvidersInfoUseCase

__all__ = [
    'GetWeatherUseCase',
    'GetProvidersInfoUseCase'
]
