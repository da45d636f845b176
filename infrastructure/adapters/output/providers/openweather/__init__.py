"""OpenWeather Provider Package"""

from infrastructure.adapters.output.providers.openweather.openweather_provider import (
    OpenWeatherProvider
)

__all__ = ['OpenWeatherProvider']
