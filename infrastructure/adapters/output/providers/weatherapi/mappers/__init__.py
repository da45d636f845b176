from infrastructure.adapters.output.providers.weatherapi.mappers.weatherapi_data_mapper import (
    WeatherApiDataMapper
)

__all__ = ['WeatherApiDataMapper']
