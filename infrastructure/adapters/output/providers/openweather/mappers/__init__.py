from infrastructure.adapters.output.providers.openweather.mappers.openweather_data_mapper import (
    OpenWeatherDataMapper
)

__all__ = ['OpenWeatherDataMapper']
