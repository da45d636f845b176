"""
Helper utilities for provider routing
"""

from infrastructure.adapters.helpers.date_routing_helper import (
    DateRoutingPolicy,
    WeatherRoute,
    OPEN_WEATHER_ROUTING,
    WEATHER_API_ROUTING,
    day_offset,
    utc_today,
)

__all__ = [
    'DateRoutingPolicy',
    'WeatherRoute',
    'OPEN_WEATHER_ROUTING',
    'WEATHER_API_ROUTING',
    'day_offset',
    'utc_today'
]
