"""
Date Routing Helper - Decide qual endpoint de um provider atende uma data
Função pura de (hoje, data pedida); hoje é recalculado a cada requisição
"""
from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional

from domain.constants import OpenWeather, WeatherApi
from domain.exceptions import UnsupportedDateException


class WeatherRoute(Enum):
    """Categorias de endpoint"""
    CURRENT = "current"
    FORECAST = "forecast"
    FUTURE = "future"
    HISTORY = "history"


@dataclass(frozen=True)
class DateRoutingPolicy:
    """
    Janelas de dias (relativas a hoje) de um provider

    Regras, avaliadas nesta ordem:
    - offset == 0 -> CURRENT
    - min_forecast_days <= offset <= max_forecast_days -> FORECAST
    - min_future_days <= offset <= max_future_days -> FUTURE (se configurado)
    - history_min_date < data < hoje -> HISTORY (limite inferior exclusivo)
    - caso contrário -> UnsupportedDateException
    """
    provider_name: str
    min_forecast_days: int
    max_forecast_days: int
    history_min_date: date
    min_future_days: Optional[int] = None
    max_future_days: Optional[int] = None

    def route(self, today: date, requested: date) -> WeatherRoute:
        offset = day_offset(today, requested)

        if offset == 0:
            return WeatherRoute.CURRENT
        if self.min_forecast_days <= offset <= self.max_forecast_days:
            return WeatherRoute.FORECAST
        if (
            self.min_future_days is not None
            and self.max_future_days is not None
            and self.min_future_days <= offset <= self.max_future_days
        ):
            return WeatherRoute.FUTURE
        # Limite inferior exclusivo: a própria data epoch não é histórico
        if self.history_min_date < requested < today:
            return WeatherRoute.HISTORY

        raise UnsupportedDateException(requested, self.provider_name)


OPEN_WEATHER_ROUTING = DateRoutingPolicy(
    provider_name=OpenWeather.PROVIDER_NAME,
    min_forecast_days=OpenWeather.MIN_FORECAST_DAYS,
    max_forecast_days=OpenWeather.MAX_FORECAST_DAYS,
    history_min_date=OpenWeather.HISTORY_MIN_DATE,
)

WEATHER_API_ROUTING = DateRoutingPolicy(
    provider_name=WeatherApi.PROVIDER_NAME,
    min_forecast_days=WeatherApi.MIN_FORECAST_DAYS,
    max_forecast_days=WeatherApi.MAX_FORECAST_DAYS,
    history_min_date=WeatherApi.HISTORY_MIN_DATE,
    min_future_days=WeatherApi.MIN_FUTURE_DAYS,
    max_future_days=WeatherApi.MAX_FUTURE_DAYS,
)


def utc_today() -> date:
    """Data de hoje em UTC"""
    return datetime.now(tz=timezone.utc).date()


def day_offset(today: date, requested: date) -> int:
    """Diferença em dias corridos entre a data pedida e hoje"""
    return (requested - today).days
