"""
Testes para o roteamento de datas por provider
"""
from datetime import date, timedelta

import pytest

from domain.exceptions import UnsupportedDateException
from infrastructure.adapters.helpers.date_routing_helper import (
    OPEN_WEATHER_ROUTING,
    WEATHER_API_ROUTING,
    WeatherRoute,
    day_offset,
)

TODAY = date(2024, 3, 10)


def plus_days(days: int) -> date:
    return TODAY + timedelta(days=days)


class TestOpenWeatherRouting:
    """Janelas: hoje, 1..16 dias, histórico após 1979-01-01"""

    @pytest.mark.parametrize("requested,expected", [
        (TODAY, WeatherRoute.CURRENT),
        (plus_days(1), WeatherRoute.FORECAST),
        (plus_days(16), WeatherRoute.FORECAST),
        (plus_days(-1), WeatherRoute.HISTORY),
        (date(1979, 1, 2), WeatherRoute.HISTORY),
    ])
    def test_supported_dates(self, requested, expected):
        assert OPEN_WEATHER_ROUTING.route(TODAY, requested) == expected

    @pytest.mark.parametrize("requested", [
        plus_days(17),
        plus_days(365),
        date(1979, 1, 1),
        date(1978, 12, 31),
        date(1970, 1, 1),
    ])
    def test_unsupported_dates(self, requested):
        with pytest.raises(UnsupportedDateException) as exc_info:
            OPEN_WEATHER_ROUTING.route(TODAY, requested)

        assert exc_info.value.date == requested
        assert str(exc_info.value) == f"Unsupported date: {requested.isoformat()}"

    def test_no_future_window(self):
        """OpenWeather não tem endpoint future"""
        with pytest.raises(UnsupportedDateException):
            OPEN_WEATHER_ROUTING.route(TODAY, plus_days(30))


class TestWeatherApiRouting:
    """Janelas: hoje, 1..14 forecast, 15..300 future, histórico após 2010-01-01"""

    @pytest.mark.parametrize("requested,expected", [
        (TODAY, WeatherRoute.CURRENT),
        (plus_days(1), WeatherRoute.FORECAST),
        (plus_days(14), WeatherRoute.FORECAST),
        (plus_days(15), WeatherRoute.FUTURE),
        (plus_days(300), WeatherRoute.FUTURE),
        (plus_days(-1), WeatherRoute.HISTORY),
        (date(2010, 1, 2), WeatherRoute.HISTORY),
    ])
    def test_supported_dates(self, requested, expected):
        assert WEATHER_API_ROUTING.route(TODAY, requested) == expected

    @pytest.mark.parametrize("requested", [
        plus_days(301),
        plus_days(1095),
        date(2010, 1, 1),
        date(2009, 12, 31),
        date(1970, 1, 1),
    ])
    def test_unsupported_dates(self, requested):
        with pytest.raises(UnsupportedDateException):
            WEATHER_API_ROUTING.route(TODAY, requested)

    def test_every_day_maps_to_one_route(self):
        """Cada offset suportado cai em exatamente uma janela"""
        routes = [WEATHER_API_ROUTING.route(TODAY, plus_days(d)) for d in range(0, 301)]

        assert routes.count(WeatherRoute.CURRENT) == 1
        assert routes.count(WeatherRoute.FORECAST) == 14
        assert routes.count(WeatherRoute.FUTURE) == 286


def test_day_offset():
    assert day_offset(TODAY, TODAY) == 0
    assert day_offset(TODAY, plus_days(10)) == 10
    assert day_offset(TODAY, date(2024, 3, 9)) == -1
    # 2024 é bissexto
    assert day_offset(date(2024, 2, 28), date(2024, 3, 1)) == 2
