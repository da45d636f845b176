"""
Configurações e fixtures compartilhadas para testes unitários
"""
import json
from datetime import timedelta
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from domain.constants import OpenWeather, WeatherApi
from infrastructure.adapters.helpers.date_routing_helper import utc_today
from infrastructure.adapters.output.http.aiohttp_session_manager import HttpResponse
from shared.config.settings import freeze_config

FIXTURES_PATH = Path(__file__).parent.parent / 'fixtures'

API_KEY = 'some-api-key'


def _load(filename: str) -> dict:
    with open(FIXTURES_PATH / filename, 'r', encoding='utf-8') as f:
        return json.load(f)


@pytest.fixture(scope='session')
def openweather_samples():
    """Respostas reais (resumidas) de api.openweathermap.org"""
    return _load('openweather_sample_responses.json')


@pytest.fixture(scope='session')
def weatherapi_samples():
    """Respostas reais (resumidas) de api.weatherapi.com"""
    return _load('weatherapi_sample_responses.json')


@pytest.fixture
def make_response():
    """
    Factory fixture para criar HttpResponse

    Usage:
        response = make_response({'cod': 200}, status=200)
        response = make_response(body=b'<html>', status=502)
    """
    def _make(payload=None, status: int = 200, body=None, url: str = 'http://test.local/api'):
        if body is None:
            body = json.dumps(payload)
        if isinstance(body, str):
            body = body.encode('utf-8')
        return HttpResponse(status=status, body=body, url=url)

    return _make


@pytest.fixture
def session_manager():
    """Session manager falso: fetch é um AsyncMock configurável por teste"""
    manager = MagicMock()
    manager.fetch = AsyncMock()
    manager.close = AsyncMock()
    return manager


@pytest.fixture
def provider_config():
    """Snapshot com os dois providers configurados"""
    return freeze_config({
        'provider': WeatherApi.PROVIDER_NAME,
        OpenWeather.PROVIDER_NAME: {'apiKey': API_KEY},
        WeatherApi.PROVIDER_NAME: {'apiKey': API_KEY},
    })


@pytest.fixture
def days_from_today():
    """Datas relativas ao dia atual em UTC"""
    def _days(days: int):
        return utc_today() + timedelta(days=days)

    return _days
