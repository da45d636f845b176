"""
Testes Unitários - GetProvidersInfoUseCase
"""
from unittest.mock import MagicMock

import pytest

from application.use_cases import GetProvidersInfoUseCase
from infrastructure.adapters.output.providers import ProviderManager
from shared.config.settings import freeze_config


@pytest.fixture
def manager():
    return (
        ProviderManager()
        .add_provider_builder("weather-api", MagicMock())
        .add_provider_builder("open-weather", MagicMock())
    )


def test_masks_api_key_and_keeps_other_settings(manager):
    config = freeze_config({
        'provider': 'weather-api',
        'weather-api': {'apiKey': 'abcdefghij', 'baseUrl': 'http://api.weatherapi.com'},
    })

    info = GetProvidersInfoUseCase(manager, config).execute()

    assert info.active_provider == 'weather-api'
    weather_api = info.get('weather-api')
    assert weather_api.is_configured
    assert weather_api.settings == {'apiKey': '******ghij', 'baseUrl': 'http://api.weatherapi.com'}
    # snapshot original intacto
    assert config['weather-api']['apiKey'] == 'abcdefghij'


def test_unconfigured_provider_has_no_settings(manager):
    info = GetProvidersInfoUseCase(manager, freeze_config({})).execute()

    assert info.active_provider is None
    assert [p.name for p in info.providers] == ['open-weather', 'weather-api']
    assert all(not p.is_configured for p in info.providers)


def test_to_dict(manager):
    config = freeze_config({'provider': 'open-weather', 'open-weather': {'apiKey': 'abc'}})

    info = GetProvidersInfoUseCase(manager, config).execute()

    assert info.to_dict() == {
        'activeProvider': 'open-weather',
        'providers': [
            {'name': 'open-weather', 'settings': {'apiKey': '*bc'}},
            {'name': 'weather-api', 'settings': None},
        ],
    }


def test_does_not_build_providers(manager):
    GetProvidersInfoUseCase(manager, freeze_config({})).execute()

    for name in manager.list_providers():
        assert not manager._entries[name].is_built
