"""Testes Unitários - ProviderManager"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from domain.exceptions import MissingConfigurationException, ProviderNotSupportedException
from infrastructure.adapters.output.providers import (
    LazyProvider,
    OpenWeatherProvider,
    ProviderManager,
    WeatherApiProvider,
    build_provider_manager,
)
from shared.config.settings import freeze_config


@pytest.fixture
def provider():
    weather_provider = MagicMock(provider_name="weather-api")
    weather_provider.close = AsyncMock()
    return weather_provider


@pytest.fixture
def builder(provider):
    calls = {"count": 0}

    def _build():
        calls["count"] += 1
        return provider

    return _build, calls


def test_lazy_provider_requires_exactly_one_source(provider):
    with pytest.raises(ValueError):
        LazyProvider()

    with pytest.raises(ValueError):
        LazyProvider(builder=lambda: provider, instance=provider)


def test_builder_invoked_once(provider, builder):
    build, calls = builder
    manager = ProviderManager().add_provider_builder("weather-api", build)

    assert calls["count"] == 0

    first = manager.get_provider("weather-api")
    second = manager.get_provider("weather-api")

    assert first is provider
    assert second is first
    # lazy init: segunda chamada não instancia novamente
    assert calls["count"] == 1


def test_prebuilt_instance_returned_as_is(provider):
    manager = ProviderManager().add_provider("weather-api", provider)

    assert manager.get_provider("weather-api") is provider


def test_failed_build_is_not_cached(provider):
    attempts = {"count": 0}

    def flaky_build():
        attempts["count"] += 1
        if attempts["count"] == 1:
            raise MissingConfigurationException("apiKey", "weather-api")
        return provider

    manager = ProviderManager().add_provider_builder("weather-api", flaky_build)

    with pytest.raises(MissingConfigurationException):
        manager.get_provider("weather-api")

    assert manager.get_provider("weather-api") is provider
    assert attempts["count"] == 2


def test_unknown_provider(provider):
    manager = ProviderManager().add_provider("weather-api", provider)

    with pytest.raises(ProviderNotSupportedException) as exc_info:
        manager.get_provider("accu-weather")

    assert str(exc_info.value) == "Not supported provider accu-weather"
    assert exc_info.value.provider_name == "accu-weather"


def test_supported_names_without_building(provider, builder):
    build, calls = builder
    manager = (
        ProviderManager()
        .add_provider("open-weather", provider)
        .add_provider_builder("weather-api", build)
    )

    assert sorted(manager.list_providers()) == ["open-weather", "weather-api"]
    assert manager.is_supported("weather-api")
    assert not manager.is_supported("accu-weather")
    manager.ensure_supported("open-weather")
    with pytest.raises(ProviderNotSupportedException):
        manager.ensure_supported("accu-weather")
    assert calls["count"] == 0


@pytest.mark.asyncio
async def test_close_only_built_providers(provider, builder):
    build, calls = builder
    manager = ProviderManager().add_provider_builder("weather-api", build)

    await manager.close()
    assert calls["count"] == 0

    manager.get_provider("weather-api")
    await manager.close()
    provider.close.assert_awaited_once()


@pytest.mark.asyncio
async def test_close_continues_after_failure():
    failing = MagicMock(provider_name="open-weather")
    failing.close = AsyncMock(side_effect=RuntimeError("session already closed"))
    healthy = MagicMock(provider_name="weather-api")
    healthy.close = AsyncMock()
    manager = (
        ProviderManager()
        .add_provider("open-weather", failing)
        .add_provider("weather-api", healthy)
    )

    with pytest.raises(RuntimeError, match="session already closed"):
        await manager.close()

    healthy.close.assert_awaited_once()


class TestBuildProviderManager:
    """Registro padrão com os dois providers"""

    def test_registers_both_providers(self, provider_config):
        manager = build_provider_manager(provider_config)

        assert sorted(manager.list_providers()) == ["open-weather", "weather-api"]
        assert isinstance(manager.get_provider("open-weather"), OpenWeatherProvider)
        assert isinstance(manager.get_provider("weather-api"), WeatherApiProvider)

    def test_same_instance_on_repeated_calls(self, provider_config):
        manager = build_provider_manager(provider_config)

        assert manager.get_provider("weather-api") is manager.get_provider("weather-api")

    def test_missing_key_only_fails_when_requested(self):
        config = freeze_config({'weather-api': {'apiKey': 'some-api-key'}})
        manager = build_provider_manager(config)

        assert isinstance(manager.get_provider("weather-api"), WeatherApiProvider)
        with pytest.raises(MissingConfigurationException):
            manager.get_provider("open-weather")
        # falha não é memorizada
        with pytest.raises(MissingConfigurationException):
            manager.get_provider("open-weather")
