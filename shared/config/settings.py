"""
Configurações centralizadas da aplicação
Snapshot imutável: seções por provider (camelCase) + provider ativo
"""
import os
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional

from domain.constants import Config, OpenWeather, WeatherApi

ConfigSnapshot = Mapping[str, Any]

# Variáveis de ambiente -> (seção, chave)
ENV_OVERRIDES = {
    'OPENWEATHER_API_KEY': (OpenWeather.PROVIDER_NAME, Config.API_KEY),
    'OPENWEATHER_BASE_URL': (OpenWeather.PROVIDER_NAME, Config.BASE_URL),
    'OPENWEATHER_HISTORY_BASE_URL': (OpenWeather.PROVIDER_NAME, 'historyBaseUrl'),
    'WEATHERAPI_API_KEY': (WeatherApi.PROVIDER_NAME, Config.API_KEY),
    'WEATHERAPI_BASE_URL': (WeatherApi.PROVIDER_NAME, Config.BASE_URL),
}

# Tentativas de transporte por requisição (1 = sem retry)
HTTP_RETRY_ATTEMPTS = int(os.environ.get('HTTP_RETRY_ATTEMPTS', '1'))


def freeze_config(raw: Mapping[str, Any]) -> ConfigSnapshot:
    """
    Congela um dicionário de configuração (inclusive as seções aninhadas)

    Args:
        raw: Configuração já carregada pelo colaborador externo

    Returns:
        Snapshot somente-leitura
    """
    frozen: Dict[str, Any] = {}
    for key, value in raw.items():
        if isinstance(value, Mapping):
            frozen[key] = MappingProxyType(dict(value))
        else:
            frozen[key] = value
    return MappingProxyType(frozen)


def load_config_from_env(environ: Optional[Mapping[str, str]] = None) -> ConfigSnapshot:
    """
    Monta o snapshot a partir de variáveis de ambiente

    WEATHER_PROVIDER define o provider ativo; as demais preenchem as seções.
    """
    environ = os.environ if environ is None else environ
    raw: Dict[str, Any] = {}

    provider = environ.get('WEATHER_PROVIDER')
    if provider:
        raw[Config.ACTIVE_PROVIDER] = provider

    for env_name, (section, key) in ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value:
            raw.setdefault(section, {})[key] = value

    return freeze_config(raw)


def get_provider_section(config: ConfigSnapshot, provider_name: str) -> Mapping[str, Any]:
    """Retorna a seção de um provider (vazia se ausente)"""
    section = config.get(provider_name)
    if isinstance(section, Mapping):
        return section
    return MappingProxyType({})


def get_active_provider(config: ConfigSnapshot) -> Optional[str]:
    """Nome do provider ativo, se configurado"""
    provider = config.get(Config.ACTIVE_PROVIDER)
    return provider if isinstance(provider, str) and provider else None
