"""
Endpoint helpers - Resolução de base URL + path a partir da configuração
"""
from yarl import URL

from domain.exceptions import InvalidConfigurationException


def parse_base_url(config_path: str, value: str) -> URL:
    """
    Valida uma base URL vinda da configuração

    Args:
        config_path: Caminho da chave na configuração (ex: "weather-api/baseUrl")
        value: Valor configurado

    Returns:
        URL absoluta

    Raises:
        InvalidConfigurationException: Se não for uma URL http(s) absoluta
    """
    try:
        url = URL(value)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationException(config_path, str(value), str(e)) from e

    if not url.scheme:
        raise InvalidConfigurationException(config_path, value, "relative URL without a base")
    if url.scheme not in ('http', 'https'):
        raise InvalidConfigurationException(config_path, value, f"unsupported scheme '{url.scheme}'")
    if not url.host:
        raise InvalidConfigurationException(config_path, value, "empty host")
    return url


def build_endpoint(base: URL, path: str) -> str:
    """Substitui o path da base URL pelo path do endpoint"""
    return str(base.with_path(path))


def endpoint_path(endpoint: str) -> str:
    """Path de um endpoint já resolvido (ex: "/v1/forecast.json")"""
    return URL(endpoint).path
