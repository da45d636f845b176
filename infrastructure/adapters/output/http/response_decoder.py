"""
Response Decoder - Classifica uma resposta HTTP em payload de sucesso ou erro da API
Independente do endpoint: o mesmo decoder serve todas as chamadas de um provider
"""
import json
from typing import Any, Callable, Protocol, TypeVar

from domain.exceptions import ProviderApiException, ResponseDecodeException
from infrastructure.adapters.output.http.aiohttp_session_manager import HttpResponse
from shared.config.logger_config import get_logger

logger = get_logger(child=True)

T = TypeVar('T')


class ApiErrorPayload(Protocol):
    """Schema de erro de um provider: mensagem + código numérico"""
    message: str
    code: int


def _load_json(response: HttpResponse) -> Any:
    try:
        return json.loads(response.body)
    except ValueError as e:  # inclui UnicodeDecodeError
        raise ResponseDecodeException(response.url, f"invalid JSON body ({e})") from e


def decode_response(
    response: HttpResponse,
    parse_success: Callable[[Any], T],
    parse_error: Callable[[Any], ApiErrorPayload],
) -> T:
    """
    Decodifica resposta conforme o status

    Args:
        response: Resposta HTTP bruta
        parse_success: Constrói o schema de sucesso a partir do JSON
        parse_error: Constrói o schema de erro a partir do JSON

    Returns:
        Payload de sucesso já tipado

    Raises:
        ProviderApiException: Status não-2xx com corpo de erro estruturado
        ResponseDecodeException: Corpo não corresponde ao schema esperado
    """
    payload = _load_json(response)
    parser = parse_success if response.is_success else parse_error

    try:
        decoded = parser(payload)
    except (KeyError, TypeError, ValueError, IndexError) as e:
        logger.warning(
            "Unexpected response schema",
            url=response.url,
            status=response.status,
            error=repr(e)
        )
        raise ResponseDecodeException(response.url, f"unexpected schema ({e!r})") from e

    if response.is_success:
        return decoded

    logger.warning(
        "Provider returned API error",
        url=response.url,
        status=response.status,
        code=decoded.code,
        api_message=decoded.message
    )
    raise ProviderApiException(decoded.message, decoded.code)
