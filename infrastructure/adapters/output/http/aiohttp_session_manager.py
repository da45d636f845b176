"""
Aiohttp Session Manager - Sessão HTTP reutilizável por provider
Cada provider cria o seu gerenciador uma vez e reusa a sessão entre chamadas
"""
import asyncio
import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import aiohttp
from tenacity import (
    retry,
    stop_after_attempt,
    wait_exponential,
    retry_if_exception_type,
    retry_if_result,
    before_sleep_log
)

from domain.constants import API
from domain.exceptions import ProviderTransportException
from shared.config.logger_config import get_logger

logger = get_logger(child=True)


@dataclass(frozen=True)
class HttpResponse:
    """Status + corpo bruto (bytes, sem decodificar) de uma resposta HTTP"""
    status: int
    body: bytes
    url: str

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300


class AiohttpSessionManager:
    """
    Gerenciador de sessão aiohttp

    Benefícios:
    - Reutiliza sessão entre chamadas do mesmo provider
    - Detecta mudanças de event loop (asyncio.run cria novos loops)
    - Recria sessão automaticamente quando necessário
    - Converte falhas de transporte em ProviderTransportException

    Uso:
        manager = AiohttpSessionManager()
        response = await manager.fetch(url, params={'q': 'London'})
    """

    def __init__(
        self,
        total_timeout: int = API.HTTP_TIMEOUT_TOTAL,
        connect_timeout: int = API.HTTP_TIMEOUT_CONNECT,
        sock_read_timeout: int = API.HTTP_TIMEOUT_READ,
        limit: int = API.HTTP_CONNECTION_LIMIT,
        limit_per_host: int = API.HTTP_CONNECTION_LIMIT_PER_HOST,
        ttl_dns_cache: int = API.DNS_CACHE_TTL,
        retry_attempts: int = 1
    ):
        """
        Inicializa gerenciador de sessão aiohttp

        Args:
            total_timeout: Timeout total em segundos
            connect_timeout: Timeout de conexão em segundos
            sock_read_timeout: Timeout de leitura em segundos
            limit: Limite total de conexões no pool
            limit_per_host: Limite de conexões por host
            ttl_dns_cache: TTL do cache DNS em segundos
            retry_attempts: Tentativas por requisição (1 = sem retry)
        """
        self.total_timeout = total_timeout
        self.connect_timeout = connect_timeout
        self.sock_read_timeout = sock_read_timeout
        self.limit = limit
        self.limit_per_host = limit_per_host
        self.ttl_dns_cache = ttl_dns_cache
        self.retry_attempts = max(1, retry_attempts)

        # Session state
        self._session: Optional[aiohttp.ClientSession] = None
        self._session_loop_id: Optional[int] = None

    async def get_session(self) -> aiohttp.ClientSession:
        """
        Retorna sessão aiohttp (cria ou reutiliza)

        - Sessão persiste DENTRO do mesmo event loop
        - Recria quando event loop muda (asyncio.run fecha o loop anterior)

        Returns:
            Sessão aiohttp
        """
        current_loop_id = id(asyncio.get_running_loop())

        if (self._session is not None and
                not self._session.closed and
                self._session_loop_id == current_loop_id):
            return self._session

        if self._session is not None and not self._session.closed:
            logger.info(
                "Event loop changed - recreating session",
                old_loop_id=self._session_loop_id,
                new_loop_id=current_loop_id
            )
            await self.close()

        timeout = aiohttp.ClientTimeout(
            total=self.total_timeout,
            connect=self.connect_timeout,
            sock_read=self.sock_read_timeout
        )
        connector = aiohttp.TCPConnector(
            limit=self.limit,
            limit_per_host=self.limit_per_host,
            ttl_dns_cache=self.ttl_dns_cache
        )
        self._session = aiohttp.ClientSession(timeout=timeout, connector=connector)
        self._session_loop_id = current_loop_id

        logger.debug("Aiohttp session created", loop_id=current_loop_id, limit=self.limit)
        return self._session

    async def fetch(self, url: str, params: Dict[str, Any]) -> HttpResponse:
        """
        Executa um GET com query params e devolve status + corpo

        Args:
            url: Endpoint completo
            params: Query params

        Returns:
            HttpResponse com o corpo ainda não decodificado

        Raises:
            ProviderTransportException: Se a troca HTTP não completar
        """
        session = await self.get_session()

        async def send() -> HttpResponse:
            async with session.get(url, params=params) as response:
                body = await response.read()
                return HttpResponse(status=response.status, body=body, url=str(response.url))

        if self.retry_attempts > 1:
            # Retry apenas em rate limit (429), service unavailable (503) e falhas de rede
            send = retry(
                retry=(
                    retry_if_exception_type((aiohttp.ClientError, asyncio.TimeoutError))
                    | retry_if_result(lambda r: r.status in API.RETRYABLE_STATUS)
                ),
                stop=stop_after_attempt(self.retry_attempts),
                wait=wait_exponential(multiplier=1, min=API.RETRY_WAIT_MIN, max=API.RETRY_WAIT_MAX),
                before_sleep=before_sleep_log(logger, logging.WARNING),
                retry_error_callback=lambda state: state.outcome.result(),
            )(send)

        try:
            return await send()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.warning("HTTP request failed", url=url, error=str(e))
            raise ProviderTransportException(
                "Http client request error",
                details={"url": url, "error": str(e)}
            ) from e

    async def close(self) -> None:
        """Fecha sessão aiohttp existente (cleanup)"""
        if self._session is not None and not self._session.closed:
            try:
                await self._session.close()
            finally:
                self._session = None
                self._session_loop_id = None
