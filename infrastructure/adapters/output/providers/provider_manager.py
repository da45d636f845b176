"""
Provider Manager - Registro de providers por nome com construção lazy
"""
from typing import Callable, Dict, List, Optional

from application.ports.output.weather_provider_port import IWeatherProvider
from domain.constants import OpenWeather, WeatherApi
from domain.exceptions import ProviderNotSupportedException
from infrastructure.adapters.output.http.aiohttp_session_manager import AiohttpSessionManager
from infrastructure.adapters.output.providers.openweather import OpenWeatherProvider
from infrastructure.adapters.output.providers.weatherapi import WeatherApiProvider
from shared.config.logger_config import get_logger
from shared.config.settings import ConfigSnapshot, HTTP_RETRY_ATTEMPTS

logger = get_logger(child=True)

ProviderBuilder = Callable[[], IWeatherProvider]


class LazyProvider:
    """
    Célula de dois estados: não construído (builder) -> construído (instância)

    A transição acontece uma única vez, no primeiro acesso bem sucedido.
    Se o builder falhar, a célula continua não construída e um novo acesso
    tenta de novo.
    """

    def __init__(
        self,
        builder: Optional[ProviderBuilder] = None,
        instance: Optional[IWeatherProvider] = None
    ):
        if (builder is None) == (instance is None):
            raise ValueError("LazyProvider requires exactly one of builder or instance")
        self._builder = builder
        self._instance = instance

    @property
    def is_built(self) -> bool:
        return self._instance is not None

    def resolve(self) -> IWeatherProvider:
        if self._instance is None:
            self._instance = self._builder()
            self._builder = None
        return self._instance


class ProviderManager:
    """
    Registro de providers

    - add_provider: instância já construída
    - add_provider_builder: builder sem argumentos, chamado no primeiro get_provider
    - Não é thread-safe: espera um único chamador (ou serialização externa)
    """

    def __init__(self):
        self._entries: Dict[str, LazyProvider] = {}

    def add_provider(self, name: str, provider: IWeatherProvider) -> 'ProviderManager':
        self._entries[name] = LazyProvider(instance=provider)
        return self

    def add_provider_builder(self, name: str, builder: ProviderBuilder) -> 'ProviderManager':
        self._entries[name] = LazyProvider(builder=builder)
        return self

    def get_provider(self, name: str) -> IWeatherProvider:
        """
        Resolve um nome para um provider pronto para uso

        Args:
            name: Nome do provider (ex: 'weather-api')

        Returns:
            Instância do provider (sempre a mesma após a primeira construção)

        Raises:
            ProviderNotSupportedException: Se o nome não estiver registrado
            ProviderConfigurationException: Se a construção falhar (não é cacheado)
        """
        entry = self._entries.get(name)
        if entry is None:
            raise ProviderNotSupportedException(name)

        if not entry.is_built:
            logger.info("Building provider on first use", provider=name)
        return entry.resolve()

    def is_supported(self, name: str) -> bool:
        """Verifica se o nome está registrado, sem construir o provider"""
        return name in self._entries

    def ensure_supported(self, name: str) -> None:
        """
        Raises:
            ProviderNotSupportedException: Se o nome não estiver registrado
        """
        if not self.is_supported(name):
            raise ProviderNotSupportedException(name)

    def list_providers(self) -> List[str]:
        """Todos os nomes registrados (ordem não significativa)"""
        return list(self._entries)

    async def close(self) -> None:
        """
        Fecha as sessões HTTP dos providers já construídos

        Todos são fechados mesmo que algum falhe; a primeira falha é relançada no final.
        """
        errors: List[Exception] = []
        for name, entry in self._entries.items():
            if not entry.is_built:
                continue
            close = getattr(entry.resolve(), 'close', None)
            if close is None:
                continue
            try:
                await close()
            except Exception as e:
                logger.warning("Failed to close provider", provider=name, error=str(e))
                errors.append(e)

        if errors:
            raise errors[0]


def build_provider_manager(config: ConfigSnapshot) -> ProviderManager:
    """
    Registra os providers suportados, todos lazy

    Cada builder recebe o snapshot imutável da configuração; a chave de API
    só é exigida quando o provider é de fato pedido.
    """
    def build_open_weather() -> IWeatherProvider:
        return OpenWeatherProvider.from_config(
            config, AiohttpSessionManager(retry_attempts=HTTP_RETRY_ATTEMPTS)
        )

    def build_weather_api() -> IWeatherProvider:
        return WeatherApiProvider.from_config(
            config, AiohttpSessionManager(retry_attempts=HTTP_RETRY_ATTEMPTS)
        )

    return (
        ProviderManager()
        .add_provider_builder(OpenWeather.PROVIDER_NAME, build_open_weather)
        .add_provider_builder(WeatherApi.PROVIDER_NAME, build_weather_api)
    )
