"""
Async Use Case: Get Weather
Resolve o provider ativo no registro e delega a consulta
"""
from datetime import date
from typing import Optional
from ddtrace import tracer

from domain.entities.weather import Weather
from domain.exceptions import ProviderNotSetException
from application.ports.input.get_weather_port import IGetWeatherUseCase
from infrastructure.adapters.output.providers.provider_manager import ProviderManager
from shared.config.logger_config import get_logger
from shared.config.settings import ConfigSnapshot, get_active_provider

logger = get_logger(child=True)


class GetWeatherUseCase(IGetWeatherUseCase):
    """Async use case: Get weather for an address using the active provider"""

    def __init__(self, provider_manager: ProviderManager, config: ConfigSnapshot):
        self.provider_manager = provider_manager
        self.config = config

    @tracer.wrap(resource="use_case.get_weather")
    async def execute(self, address: str, date: Optional[date] = None) -> Weather:
        """
        Execute use case asynchronously

        Args:
            address: Free-form address
            date: Requested calendar date (optional)

        Returns:
            Weather entity

        Raises:
            ProviderNotSetException: If no active provider is configured
            ProviderNotSupportedException: If the active provider is unknown
        """
        provider_name = get_active_provider(self.config)
        if provider_name is None:
            raise ProviderNotSetException()

        provider = self.provider_manager.get_provider(provider_name)

        logger.info(
            "Fetching weather",
            provider=provider_name,
            address=address,
            date=date.isoformat() if date else None
        )

        return await provider.get_weather(address, date)
