"""
Input Port: Interface para buscar o clima de um endereço
"""
from abc import ABC, abstractmethod
from datetime import date
from typing import Optional
from domain.entities.weather import Weather


class IGetWeatherUseCase(ABC):
    """Interface para caso de uso de buscar o clima no provider ativo"""

    @abstractmethod
    async def execute(self, address: str, date: Optional[date] = None) -> Weather:
        """
        Busca o clima de um endereço

        Args:
            address: Endereço livre (ex: "London,UK")
            date: Data desejada (opcional, None = agora)

        Returns:
            Weather: Temperatura + condição, marcado como history/current/forecast

        Raises:
            ProviderNotSetException: Se nenhum provider ativo estiver configurado
            ProviderNotSupportedException: Se o provider ativo não for conhecido
            UnsupportedDateException: Se a data estiver fora das janelas do provider
        """
        pass
