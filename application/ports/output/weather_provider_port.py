"""Weather Provider Port - Interface genérica para provedores climáticos"""
from abc import ABC, abstractmethod
from datetime import date
from typing import Optional

from domain.entities.weather import Weather


class IWeatherProvider(ABC):
    """
    Interface genérica para provedores de dados meteorológicos.
    Quem chama depende apenas desta interface, nunca do provider concreto.
    """

    @abstractmethod
    async def get_weather(self, address: str, date: Optional[date] = None) -> Weather:
        """
        Busca o clima de um endereço

        Args:
            address: Endereço em texto livre (ex: "London")
            date: Data pedida. None sempre significa "clima atual"; uma data
                passa pela política de roteamento de datas do provider

        Returns:
            Weather entity (CURRENT, FORECAST ou HISTORY)

        Raises:
            ProviderException: Se o provider falhar ou a data não for suportada
            TemperatureException: Se o provider retornar temperatura impossível
        """
        pass

    @property
    @abstractmethod
    def provider_name(self) -> str:
        """Nome do provider (ex: 'open-weather')"""
        pass
