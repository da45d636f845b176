"""
Weather Entity - Resultado uniforme de uma consulta a qualquer provider
"""
from dataclasses import dataclass
from datetime import date, datetime, timezone
from enum import Enum
from typing import Optional

from domain.value_objects.temperature import Temperature, UnitSystem


class WeatherKind(Enum):
    """Tipo de dado retornado pelo provider"""
    HISTORY = "history"
    CURRENT = "current"
    FORECAST = "forecast"


@dataclass(frozen=True)
class Weather:
    """Entidade Dados Meteorológicos"""
    kind: WeatherKind
    temp: Temperature
    condition: str  # Texto da condição como o provider reportou (ex: "Rain")

    @classmethod
    def history(cls, temp: Temperature, condition: str) -> 'Weather':
        return cls(kind=WeatherKind.HISTORY, temp=temp, condition=condition)

    @classmethod
    def current(cls, temp: Temperature, condition: str) -> 'Weather':
        return cls(kind=WeatherKind.CURRENT, temp=temp, condition=condition)

    @classmethod
    def forecast(cls, temp: Temperature, condition: str) -> 'Weather':
        return cls(kind=WeatherKind.FORECAST, temp=temp, condition=condition)

    def describe(
        self,
        address: str,
        requested_date: Optional[date] = None,
        unit_system: UnitSystem = UnitSystem.METRIC
    ) -> str:
        """
        Resumo em uma frase, dependente do tipo de dado

        Args:
            address: Endereço consultado
            requested_date: Data pedida (None = hoje em UTC)
            unit_system: Sistema de unidades da temperatura

        Returns:
            Frase descritiva
        """
        temp = self.temp.to_display(unit_system)
        day = requested_date or datetime.now(tz=timezone.utc).date()

        if self.kind == WeatherKind.HISTORY:
            return (
                f"On {day.isoformat()}, the weather in {address} was "
                f"{self.condition} with temperature of {temp}."
            )
        if self.kind == WeatherKind.FORECAST:
            return (
                f"The forecast for {address} for {day.isoformat()} is "
                f"{self.condition} with a predicted high temperature of {temp}."
            )
        return (
            f"Today in {address}, the current weather conditions are "
            f"{self.condition} with a temperature of {temp}."
        )
