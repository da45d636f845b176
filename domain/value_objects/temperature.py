"""
Value Object para temperatura
Encapsula a escala de origem, validação física e formatação por sistema de unidades
"""
import math
from dataclasses import dataclass
from enum import Enum

from domain.exceptions import (
    CelsiusTemperatureException,
    FahrenheitTemperatureException,
    KelvinTemperatureException,
)

KELVIN_ZERO_CELSIUS = 273.15
KELVIN_ZERO_FAHRENHEIT = 459.67


class TemperatureScale(Enum):
    """Escalas de temperatura suportadas"""
    KELVIN = "K"
    CELSIUS = "C"
    FAHRENHEIT = "F"


class UnitSystem(Enum):
    """Sistemas de unidades para exibição"""
    IMPERIAL = "°F"
    METRIC = "°C"
    SI = "°K"


@dataclass(frozen=True)
class Temperature:
    """
    Value Object para temperatura

    Características:
    - Imutável (frozen=True)
    - Guarda o valor na escala em que o provider reportou
    - Validação contra o zero absoluto da própria escala
    - Conversão apenas na exibição (to_display)
    """
    value: float
    scale: TemperatureScale

    def __post_init__(self):
        """Valida temperatura no momento da criação (NaN nunca é válido)"""
        invalid = math.isnan(self.value)
        if self.scale == TemperatureScale.KELVIN and (invalid or self.value < 0.0):
            raise KelvinTemperatureException(self.value)
        if self.scale == TemperatureScale.CELSIUS and (invalid or self.value < -KELVIN_ZERO_CELSIUS):
            raise CelsiusTemperatureException(self.value)
        if self.scale == TemperatureScale.FAHRENHEIT and (invalid or self.value < -KELVIN_ZERO_FAHRENHEIT):
            raise FahrenheitTemperatureException(self.value)

    @classmethod
    def from_kelvin(cls, kelvin: float) -> 'Temperature':
        """
        Factory method para criar a partir de Kelvin

        Raises:
            KelvinTemperatureException: Se kelvin < 0
        """
        return cls(value=float(kelvin), scale=TemperatureScale.KELVIN)

    @classmethod
    def from_celsius(cls, celsius: float) -> 'Temperature':
        """
        Factory method para criar a partir de Celsius

        Raises:
            CelsiusTemperatureException: Se celsius < -273.15
        """
        return cls(value=float(celsius), scale=TemperatureScale.CELSIUS)

    @classmethod
    def from_fahrenheit(cls, fahrenheit: float) -> 'Temperature':
        """
        Factory method para criar a partir de Fahrenheit

        Raises:
            FahrenheitTemperatureException: Se fahrenheit < -459.67
        """
        return cls(value=float(fahrenheit), scale=TemperatureScale.FAHRENHEIT)

    @property
    def celsius(self) -> float:
        if self.scale == TemperatureScale.KELVIN:
            return self.value - KELVIN_ZERO_CELSIUS
        if self.scale == TemperatureScale.FAHRENHEIT:
            return (self.value - 32.0) * 5.0 / 9.0
        return self.value

    @property
    def fahrenheit(self) -> float:
        if self.scale == TemperatureScale.KELVIN:
            return (self.value - KELVIN_ZERO_CELSIUS) * 9.0 / 5.0 + 32.0
        if self.scale == TemperatureScale.CELSIUS:
            return self.value * 1.8 + 32.0
        return self.value

    @property
    def kelvin(self) -> float:
        if self.scale == TemperatureScale.CELSIUS:
            return self.value + KELVIN_ZERO_CELSIUS
        if self.scale == TemperatureScale.FAHRENHEIT:
            return (self.value + KELVIN_ZERO_FAHRENHEIT) * 5.0 / 9.0
        return self.value

    def to_display(self, unit_system: UnitSystem = UnitSystem.METRIC) -> str:
        """
        Formata temperatura no sistema de unidades pedido, com uma casa decimal

        Args:
            unit_system: IMPERIAL (°F), METRIC (°C) ou SI (°K)

        Returns:
            String formatada (ex: "8.0°C")
        """
        if unit_system == UnitSystem.IMPERIAL:
            return f"{self.fahrenheit:.1f}{unit_system.value}"
        if unit_system == UnitSystem.SI:
            return f"{self.kelvin:.1f}{unit_system.value}"
        return f"{self.celsius:.1f}{UnitSystem.METRIC.value}"

    def __str__(self) -> str:
        """String representation padrão em Celsius"""
        return self.to_display(UnitSystem.METRIC)
