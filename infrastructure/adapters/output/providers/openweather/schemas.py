"""
OpenWeather Schemas - Partes consumidas das respostas da API
Apenas temperatura e texto da condição são lidos; campos ausentes levantam KeyError
"""
from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class OpenWeatherCondition:
    main: str

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> 'OpenWeatherCondition':
        return cls(main=str(payload['main']))

    @classmethod
    def from_list(cls, items: List[Dict[str, Any]]) -> List['OpenWeatherCondition']:
        return [cls.from_dict(item) for item in items]


@dataclass(frozen=True)
class OpenWeatherCurrentResponse:
    """GET /data/2.5/weather"""
    temp: float  # Kelvin
    weather: List[OpenWeatherCondition]

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> 'OpenWeatherCurrentResponse':
        return cls(
            temp=float(payload['main']['temp']),
            weather=OpenWeatherCondition.from_list(payload['weather']),
        )


@dataclass(frozen=True)
class OpenWeatherForecastDay:
    temp_day: float  # Kelvin
    weather: List[OpenWeatherCondition]


@dataclass(frozen=True)
class OpenWeatherForecastResponse:
    """GET /data/2.5/forecast/daily"""
    days: List[OpenWeatherForecastDay]

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> 'OpenWeatherForecastResponse':
        return cls(days=[
            OpenWeatherForecastDay(
                temp_day=float(item['temp']['day']),
                weather=OpenWeatherCondition.from_list(item['weather']),
            )
            for item in payload['list']
        ])


@dataclass(frozen=True)
class OpenWeatherHistoryEntry:
    temp: float  # Kelvin
    weather: List[OpenWeatherCondition]


@dataclass(frozen=True)
class OpenWeatherHistoryResponse:
    """GET /data/2.5/history/city"""
    entries: List[OpenWeatherHistoryEntry]

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> 'OpenWeatherHistoryResponse':
        return cls(entries=[
            OpenWeatherHistoryEntry(
                temp=float(item['main']['temp']),
                weather=OpenWeatherCondition.from_list(item['weather']),
            )
            for item in payload['list']
        ])


@dataclass(frozen=True)
class OpenWeatherErrorResponse:
    """Corpo de erro: {"cod": 401, "message": "..."} (cod pode vir como string)"""
    code: int
    message: str

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> 'OpenWeatherErrorResponse':
        return cls(code=int(payload['cod']), message=str(payload['message']))
