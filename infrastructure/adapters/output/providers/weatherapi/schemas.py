"""
WeatherAPI Schemas - Partes consumidas das respostas de weatherapi.com
"""
from dataclasses import dataclass
from typing import Any, Dict, List


@dataclass(frozen=True)
class WeatherApiCondition:
    text: str

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> 'WeatherApiCondition':
        return cls(text=str(payload['text']))


@dataclass(frozen=True)
class WeatherApiCurrentResponse:
    """GET /v1/current.json"""
    temp_c: float
    condition: WeatherApiCondition

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> 'WeatherApiCurrentResponse':
        current = payload['current']
        return cls(
            temp_c=float(current['temp_c']),
            condition=WeatherApiCondition.from_dict(current['condition']),
        )


@dataclass(frozen=True)
class WeatherApiForecastDay:
    avgtemp_c: float
    condition: WeatherApiCondition


@dataclass(frozen=True)
class WeatherApiForecastResponse:
    """
    Formato comum de /v1/forecast.json, /v1/history.json e /v1/future.json
    """
    forecastday: List[WeatherApiForecastDay]

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> 'WeatherApiForecastResponse':
        return cls(forecastday=[
            WeatherApiForecastDay(
                avgtemp_c=float(item['day']['avgtemp_c']),
                condition=WeatherApiCondition.from_dict(item['day']['condition']),
            )
            for item in payload['forecast']['forecastday']
        ])


@dataclass(frozen=True)
class WeatherApiErrorResponse:
    """Corpo de erro: {"error": {"code": 1006, "message": "..."}}"""
    code: int
    message: str

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> 'WeatherApiErrorResponse':
        error = payload['error']
        return cls(code=int(error['code']), message=str(error['message']))
