"""
Domain Constants - Todas as constantes da aplicação centralizadas
"""
from datetime import date


class API:
    """Constantes de transporte HTTP"""

    # Timeouts e limites HTTP
    HTTP_TIMEOUT_TOTAL = 8  # segundos
    HTTP_TIMEOUT_CONNECT = 3  # segundos
    HTTP_TIMEOUT_READ = 5  # segundos
    HTTP_CONNECTION_LIMIT = 100
    HTTP_CONNECTION_LIMIT_PER_HOST = 30
    DNS_CACHE_TTL = 300  # segundos

    # Retry opcional de transporte (desligado por padrão)
    RETRY_ATTEMPTS = 3
    RETRY_WAIT_MIN = 1  # segundos
    RETRY_WAIT_MAX = 4  # segundos
    RETRYABLE_STATUS = (429, 503)


class OpenWeather:
    """Constantes do provider OpenWeatherMap"""

    PROVIDER_NAME = "open-weather"

    BASE_URL = "https://api.openweathermap.org"
    HISTORY_BASE_URL = "https://history.api.openweathermap.org"
    WEATHER_PATH = "/data/2.5/weather"
    HISTORY_PATH = "/data/2.5/history/city"
    FORECAST_PATH = "/data/2.5/forecast/daily"

    # Janelas de roteamento (dias a partir de hoje, inclusivo)
    MIN_FORECAST_DAYS = 1
    MAX_FORECAST_DAYS = 16
    HISTORY_MIN_DATE = date(1979, 1, 1)  # exclusivo


class WeatherApi:
    """Constantes do provider WeatherAPI.com"""

    PROVIDER_NAME = "weather-api"

    BASE_URL = "http://api.weatherapi.com"
    CURRENT_PATH = "/v1/current.json"
    HISTORY_PATH = "/v1/history.json"
    FORECAST_PATH = "/v1/forecast.json"
    FUTURE_PATH = "/v1/future.json"

    MIN_FORECAST_DAYS = 1
    MAX_FORECAST_DAYS = 14
    MIN_FUTURE_DAYS = 15
    MAX_FUTURE_DAYS = 300
    HISTORY_MIN_DATE = date(2010, 1, 1)  # exclusivo


class Config:
    """Chaves da configuração (camelCase, como no arquivo de settings)"""

    ACTIVE_PROVIDER = "provider"
    API_KEY = "apiKey"
    BASE_URL = "baseUrl"
