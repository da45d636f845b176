"""
Domain Exceptions - Business Rule Violations
Clean Architecture: Domain layer exceptions
"""
from datetime import date


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class TemperatureException(DomainException):
    """Raised when a temperature is below absolute zero for its scale"""
    scale_label = ""
    minimum_label = ""

    def __init__(self, value: float):
        super().__init__(
            f"The {self.scale_label} temperature scale {value} "
            f"must be greater than {self.minimum_label}",
            details={"scale": self.scale_label, "value": value}
        )
        self.value = value


class KelvinTemperatureException(TemperatureException):
    scale_label = "Kelvin"
    minimum_label = "0°K"


class CelsiusTemperatureException(TemperatureException):
    scale_label = "Celsius"
    minimum_label = "-273.15°C"


class FahrenheitTemperatureException(TemperatureException):
    scale_label = "Fahrenheit"
    minimum_label = "-459.67°F"


class ProviderException(DomainException):
    """Base exception for weather provider failures"""
    pass


class ProviderNotSupportedException(ProviderException):
    """Raised when a provider name is not registered"""
    def __init__(self, provider_name: str):
        super().__init__(
            f"Not supported provider {provider_name}",
            details={"provider": provider_name}
        )
        self.provider_name = provider_name


class ProviderConfigurationException(ProviderException):
    """Raised when a provider cannot be built from its configuration"""
    pass


class MissingConfigurationException(ProviderConfigurationException):
    """Raised when a required configuration key is absent"""
    def __init__(self, key: str, provider_name: str):
        super().__init__(
            f"Configuration {key} not found for provider {provider_name}",
            details={"key": key, "provider": provider_name}
        )
        self.key = key
        self.provider_name = provider_name


class InvalidConfigurationException(ProviderConfigurationException):
    """Raised when a configuration value cannot be parsed (ex: malformed base URL)"""
    def __init__(self, path: str, value: str, reason: str):
        super().__init__(
            f"Error while parsing '{value}', {reason}. "
            f"Change the value in the configuration {path}",
            details={"path": path, "value": value, "reason": reason}
        )
        self.path = path
        self.value = value
        self.reason = reason


class ProviderNotSetException(ProviderConfigurationException):
    """Raised when no active provider is configured"""
    def __init__(self):
        super().__init__("Provider not set. Please configure the provider")


class UnsupportedDateException(ProviderException):
    """Raised when a requested date falls outside every routing window"""
    def __init__(self, requested_date: date, provider_name: str = ""):
        super().__init__(
            f"Unsupported date: {requested_date.isoformat()}",
            details={"date": requested_date.isoformat(), "provider": provider_name}
        )
        self.date = requested_date


class ProviderTransportException(ProviderException):
    """Raised when the HTTP exchange could not be completed"""
    pass


class ProviderApiException(ProviderException):
    """Raised when the provider answers with a structured error body"""
    def __init__(self, message: str, code: int):
        super().__init__(
            f"Api error: {message} code: {code}",
            details={"api_message": message, "code": code}
        )
        self.api_message = message
        self.code = code


class ResponseDecodeException(ProviderException):
    """Raised when a response body does not match the provider schema"""
    def __init__(self, endpoint: str, reason: str):
        super().__init__(
            f"Unable to decode response from {endpoint}: {reason}",
            details={"endpoint": endpoint, "reason": reason}
        )
        self.endpoint = endpoint
        self.reason = reason


class MalformedResponseException(ProviderException):
    """Raised when a successful response lacks an expected list element"""
    def __init__(self, endpoint: str, field_path: str):
        super().__init__(
            f"{endpoint} returns unexpected JSON, empty '{field_path}' section",
            details={"endpoint": endpoint, "field_path": field_path}
        )
        self.endpoint = endpoint
        self.field_path = field_path
