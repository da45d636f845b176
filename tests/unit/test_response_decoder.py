"""
Testes para o decoder de respostas HTTP dos providers
"""
import pytest

from domain.exceptions import ProviderApiException, ResponseDecodeException
from infrastructure.adapters.output.http.response_decoder import decode_response
from infrastructure.adapters.output.providers.openweather.schemas import (
    OpenWeatherCurrentResponse,
    OpenWeatherErrorResponse,
)
from infrastructure.adapters.output.providers.weatherapi.schemas import (
    WeatherApiCurrentResponse,
    WeatherApiErrorResponse,
)


class TestDecodeResponse:
    """Classificação sucesso / erro da API / erro de decodificação"""

    def test_success_payload(self, make_response, weatherapi_samples):
        response = make_response(weatherapi_samples['current_clear'])

        data = decode_response(
            response, WeatherApiCurrentResponse.from_dict, WeatherApiErrorResponse.from_dict
        )

        assert data.temp_c == 8.0
        assert data.condition.text == "Clear"

    def test_empty_json_on_success(self, make_response):
        response = make_response({}, url='http://test.local/v1/current.json')

        with pytest.raises(ResponseDecodeException) as exc_info:
            decode_response(
                response, WeatherApiCurrentResponse.from_dict, WeatherApiErrorResponse.from_dict
            )

        assert exc_info.value.endpoint == 'http://test.local/v1/current.json'

    def test_structured_api_error(self, make_response, weatherapi_samples):
        response = make_response(weatherapi_samples['error_1008'], status=400)

        with pytest.raises(ProviderApiException) as exc_info:
            decode_response(
                response, WeatherApiCurrentResponse.from_dict, WeatherApiErrorResponse.from_dict
            )

        error = exc_info.value
        assert error.code == 1008
        assert error.api_message == (
            "API key is limited to get history data. "
            "Please check our pricing page and upgrade to higher plan."
        )
        assert str(error) == f"Api error: {error.api_message} code: 1008"

    def test_openweather_error_code_as_string(self, make_response):
        response = make_response({'cod': '404', 'message': 'city not found'}, status=404)

        with pytest.raises(ProviderApiException) as exc_info:
            decode_response(
                response, OpenWeatherCurrentResponse.from_dict, OpenWeatherErrorResponse.from_dict
            )

        assert exc_info.value.code == 404
        assert exc_info.value.api_message == 'city not found'

    def test_non_json_body(self, make_response):
        response = make_response(body='<html>Bad Gateway</html>', status=502)

        with pytest.raises(ResponseDecodeException, match="invalid JSON body"):
            decode_response(
                response, WeatherApiCurrentResponse.from_dict, WeatherApiErrorResponse.from_dict
            )

    def test_error_body_without_schema(self, make_response):
        """Status de erro com corpo fora do formato do provider"""
        response = make_response({'detail': 'upstream failure'}, status=500)

        with pytest.raises(ResponseDecodeException, match="unexpected schema"):
            decode_response(
                response, WeatherApiCurrentResponse.from_dict, WeatherApiErrorResponse.from_dict
            )

    def test_body_not_utf8(self, make_response):
        response = make_response(body=b'{"current": "\xff\xfe"}')

        with pytest.raises(ResponseDecodeException, match="invalid JSON body"):
            decode_response(
                response, WeatherApiCurrentResponse.from_dict, WeatherApiErrorResponse.from_dict
            )
