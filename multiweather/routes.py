import logging
import time

from flask import Flask, Response, jsonify

from .errors import CityNotFoundError, InvalidCityError, WeatherError
from .providers import WeatherService
from .utils import fmt_duration

logger = logging.getLogger(__name__)

MISSING_CITY = "missing city: expected /weather/{city}"


def parse_city(tail: str) -> str:
    """City is the first path segment after /weather/; anything after it is ignored."""
    city = (tail or "").split("/", 1)[0].strip()
    if not city:
        raise InvalidCityError(MISSING_CITY)
    return city


def _text(message: str, status: int) -> Response:
    return Response(message, status=status, mimetype="text/plain")


def register_routes(server: Flask, service: WeatherService) -> None:

    @server.errorhandler(InvalidCityError)
    def invalid_city(exc: InvalidCityError):
        return _text(str(exc), 400)

    @server.errorhandler(CityNotFoundError)
    def city_not_found(exc: CityNotFoundError):
        return _text(str(exc), 404)

    @server.errorhandler(WeatherError)
    def weather_failed(exc: WeatherError):
        logger.error("Weather lookup failed: %s", exc)
        return _text(str(exc), 500)

    @server.route("/hello")
    def hello():
        return _text("hello", 200)

    @server.route("/weather")
    @server.route("/weather/")
    def weather_without_city():
        raise InvalidCityError(MISSING_CITY)

    @server.route("/weather/<path:tail>")
    def weather(tail: str):
        """Average the providers' readings for the city in the path and report how long it took."""
        begin = time.perf_counter()
        city = parse_city(tail)
        celsius = service.temperature(city)
        return jsonify({
            "city": city,
            "celsius": celsius,
            "took": fmt_duration(time.perf_counter() - begin),
        })
