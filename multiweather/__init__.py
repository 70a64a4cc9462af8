from . import config
from .server import ServerFactory
from .providers import WeatherService
from .routes import register_routes

# Assemble
_factory = ServerFactory(config.get_settings())
_factory.configure_logging()
server = _factory.create_server()
cache = _factory.create_cache(server)
service = WeatherService(settings=_factory.settings)

# Init subsystems
service.set_cache(cache)
register_routes(server, service)

__all__ = ["server", "service"]
