import datetime as dt
import logging
from typing import Optional

from flask import Flask
from flask_caching import Cache

from .config import Settings, get_settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class ServerFactory:
    """Builds logging, the Flask server and the optional reading cache from one Settings."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or get_settings()

    def configure_logging(self) -> None:
        logging.basicConfig(level=self.settings.log_level, format=LOG_FORMAT)
        logging.getLogger().setLevel(self.settings.log_level)

    def create_server(self) -> Flask:
        server = Flask(__name__)

        @server.route("/health")
        def health():
            return {"status": "ok", "time": dt.datetime.now(dt.timezone.utc).isoformat()}

        return server

    def create_cache(self, server: Flask) -> Optional[Cache]:
        """Reading cache for the server, or None when CACHE_TYPE disables caching."""
        if self.settings.cache_type == "NullCache":
            return None
        config = {
            "CACHE_TYPE": self.settings.cache_type,
            "CACHE_DEFAULT_TIMEOUT": self.settings.cache_timeout_seconds,
        }
        if self.settings.cache_type == "RedisCache":
            config["CACHE_REDIS_URL"] = self.settings.redis_url
        return Cache(server, config=config)
