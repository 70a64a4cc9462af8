# Thin entrypoint exposing the Flask `server`
from multiweather import server  # noqa: F401
from multiweather import config


if __name__ == "__main__":  # pragma: no cover
    # For production: use gunicorn, e.g.:
    # gunicorn app:server -c gunicorn.conf.py
    server.run(host="0.0.0.0", port=config.PORT, debug=config.DEBUG)
