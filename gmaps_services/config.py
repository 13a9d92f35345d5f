"""
Default configuration for gmaps-services.

Values are resolved from environment variables when the module is first
imported. Library users can override them at runtime with
ServicesConfig(...).apply() (see config_manager.py).

Request builders read LOCATION_SENSOR and DEFAULT_LANGUAGE when a URL is
formatted, so changes made through apply() take effect on the next request.
"""

import locale
import os

from .exceptions import ConfigurationError

_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off", "")


def parse_bool(value: str, name: str = "value") -> bool:
    """Parse an env var style boolean ("true", "0", "yes", ...)."""
    normalized = value.strip().lower()
    if normalized in _TRUE_VALUES:
        return True
    if normalized in _FALSE_VALUES:
        return False
    raise ConfigurationError(f"{name} must be a boolean, got {value!r}")


def parse_timeout(value: str, name: str = "value") -> float:
    try:
        timeout = float(value)
    except ValueError:
        raise ConfigurationError(f"{name} must be a number of seconds, got {value!r}") from None
    if timeout <= 0:
        raise ConfigurationError(f"{name} must be positive, got {value!r}")
    return timeout


def system_language() -> str:
    """Language of the active locale as an IETF tag ("de-AT"), or "en" if none is set."""
    try:
        lang = locale.getlocale()[0]
    except ValueError:
        lang = None
    if not lang or lang in ("C", "POSIX"):
        return "en"
    return lang.replace("_", "-")


# Service endpoints
DISTANCE_MATRIX_URL = "https://maps.googleapis.com/maps/api/distancematrix/json"
GEOCODING_URL = "https://maps.googleapis.com/maps/api/geocode/json"

# Whether the request comes from a device with a location sensor
LOCATION_SENSOR = parse_bool(os.environ.get("GMAPS_SENSOR", "false"), "GMAPS_SENSOR")

# Language used when a request does not set one
DEFAULT_LANGUAGE = os.environ.get("GMAPS_LANGUAGE") or system_language()

# HTTP timeout (seconds)
REQUEST_TIMEOUT = parse_timeout(os.environ.get("GMAPS_TIMEOUT", "30"), "GMAPS_TIMEOUT")

# Proxy Configuration
PROXY_HOST = os.environ.get("GMAPS_PROXY_HOST", "")
PROXY_USER = os.environ.get("GMAPS_PROXY_USER", "")
PROXY_PASS = os.environ.get("GMAPS_PROXY_PASS", "")


def get_proxy_url():
    """Get proxy URL. Returns single URL string for httpx."""
    if PROXY_HOST and PROXY_USER and PROXY_PASS:
        return f"http://{PROXY_USER}:{PROXY_PASS}@{PROXY_HOST}"
    if PROXY_HOST:
        return f"http://{PROXY_HOST}"
    return None
