"""Open-Meteo adapter for daily/hourly weather forecasts.
"""

from typing import Optional, Dict, Any
import logging
import httpx

from app.config import settings

logger = logging.getLogger("menugen.open_meteo")

FORECAST_PATH = "/v1/forecast"

_client: Optional[httpx.Client] = None


# ------------------ Connection ------------------
def _get_client() -> httpx.Client:
    """Lazy init HTTP client."""
    global _client
    if _client is not None and not _client.is_closed:
        return _client
    connect(settings.weather_base_url, settings.weather_timeout_sec)
    return _client


def connect(base_url: str, timeout: float = 10.0):
    global _client
    _client = httpx.Client(
        base_url=base_url,
        timeout=timeout,
        headers={"Accept": "application/json"},
    )
    logger.info("Open-Meteo client ready (%s)", base_url)


def close():
    """Close the HTTP client."""
    global _client
    try:
        if _client is not None:
            _client.close()
            logger.info("Open-Meteo client closed")
    finally:
        _client = None


def get_forecast(params: Dict[str, Any]) -> Dict[str, Any]:
    """Fetch a forecast document.

    Args:
        params: Open-Meteo query parameters (latitude, longitude, daily, ...)

    Returns:
        Parsed JSON body

    Raises:
        httpx.HTTPStatusError: non-2xx response
        httpx.HTTPError: transport failure or timeout
        ValueError: body is not JSON
    """
    client = _get_client()
    logger.info("Open-Meteo GET %s params=%s", FORECAST_PATH, params)
    response = client.get(FORECAST_PATH, params=params)
    response.raise_for_status()
    return response.json()
