"""
Daily weather forecast for the menu strip, backed by Open-Meteo.

The forecast always answers: API failures and short responses are filled
with a mild clear-sky stub so the client can render one card per menu day.
"""

import logging
import math
from datetime import date, datetime, timedelta
from typing import Any, Dict, List, Optional, Sequence
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

import httpx

from adapters import open_meteo_adapter
from app.config import settings
from domain.schemas.weather_schemas import WeatherDay

logger = logging.getLogger("menugen.weather")

MIN_FORECAST_DAYS = 1
MAX_FORECAST_DAYS = 14

# San Jose, CA
DEFAULT_LAT = 37.3382
DEFAULT_LON = -121.8863

# Treat as sunny if cloud cover <= this %
SUNNY_CLOUD_THRESHOLD = 35
DEFAULT_CLOUD_COVER = 50
MIDDAY_HOURS = ("11", "12", "13", "14", "15")

STUB_TEMP_F = 72
STUB_CONDITION = "Clear"
STUB_DESCRIPTION = "clear sky"

MIDDAY_MODES = {"", "midday", "daytime"}

WMO_DESCRIPTIONS = {
    0: "clear sky",
    1: "mainly clear",
    2: "partly cloudy",
    3: "overcast",
    45: "fog",
    48: "fog",
    51: "drizzle",
    53: "drizzle",
    55: "drizzle",
    56: "freezing drizzle",
    57: "freezing drizzle",
    61: "rain",
    63: "rain",
    65: "rain",
    66: "freezing rain",
    67: "freezing rain",
    71: "snow",
    73: "snow",
    75: "snow",
    77: "snow grains",
    80: "rain showers",
    81: "rain showers",
    82: "rain showers",
    85: "snow showers",
    86: "snow showers",
    95: "thunderstorm",
    96: "thunderstorm with hail",
    99: "thunderstorm with hail",
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _parse_or_default(raw: Optional[str], default: float) -> float:
    text = (raw or "").strip()
    if not text:
        return default
    try:
        return float(text)
    except ValueError:
        return default


def _safe_zone(name: Optional[str]) -> ZoneInfo:
    try:
        return ZoneInfo((name or "").strip())
    except (ZoneInfoNotFoundError, ValueError):
        logger.warning(f"Unknown timezone {name!r}; using UTC")
        return ZoneInfo("UTC")


def daily_temperature_field(temp_mode: str) -> str:
    """Open-Meteo daily series used for the day temperature"""
    if temp_mode == "min":
        return "temperature_2m_min"
    if temp_mode in ("mean", "avg", "average"):
        return "temperature_2m_mean"
    return "temperature_2m_max"


def map_condition(code: int, cloud_cover: Optional[int]) -> str:
    """Map a WMO code to a card condition; non-precipitation codes lean sunny on low cloud."""
    if code in (45, 48):
        return "Mist"
    if 51 <= code <= 57:
        return "Drizzle"
    if 61 <= code <= 67 or 80 <= code <= 82:
        return "Rain"
    if 71 <= code <= 77 or 85 <= code <= 86:
        return "Snow"
    if code in (95, 96, 99):
        return "Thunderstorm"
    cc = DEFAULT_CLOUD_COVER if cloud_cover is None else max(0, min(100, cloud_cover))
    return "Clear" if cc <= SUNNY_CLOUD_THRESHOLD else "Clouds"


def map_description(code: int) -> str:
    return WMO_DESCRIPTIONS.get(code, "cloudy")


def pick_sunniest_midday(
    day: date,
    hourly_times: Sequence[str],
    hourly_codes: Sequence[Any],
    hourly_clouds: Sequence[Any],
    hourly_temps: Sequence[Any],
) -> Optional[Dict[str, Any]]:
    """
    Pick the 11:00-15:00 local hour with the lowest cloud cover.

    Returns:
        dict with hour, code, cloud_cover and temp_f (None when the hourly
        temperature is missing), or None if the day has no midday hours
    """
    if not hourly_times or not hourly_codes:
        return None

    prefix = f"{day.isoformat()}T"
    indexes = [
        i for i, t in enumerate(hourly_times)
        if isinstance(t, str) and t.startswith(prefix) and t[11:13] in MIDDAY_HOURS
    ]
    if not indexes:
        return None

    clouds_aligned = len(hourly_clouds) == len(hourly_times)
    best_idx, best_cloud = indexes[0], 101
    for i in indexes:
        cc = hourly_clouds[i] if clouds_aligned and _is_number(hourly_clouds[i]) else DEFAULT_CLOUD_COVER
        if cc < best_cloud:
            best_idx, best_cloud = i, int(cc)

    code = hourly_codes[best_idx] if best_idx < len(hourly_codes) else None
    if not _is_number(code):
        return None

    temp_f = None
    if len(hourly_temps) == len(hourly_times) and _is_number(hourly_temps[best_idx]):
        temp_f = _round_half_up(hourly_temps[best_idx])

    return {
        "hour": hourly_times[best_idx],
        "code": int(code),
        "cloud_cover": best_cloud,
        "temp_f": temp_f,
    }


class WeatherService:
    @staticmethod
    def stub_forecast(days: int, start: date) -> List[WeatherDay]:
        return [
            WeatherDay(
                date=start + timedelta(days=i),
                temp_f=STUB_TEMP_F,
                condition=STUB_CONDITION,
                description=STUB_DESCRIPTION,
            )
            for i in range(days)
        ]

    @staticmethod
    def get_daily_forecast(
        days: int = 7, start_date: Optional[date] = None
    ) -> List[WeatherDay]:
        """
        Get a daily forecast starting at ``start_date`` (today in the configured zone by default).

        ``days`` is clamped to 1..14. Always returns exactly that many days.
        """
        d = max(MIN_FORECAST_DAYS, min(days, MAX_FORECAST_DAYS))
        zone = _safe_zone(settings.weather_tz)
        start = start_date or datetime.now(zone).date()
        end = start + timedelta(days=d - 1)

        lat = _parse_or_default(settings.weather_lat, DEFAULT_LAT)
        lon = _parse_or_default(settings.weather_lon, DEFAULT_LON)
        temp_mode = (settings.weather_temp or "").strip().lower()
        use_midday = temp_mode in MIDDAY_MODES
        daily_field = daily_temperature_field(temp_mode)

        params = {
            "latitude": lat,
            "longitude": lon,
            "daily": f"{daily_field},weathercode",
            "hourly": "weathercode,cloudcover,temperature_2m",
            "temperature_unit": "fahrenheit",
            "timezone": zone.key,
            "start_date": start.isoformat(),
            "end_date": end.isoformat(),
        }

        try:
            payload = open_meteo_adapter.get_forecast(params)
            forecast = WeatherService._parse_forecast(payload, d, daily_field, use_midday)
        except httpx.HTTPStatusError as e:
            logger.warning(f"Open-Meteo non-2xx status: {e.response.status_code}")
            return WeatherService.stub_forecast(d, start)
        except (httpx.HTTPError, ValueError, TypeError, AttributeError) as e:
            logger.error(f"Open-Meteo error: {e!r}")
            return WeatherService.stub_forecast(d, start)

        while len(forecast) < d:
            forecast.append(
                WeatherDay(
                    date=start + timedelta(days=len(forecast)),
                    temp_f=STUB_TEMP_F,
                    condition=STUB_CONDITION,
                    description=STUB_DESCRIPTION,
                )
            )

        first = forecast[0]
        logger.info(
            f"Forecast first day {first.date}: {first.temp_f}F, {first.condition}, "
            f"desc={first.description!r}"
        )
        return forecast

    @staticmethod
    def _parse_forecast(
        payload: Dict[str, Any], days: int, daily_field: str, use_midday: bool
    ) -> List[WeatherDay]:
        daily = payload.get("daily") or {}
        dates = daily.get("time") or []
        temps_daily = daily.get(daily_field) or []
        daily_codes = daily.get("weathercode") or []

        hourly = payload.get("hourly") or {}
        hourly_times = hourly.get("time") or []
        hourly_codes = hourly.get("weathercode") or []
        hourly_clouds = hourly.get("cloudcover") or []
        hourly_temps = hourly.get("temperature_2m") or []

        out: List[WeatherDay] = []
        n = min(len(dates), len(temps_daily), len(daily_codes))
        for i in range(min(n, days)):
            day = date.fromisoformat(dates[i])
            daily_temp = temps_daily[i]
            daily_temp_f = _round_half_up(daily_temp) if _is_number(daily_temp) else STUB_TEMP_F
            code = int(daily_codes[i]) if _is_number(daily_codes[i]) else 0

            pick = pick_sunniest_midday(
                day, hourly_times, hourly_codes, hourly_clouds, hourly_temps
            )
            cloud_cover = None
            temp_f = daily_temp_f
            if pick is not None:
                # Icon follows the sunniest midday hour
                code = pick["code"]
                cloud_cover = pick["cloud_cover"]
                if use_midday and pick["temp_f"] is not None:
                    temp_f = pick["temp_f"]

            condition = map_condition(code, cloud_cover)
            out.append(
                WeatherDay(
                    date=day,
                    temp_f=temp_f,
                    condition=condition,
                    description=map_description(code),
                )
            )
            logger.debug(
                f"WX {day}: temp={temp_f}F code={code} clouds={cloud_cover} -> {condition}"
            )
        return out
