"""Address -> coordinates via Mapbox forward geocoding, for the store location step."""
import logging
from typing import Optional
from urllib.parse import quote

import httpx

from app.core.config import settings

logger = logging.getLogger(__name__)

GEOCODE_TIMEOUT_SECONDS = 10.0
# The wizard displays and stores coordinates with 9 decimal places
COORDINATE_DECIMALS = 9


class GeocodingError(Exception):
    """Upstream lookup failed (network, non-200, bad JSON)."""


def format_coordinate(value: float) -> float:
    return round(float(value), COORDINATE_DECIMALS)


def forward_geocode(address: str) -> Optional[dict]:
    """
    Return {latitude, longitude, place_name} for the best match, or None when nothing matched.
    Raises GeocodingError when Mapbox cannot be reached or answers with an error.
    """
    # safe="" so a "/" inside the address cannot split the path
    encoded = quote(address, safe="")
    url = f"{settings.MAPBOX_GEOCODING_URL.rstrip('/')}/{encoded}.json"
    params = {"access_token": settings.MAPBOX_ACCESS_TOKEN, "limit": 1}
    try:
        with httpx.Client(timeout=GEOCODE_TIMEOUT_SECONDS) as client:
            resp = client.get(url, params=params)
    except httpx.RequestError as e:
        logger.warning("Mapbox request failed: %s", e)
        raise GeocodingError("Could not reach geocoding service") from e
    if resp.status_code != 200:
        logger.warning("Mapbox returned %s: %s", resp.status_code, resp.text[:200])
        raise GeocodingError(f"Geocoding service returned {resp.status_code}")
    try:
        data = resp.json()
    except ValueError as e:
        raise GeocodingError("Invalid response from geocoding service") from e
    # Response: { "features": [ { "center": [lng, lat], "place_name": "..." } ] }
    features = data.get("features") if isinstance(data.get("features"), list) else []
    if not features:
        return None
    best = features[0]
    center = best.get("center") or []
    if len(center) != 2:
        return None
    lng, lat = center
    return {
        "latitude": format_coordinate(lat),
        "longitude": format_coordinate(lng),
        "place_name": best.get("place_name"),
    }
