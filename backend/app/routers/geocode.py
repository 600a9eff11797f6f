from fastapi import APIRouter, HTTPException, Query

from app.core.config import settings
from app.schemas.store import GeocodeResponse
from app.services.geocoding import GeocodingError, forward_geocode

router = APIRouter()


@router.get("", response_model=GeocodeResponse)
def geocode_address(address: str = Query(..., min_length=1)):
    """Coordinates for the address typed in the location step."""
    if not settings.MAPBOX_ACCESS_TOKEN:
        raise HTTPException(status_code=503, detail="Geocoding is not configured")
    try:
        result = forward_geocode(address.strip())
    except GeocodingError as e:
        raise HTTPException(status_code=502, detail=str(e))
    if result is None:
        raise HTTPException(status_code=404, detail="Address not found")
    return result
