# Standard library imports
import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

# External package imports
import httpx

# Local application imports
from ...core.config import get_settings
from ...domain.exceptions import GeocodingError
from ...domain.models.bootcamp import GeoLocation
from ..http_client_factory import get_shared_http_client

logger = logging.getLogger(__name__)

SEARCH_PATH = "/search"


@dataclass
class GeocodeResult:
    """One match returned by the geocoding provider"""
    latitude: float
    longitude: float
    formatted_address: Optional[str] = None
    street: Optional[str] = None
    city: Optional[str] = None
    state: Optional[str] = None
    zipcode: Optional[str] = None
    country: Optional[str] = None

    def to_location(self) -> GeoLocation:
        return GeoLocation(
            coordinates=[self.longitude, self.latitude],
            formatted_address=self.formatted_address,
            street=self.street,
            city=self.city,
            state=self.state,
            zipcode=self.zipcode,
            country=self.country,
        )


class GeocoderClient:
    """
    HTTP client for a Nominatim-compatible forward geocoding API.

    Both methods return an empty list when the provider has no match; the
    caller decides whether that is an error.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        http_client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        settings = get_settings()
        self.base_url = (base_url or settings.geocoder_base_url).rstrip("/")
        self.country_codes = settings.geocoder_country_codes
        self.user_agent = settings.geocoder_user_agent
        self._http_client = http_client

    @property
    def http_client(self) -> httpx.AsyncClient:
        if self._http_client is None:
            self._http_client = get_shared_http_client()
        return self._http_client

    async def geocode(self, query: str) -> List[GeocodeResult]:
        """
        Resolve a free-form address to coordinates

        Args:
            query: Address string

        Returns:
            Matches, best first
        """
        return await self._search({"q": query})

    async def geocode_postal_code(self, zipcode: str) -> List[GeocodeResult]:
        """Resolve a postal code to coordinates"""
        return await self._search({"postalcode": zipcode})

    async def _search(self, criteria: Dict[str, str]) -> List[GeocodeResult]:
        params: Dict[str, Any] = {
            **criteria,
            "format": "json",
            "addressdetails": 1,
            "limit": 5,
        }
        if self.country_codes:
            params["countrycodes"] = self.country_codes

        try:
            response = await self.http_client.get(
                f"{self.base_url}{SEARCH_PATH}",
                params=params,
                headers={"User-Agent": self.user_agent},
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as e:
            logger.error(
                f"Geocoding HTTP error ({e.response.status_code}) for {criteria}: {e.response.text}"
            )
            raise GeocodingError("Geocoding service returned an error")
        except httpx.HTTPError as e:
            logger.error(f"Network error while geocoding {criteria}: {e}")
            raise GeocodingError("Geocoding service is unavailable")
        except ValueError as e:
            logger.error(f"Invalid JSON from geocoding service for {criteria}: {e}")
            raise GeocodingError("Geocoding service returned an invalid response")

        if not isinstance(payload, list):
            logger.warning(f"Unexpected geocoding payload for {criteria}: {payload!r}")
            return []

        results = [self._parse_result(item) for item in payload if "lat" in item and "lon" in item]
        logger.info(f"Geocoded {criteria} to {len(results)} result(s)")
        return results

    @staticmethod
    def _parse_result(item: Dict[str, Any]) -> GeocodeResult:
        address = item.get("address") or {}
        street = " ".join(
            part for part in (address.get("house_number"), address.get("road")) if part
        ) or None
        country_code = address.get("country_code")
        return GeocodeResult(
            latitude=float(item["lat"]),
            longitude=float(item["lon"]),
            formatted_address=item.get("display_name"),
            street=street,
            city=address.get("city") or address.get("town") or address.get("village"),
            state=address.get("state"),
            zipcode=address.get("postcode"),
            country=country_code.upper() if country_code else address.get("country"),
        )
