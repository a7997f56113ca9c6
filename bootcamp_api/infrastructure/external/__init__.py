"""External service clients for communicating with external systems"""

from .geocoder_client import GeocoderClient, GeocodeResult

__all__ = [
    "GeocoderClient",
    "GeocodeResult",
]
