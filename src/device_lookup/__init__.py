from src.device_lookup.ai_client import OpenRouterClient
from src.device_lookup.catalog_ingestion import CatalogIngestionError, DeviceCatalogIngester
from src.device_lookup.device_cache import DeviceCache
from src.device_lookup.lookup_service import (
    DeviceLookupError,
    DeviceLookupService,
    specs_to_form_fields,
)
from src.device_lookup.matching import find_similar_device
from src.device_lookup.models import DeviceSpecs, LookupResult

__all__ = [
    "CatalogIngestionError",
    "DeviceCache",
    "DeviceCatalogIngester",
    "DeviceLookupError",
    "DeviceLookupService",
    "DeviceSpecs",
    "LookupResult",
    "OpenRouterClient",
    "find_similar_device",
    "specs_to_form_fields",
]
