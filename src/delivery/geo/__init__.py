"""Geo adapter abstraction — pluggable address resolution."""

from delivery.config import get_settings

_geo_instance = None


def get_geo_client():
    """Return the configured geo adapter (singleton).

    Uses FakeGeoClient by default. In production, configure via the
    GEO_ADAPTER environment variable.
    """
    global _geo_instance
    if _geo_instance is None:
        adapter = get_settings().geo_adapter
        if adapter == "fake":
            from delivery.geo.fake_adapter import FakeGeoClient

            _geo_instance = FakeGeoClient()
        else:
            raise ValueError(f"Unknown geo adapter: {adapter}")
    return _geo_instance


def reset_geo_client():
    """Reset the geo client singleton (useful for testing)."""
    global _geo_instance
    _geo_instance = None
