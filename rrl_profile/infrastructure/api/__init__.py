# rrl_profile/infrastructure/api/__init__.py
from .clients import (
    FallbackElevationProvider,
    OpenMeteoElevationProvider,
    OpenTopoDataElevationProvider,
    create_elevation_providers,
)

__all__ = [
    "FallbackElevationProvider",
    "OpenMeteoElevationProvider",
    "OpenTopoDataElevationProvider",
    "create_elevation_providers",
]
