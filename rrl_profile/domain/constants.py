"""Constants used across the application."""

# Physical constants
EARTH_RADIUS_M = 6_371_000.0  # Earth's mean radius in meters
SPEED_OF_LIGHT = 299_792_458  # Speed of light in m/s

# Share of the first Fresnel zone radius that must stay free of obstacles
FRESNEL_CLEARANCE_RATIO = 0.6

# Request limits
MAX_STEP_METERS = 1000.0
MIN_ROUTE_DISTANCE_METERS = 10.0
DEFAULT_MAX_PROFILE_SAMPLES = 5000
MIN_SEGMENTS = 2
MAX_SITE_NAME_LENGTH = 120

# Influence factors below this value are treated as zero
INFLUENCE_EPS = 1e-9
