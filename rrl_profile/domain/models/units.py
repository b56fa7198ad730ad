# rrl_profile/domain/models/units.py
"""
Type-safe unit definitions for path profile calculations.

This module uses NewType to create distinct types for different units,
helping catch unit conversion errors at type-checking time.
"""

from typing import NewType

# Base physical units
Meters = NewType("Meters", float)  # Distance in meters
Degrees = NewType("Degrees", float)  # Angle in degrees
GigaHertz = NewType("GigaHertz", float)  # Frequency in GHz

# Semantic types (domain-specific meanings)
Elevation = NewType("Elevation", Meters)  # Terrain elevation above sea level
Clearance = NewType("Clearance", Meters)  # Signed height above an obstacle
