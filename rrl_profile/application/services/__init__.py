# rrl_profile/application/services/__init__.py
from .assembler import ResultAssembler
from .base import BaseElevationProvider, BasePathSampler
from .coordinates import CoordinatesService
from .lift import LiftRecommender
from .obstruction import ObstructionAnalyzer
from .profile import PathSampler
from .profile_data_calculator import ProfileCalculator

__all__ = [
    "ResultAssembler",
    "BaseElevationProvider",
    "BasePathSampler",
    "CoordinatesService",
    "LiftRecommender",
    "ObstructionAnalyzer",
    "PathSampler",
    "ProfileCalculator",
]
