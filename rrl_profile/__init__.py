"""Radio relay link path profile package."""

from rrl_profile.adapter import RrlProfileAPI
from rrl_profile.application.analysis import calculate_profile

__all__ = ["RrlProfileAPI", "calculate_profile"]
