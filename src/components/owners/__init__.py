"""
Owners component - link hub profiles.
"""

from ._impl import OwnerService, validate_owner_data
from .ports import OwnerRepoPort

__all__ = [
    "OwnerService",
    "OwnerRepoPort",
    "validate_owner_data",
]
