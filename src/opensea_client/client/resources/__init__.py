"""Client resources for the OpenSea API."""

from .assets import AssetsResource
from .base import BaseResource

__all__ = ["BaseResource", "AssetsResource"]
