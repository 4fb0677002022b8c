"""Application services package."""

from .srs_service import SRSService

__all__ = ["SRSService"]
