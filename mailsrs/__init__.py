"""Sender Rewriting Scheme (SRS) address rewriting."""

from .application.services import SRSService
from .domain.exceptions import (
    InvalidAddressError,
    InvalidHashError,
    InvalidStateError,
    InvalidTimestampError,
    SRSException,
)
from .domain.value_objects import MailAddress, SRSOptions

__version__ = "0.1.0"

__all__ = [
    "SRSService",
    "SRSOptions",
    "MailAddress",
    "SRSException",
    "InvalidAddressError",
    "InvalidHashError",
    "InvalidStateError",
    "InvalidTimestampError",
]
