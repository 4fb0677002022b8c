"""ドメイン層の例外定義パッケージ。"""

from .base import DomainException
from .srs_exceptions import (
    InvalidAddressError,
    InvalidHashError,
    InvalidStateError,
    InvalidTimestampError,
    SRSException,
)

__all__ = [
    # Base
    "DomainException",
    # SRS
    "SRSException",
    "InvalidAddressError",
    "InvalidHashError",
    "InvalidStateError",
    "InvalidTimestampError",
]
