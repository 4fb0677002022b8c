"""ドメインサービスパッケージ。"""

from .address_rewriter import AddressRewriter
from .srs0_rewriter import Srs0Rewriter
from .srs1_rewriter import Srs1Rewriter
from .timestamp import (
    Clock,
    decode_timestamp,
    encode_timestamp,
    today,
    utc_now,
)

__all__ = [
    "AddressRewriter",
    "Srs0Rewriter",
    "Srs1Rewriter",
    # Timestamp codec
    "Clock",
    "decode_timestamp",
    "encode_timestamp",
    "today",
    "utc_now",
]
