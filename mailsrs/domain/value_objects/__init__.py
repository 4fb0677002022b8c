"""値オブジェクトパッケージ。"""

from .mail_address import MailAddress
from .srs_address import (
    SourceFields,
    Srs0Address,
    Srs1Address,
    SrsAddress,
    SRSFormat,
    is_srs0_local_part,
    is_srs1_local_part,
    is_srs_address,
    parse_srs_address,
)
from .srs_options import SRSOptions

__all__ = [
    "MailAddress",
    "SRSOptions",
    # SRS grammar
    "SRSFormat",
    "SourceFields",
    "Srs0Address",
    "Srs1Address",
    "SrsAddress",
    "is_srs_address",
    "is_srs0_local_part",
    "is_srs1_local_part",
    "parse_srs_address",
]
