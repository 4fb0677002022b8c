"""SRSアドレスの値オブジェクトと文法。

キーワードとセパレータは大文字小文字を区別せずに照合する::

    SRS0<sep><hash>=<timestamp>=<hostname>=<localpart>@<forwarder>
    SRS0<sep><opaque-payload>@<forwarder>
    SRS1<sep><hash>=<original-forwarder>=<opaque-payload>@<forwarder>

4つのフィールドに分解できないSRS0ペイロードはopaqueな文字列として保持する。
他のSRS実装が生成したアドレスもラップ・アンラップできる。
"""

import re
from dataclasses import dataclass
from enum import Enum

from ..exceptions import InvalidAddressError, InvalidStateError
from .mail_address import MailAddress

SRS0_PATTERN = re.compile(r"^srs0([=\-+][^@]+)@(.*)$", re.IGNORECASE)
SRS1_PATTERN = re.compile(r"^srs1[=\-+]([^=]+)=([^=]+)=([^@]+)@(.*)$", re.IGNORECASE)
OPAQUE_PART_PATTERN = re.compile(
    r"^[=\-+]([^=]+)=([^=]+)=([^=]+)=([^@]+)$", re.IGNORECASE
)

SRS_PREFIX_PATTERN = re.compile(r"^srs[01][=\-+]", re.IGNORECASE)
SRS0_PREFIX_PATTERN = re.compile(r"^srs0[=\-+]", re.IGNORECASE)
SRS1_PREFIX_PATTERN = re.compile(r"^srs1[=\-+]", re.IGNORECASE)


class SRSFormat(str, Enum):
    """SRSアドレスの層。"""

    SRS0 = "SRS0"
    SRS1 = "SRS1"


def is_srs_address(address: str) -> bool:
    """アドレスがSRS0/SRS1の形式かどうかを判定する。"""
    return SRS_PREFIX_PATTERN.match(address) is not None


def is_srs0_local_part(local_part: str) -> bool:
    """ローカルパートがSRS0キーワードで始まるかどうかを判定する。"""
    return SRS0_PREFIX_PATTERN.match(local_part) is not None


def is_srs1_local_part(local_part: str) -> bool:
    """ローカルパートがSRS1キーワードで始まるかどうかを判定する。"""
    return SRS1_PREFIX_PATTERN.match(local_part) is not None


@dataclass(frozen=True)
class SourceFields:
    """分解済みのSRS0ペイロード（ハッシュ、タイムスタンプ、元の送信者）。"""

    hash: str
    timestamp: str
    hostname: str
    local_part: str

    @classmethod
    def decompose(cls, opaque_part: str) -> "SourceFields | None":
        """ペイロードをフィールドに分解する。一致しない場合はNoneを返す。"""
        match = OPAQUE_PART_PATTERN.match(opaque_part)
        if match is None:
            return None
        return cls(*match.groups())

    def to_opaque_part(self, separator: str) -> str:
        """フィールドをペイロード文字列に戻す。"""
        return (
            f"{separator}{self.hash}={self.timestamp}"
            f"={self.hostname}={self.local_part}"
        )

    def source_address(self) -> MailAddress:
        """元の送信者アドレスを返す。"""
        return MailAddress.from_parts(self.local_part, self.hostname)


@dataclass(frozen=True)
class Srs0Address:
    """1ホップのSRSアドレス。

    Attributes:
        opaque_part: キーワードと'@'の間のペイロード（セパレータを含む）
        forwarder: アドレスを生成したフォワーダのドメイン
        separator: シリアライズ時に使うセパレータ
        source: 分解済みのペイロード（opaqueな場合はNone）
    """

    opaque_part: str
    forwarder: str
    separator: str = "="
    source: SourceFields | None = None

    format = SRSFormat.SRS0

    @classmethod
    def from_source(
        cls, source: SourceFields, forwarder: str, separator: str
    ) -> "Srs0Address":
        """分解済みのフィールドからSRS0アドレスを生成する。"""
        return cls(
            opaque_part=source.to_opaque_part(separator),
            forwarder=forwarder,
            separator=separator,
            source=source,
        )

    @property
    def is_opaque(self) -> bool:
        """ペイロードを分解できなかった場合にTrueを返す。"""
        return self.source is None

    @property
    def hash(self) -> str | None:
        """ハッシュを返す。"""
        return self.source.hash if self.source else None

    @property
    def timestamp(self) -> str | None:
        """エンコード済みのタイムスタンプを返す。"""
        return self.source.timestamp if self.source else None

    def source_address(self) -> MailAddress | None:
        """元の送信者を返す（opaqueな場合はNone）。"""
        return self.source.source_address() if self.source else None

    def to_mail_address(self) -> MailAddress:
        """MailAddressにシリアライズする。"""
        return MailAddress.from_parts(f"SRS0{self.opaque_part}", self.forwarder)

    def __str__(self) -> str:
        """文字列表現を返す。"""
        return self.to_mail_address().address


@dataclass(frozen=True)
class Srs1Address:
    """複数ホップ用のSRS1アドレス（guarded方式）。

    Attributes:
        hash: 元のフォワーダとペイロードに対するハッシュ
        original_forwarder: ラップしたSRS0アドレスを生成したフォワーダ
        opaque_part: ラップしたSRS0アドレスのペイロード（セパレータを含む）
        forwarder: この層を生成したフォワーダのドメイン
        separator: シリアライズ時に使うセパレータ
        source: ペイロードの分解結果（分解できない場合はNone）。
            ハッシュは元のSRS0アドレスのもの
    """

    hash: str
    original_forwarder: str
    opaque_part: str
    forwarder: str
    separator: str = "="
    source: SourceFields | None = None

    format = SRSFormat.SRS1

    def __post_init__(self) -> None:
        """ペイロードの存在を検証する。"""
        if self.opaque_part is None:
            raise InvalidStateError("SRS1 needs an opaque part")

    @property
    def is_opaque(self) -> bool:
        """内側のペイロードを分解できなかった場合にTrueを返す。"""
        return self.source is None

    @property
    def original_hash(self) -> str | None:
        """ラップしたSRS0アドレスのハッシュを返す。"""
        return self.source.hash if self.source else None

    @property
    def timestamp(self) -> str | None:
        """内側のタイムスタンプを返す。"""
        return self.source.timestamp if self.source else None

    def source_address(self) -> MailAddress | None:
        """元の送信者を返す（opaqueな場合はNone）。"""
        return self.source.source_address() if self.source else None

    def to_mail_address(self) -> MailAddress:
        """MailAddressにシリアライズする。"""
        return MailAddress.from_parts(
            f"SRS1{self.separator}{self.hash}"
            f"={self.original_forwarder}={self.opaque_part}",
            self.forwarder,
        )

    def __str__(self) -> str:
        """文字列表現を返す。"""
        return self.to_mail_address().address


SrsAddress = Srs0Address | Srs1Address


def parse_srs_address(address: MailAddress, separator: str = "=") -> SrsAddress:
    """SRS0またはSRS1アドレスを解析する。

    Args:
        address: 解析するアドレス
        separator: シリアライズ時に使うセパレータ

    Returns:
        Srs0AddressまたはSrs1Address

    Raises:
        InvalidAddressError: SRS0にもSRS1にも一致しない場合
    """
    text = address.address

    match = SRS0_PATTERN.match(text)
    if match is not None:
        opaque_part, forwarder = match.groups()
        if not opaque_part.strip() or not forwarder.strip():
            raise InvalidAddressError("Invalid srs address")
        return Srs0Address(
            opaque_part=opaque_part,
            forwarder=forwarder,
            separator=separator,
            source=SourceFields.decompose(opaque_part),
        )

    match = SRS1_PATTERN.match(text)
    if match is not None:
        hash_, original_forwarder, opaque_part, forwarder = match.groups()
        if not all(
            part.strip()
            for part in (hash_, original_forwarder, opaque_part, forwarder)
        ):
            raise InvalidAddressError("Invalid srs address")
        # SRS1では内側のペイロードの分解は任意
        return Srs1Address(
            hash=hash_,
            original_forwarder=original_forwarder,
            opaque_part=opaque_part,
            forwarder=forwarder,
            separator=separator,
            source=SourceFields.decompose(opaque_part),
        )

    raise InvalidAddressError("Invalid srs address")
