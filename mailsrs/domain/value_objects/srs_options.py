"""SRS書き換え設定の値オブジェクト。"""

import logging
from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar

logger = logging.getLogger(__name__)

DEFAULT_LIFETIME = timedelta(days=30)
DEFAULT_SEPARATOR = "="
DEFAULT_HASH_LENGTH = 4


@dataclass(frozen=True)
class SRSOptions:
    """SRS書き換えエンジンの設定。

    Attributes:
        lifetime: タイムスタンプの有効期間（1日以上）
        always_rewrite: フォワーダがドメインパートと同じでも書き換えるかどうか
        separator: SRS0/SRS1の直後の文字（'='、'+'、'-'のいずれか）
        hash_length: 生成するSRSアドレスのハッシュ長（1以上）
        hash_min: 有効とみなす最小のハッシュ長
        try_verify_srs1_time: 分解できる場合にSRS1内側のタイムスタンプを
            検証するかどうか
        disable_timestamp_validation: タイムスタンプの検証を無効にする
            （テスト専用）
    """

    lifetime: timedelta = DEFAULT_LIFETIME
    always_rewrite: bool = False
    separator: str = DEFAULT_SEPARATOR
    hash_length: int = DEFAULT_HASH_LENGTH
    hash_min: int = 4
    try_verify_srs1_time: bool = False
    disable_timestamp_validation: bool = False

    ALLOWED_SEPARATORS: ClassVar[frozenset[str]] = frozenset({"=", "+", "-"})

    def __post_init__(self) -> None:
        """不正な値をデフォルト値に置き換える。"""
        if self.separator not in self.ALLOWED_SEPARATORS:
            logger.warning(
                "Unsupported SRS separator %r, using %r",
                self.separator,
                DEFAULT_SEPARATOR,
            )
            object.__setattr__(self, "separator", DEFAULT_SEPARATOR)

        if self.lifetime < timedelta(days=1):
            logger.warning(
                "SRS lifetime %s is shorter than 1 day, using %s",
                self.lifetime,
                DEFAULT_LIFETIME,
            )
            object.__setattr__(self, "lifetime", DEFAULT_LIFETIME)

        if self.hash_length < 1:
            logger.warning(
                "SRS hash length %d is not positive, using %d",
                self.hash_length,
                DEFAULT_HASH_LENGTH,
            )
            object.__setattr__(self, "hash_length", DEFAULT_HASH_LENGTH)
