"""日単位のSRSタイムスタンプのエンコードとデコード。

タイムスタンプはエポックからの日数の下位10ビットを、base32の2文字で表す。
デコードは現在の1024日周期の開始日を基準にするため、時計を引数で受け取る。
"""

from collections.abc import Callable
from datetime import UTC, date, datetime, timedelta

from ..exceptions import InvalidTimestampError

Clock = Callable[[], datetime]

TIMESTAMP_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
TIMESTAMP_PRECISION = 1 << 10
_EPOCH = date(1970, 1, 1)


def utc_now() -> datetime:
    """デフォルトの時計。"""
    return datetime.now(UTC)


def _as_utc(moment: datetime) -> datetime:
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment.astimezone(UTC)


def today(clock: Clock = utc_now) -> datetime:
    """現在時刻のUTCの0時を返す。"""
    now = _as_utc(clock())
    return datetime(now.year, now.month, now.day, tzinfo=UTC)


def epoch_day(moment: datetime) -> int:
    """エポックからの経過日数を返す。"""
    return (_as_utc(moment).date() - _EPOCH).days


def encode_timestamp(moment: datetime) -> str:
    """日付を2文字にエンコードする。"""
    days = epoch_day(moment)
    return TIMESTAMP_ALPHABET[(days >> 5) & 0x1F] + TIMESTAMP_ALPHABET[days & 0x1F]


def decode_timestamp(timestamp: str, clock: Clock = utc_now) -> datetime:
    """2文字のタイムスタンプをUTCの0時にデコードする。

    Args:
        timestamp: エンコード済みのタイムスタンプ
        clock: 現在時刻の取得元

    Returns:
        現在の1024日周期内の日付

    Raises:
        InvalidTimestampError: アルファベット2文字でない場合
    """
    if timestamp is None or len(timestamp) != 2:
        raise InvalidTimestampError("Timestamp must have 2 characters")

    high = TIMESTAMP_ALPHABET.find(timestamp[0].upper())
    low = TIMESTAMP_ALPHABET.find(timestamp[1].upper())
    if high < 0 or low < 0:
        raise InvalidTimestampError(f"Invalid timestamp characters {timestamp!r}")

    midnight = today(clock)
    period_start = midnight - timedelta(days=epoch_day(midnight) % TIMESTAMP_PRECISION)
    return period_start + timedelta(days=(high << 5) | low)
