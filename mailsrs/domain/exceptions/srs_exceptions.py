"""SRS書き換え関連の例外定義。"""

from .base import DomainException


class SRSException(DomainException):
    """SRS書き換えの基底例外クラス。"""

    pass


class InvalidAddressError(SRSException):
    """アドレスまたはフォワーダが不正な場合の例外。"""

    def __init__(self, message: str = "Invalid address") -> None:
        """例外を初期化する。

        Args:
            message: エラーメッセージ
        """
        super().__init__(message)


class InvalidHashError(SRSException):
    """SRSアドレスのハッシュを検証できない場合の例外。"""

    def __init__(self, message: str = "Invalid hash") -> None:
        """例外を初期化する。

        Args:
            message: エラーメッセージ
        """
        super().__init__(message)


class InvalidTimestampError(SRSException):
    """SRSタイムスタンプをデコードできない、または期限切れの場合の例外。"""

    def __init__(self, message: str = "Invalid timestamp") -> None:
        """例外を初期化する。

        Args:
            message: エラーメッセージ
        """
        super().__init__(message)


class InvalidStateError(SRSException):
    """内部の不変条件が破られた場合の例外。

    入力の誤りではなく、プログラムまたは設定の不備を表す。
    """

    def __init__(self, message: str = "Invalid internal state") -> None:
        """例外を初期化する。

        Args:
            message: エラーメッセージ
        """
        super().__init__(message)
