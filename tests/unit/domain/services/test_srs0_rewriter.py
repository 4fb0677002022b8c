"""Srs0Rewriterのテスト。"""

from datetime import timedelta

import pytest

from mailsrs.domain.exceptions import (
    InvalidAddressError,
    InvalidHashError,
    InvalidTimestampError,
)
from mailsrs.domain.services import Srs0Rewriter
from mailsrs.domain.value_objects import MailAddress, SRSOptions
from tests.fixtures.srs_fixtures import MAX_AGE, NOW, SECRET_KEY, fixed_clock


@pytest.fixture
def rewriter() -> Srs0Rewriter:
    """基準時刻に固定したSrs0Rewriterを返す。"""
    return Srs0Rewriter(SECRET_KEY, SRSOptions(lifetime=MAX_AGE), fixed_clock())


class TestSrs0RewriterForward:
    """Srs0Rewriter.forwardのテストクラス。"""

    def test_forward(self, rewriter: Srs0Rewriter) -> None:
        """通常のアドレスを変換できることを確認する。"""
        result = rewriter.forward(
            MailAddress.parse("user@example.com"), "srs.forward.com"
        )

        assert result.address == "SRS0=jA9R=Y6=example.com=user@srs.forward.com"
        assert result.domain_part == "srs.forward.com"

    def test_forward_with_separator(self) -> None:
        """設定したセパレータがキーワードの直後に入ることを確認する。"""
        rewriter = Srs0Rewriter(
            SECRET_KEY, SRSOptions(lifetime=MAX_AGE, separator="-"), fixed_clock()
        )
        result = rewriter.forward(
            MailAddress.parse("user@example.com"), "srs.forward.com"
        )

        assert result.address == "SRS0-jA9R=Y6=example.com=user@srs.forward.com"

    def test_forward_other_day(self) -> None:
        """タイムスタンプが時計に従うことを確認する。"""
        rewriter = Srs0Rewriter(
            SECRET_KEY,
            SRSOptions(lifetime=MAX_AGE),
            fixed_clock(NOW + timedelta(days=1)),
        )
        result = rewriter.forward(
            MailAddress.parse("user@example.com"), "srs.forward.com"
        )

        assert "=Y7=example.com=user@" in result.address


class TestSrs0RewriterReverse:
    """Srs0Rewriter.reverseのテストクラス。"""

    def test_reverse(self, rewriter: Srs0Rewriter) -> None:
        """元の送信者を復元できることを確認する。"""
        result = rewriter.reverse(
            MailAddress.parse("SRS0=ixj4=Y6=example.com=user2@srs.forward.com")
        )
        assert result == MailAddress.parse("user2@example.com")

    def test_reverse_opaque(self, rewriter: Srs0Rewriter) -> None:
        """opaqueなSRS0アドレスを逆変換できないことを確認する。"""
        with pytest.raises(InvalidAddressError):
            rewriter.reverse(MailAddress.parse("SRS0+xx1@srs.example.com"))

    def test_reverse_srs1(self, rewriter: Srs0Rewriter) -> None:
        """SRS1アドレスを受け付けないことを確認する。"""
        with pytest.raises(InvalidAddressError):
            rewriter.reverse(
                MailAddress.parse(
                    "SRS1=D1w/=srs.example.org==BInR=Y6=example.net=user"
                    "@srs.example.net"
                )
            )

    def test_reverse_invalid_hash(self, rewriter: Srs0Rewriter) -> None:
        """改ざんされたハッシュでエラーになることを確認する。"""
        with pytest.raises(InvalidHashError):
            rewriter.reverse(
                MailAddress.parse("SRS0=ixj5=Y6=example.com=user2@srs.forward.com")
            )

    def test_reverse_expired(self, rewriter: Srs0Rewriter) -> None:
        """正規だが期限切れのアドレスでエラーになることを確認する。"""
        with pytest.raises(InvalidTimestampError):
            rewriter.reverse(
                MailAddress.parse("SRS0=R7m8=G3=example.net=user@srs.example.org")
            )

    def test_hash_checked_before_timestamp(self, rewriter: Srs0Rewriter) -> None:
        """改ざんかつ期限切れのアドレスでハッシュエラーになることを確認する。"""
        with pytest.raises(InvalidHashError):
            rewriter.reverse(
                MailAddress.parse("SRS0=R7m9=G3=example.net=user@srs.example.org")
            )

    def test_reverse_undecodable_timestamp(self, rewriter: Srs0Rewriter) -> None:
        """ハッシュが正しく、タイムスタンプがアルファベット外の場合を確認する。"""
        forged = rewriter.calculate_hash(4, "Y1", "example.com", "user")

        with pytest.raises(InvalidTimestampError):
            rewriter.reverse(
                MailAddress.parse(f"SRS0={forged}=Y1=example.com=user@srs.forward.com")
            )
