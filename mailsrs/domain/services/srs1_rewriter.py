"""SRS1（guarded方式の複数ホップ）の書き換えサービス。"""

from ..exceptions import InvalidAddressError, InvalidHashError, InvalidTimestampError
from ..value_objects import MailAddress, Srs0Address, Srs1Address, parse_srs_address
from .address_rewriter import AddressRewriter


class Srs1Rewriter(AddressRewriter):
    """SRS0/SRS1アドレスをSRS1の層で包み、また元に戻す。

    記録するのは最初のフォワーダと元のペイロードのみ。
    SRS1を再度包む場合は外側のフォワーダだけが入れ替わる。
    """

    def forward(self, address: MailAddress, forwarder: str) -> MailAddress:
        """SRS0またはSRS1アドレスをフォワーダのSRS1アドレスに変換する。"""
        srs_address = parse_srs_address(address, self.options.separator)
        if isinstance(srs_address, Srs0Address):
            original_forwarder = srs_address.forwarder
        elif isinstance(srs_address, Srs1Address):
            original_forwarder = srs_address.original_forwarder
        else:
            raise InvalidAddressError("The source address must be a SRS0 or SRS1")

        return Srs1Address(
            hash=self.calculate_hash(
                self.options.hash_length,
                original_forwarder,
                srs_address.opaque_part,
            ),
            original_forwarder=original_forwarder,
            opaque_part=srs_address.opaque_part,
            forwarder=forwarder,
            separator=self.options.separator,
        ).to_mail_address()

    def reverse(self, address: MailAddress) -> MailAddress:
        """SRS1の層を外し、元のフォワーダのSRS0アドレスを返す。"""
        srs_address = parse_srs_address(address, self.options.separator)
        if not isinstance(srs_address, Srs1Address):
            raise InvalidAddressError("Not an SRS1 address")

        if self.is_invalid_hash(srs_address):
            raise InvalidHashError(
                f"Invalid hash {srs_address.hash} for address {srs_address}"
            )

        if (
            self.options.try_verify_srs1_time
            and srs_address.timestamp is not None
            and not self.is_valid_timestamp(
                self.decode_timestamp(srs_address.timestamp)
            )
        ):
            raise InvalidTimestampError(
                f"Invalid timestamp {srs_address.timestamp} for address {srs_address}"
            )

        return Srs0Address(
            opaque_part=srs_address.opaque_part,
            forwarder=srs_address.original_forwarder,
            separator=self.options.separator,
        ).to_mail_address()
