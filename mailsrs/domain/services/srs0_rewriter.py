"""SRS0（1ホップ）の書き換えサービス。"""

from ..exceptions import InvalidAddressError, InvalidHashError, InvalidTimestampError
from ..value_objects import MailAddress, SourceFields, Srs0Address, parse_srs_address
from .address_rewriter import AddressRewriter


class Srs0Rewriter(AddressRewriter):
    """通常のアドレスとSRS0アドレスを相互に書き換える。"""

    def forward(self, address: MailAddress, forwarder: str) -> MailAddress:
        """通常のアドレスをフォワーダのSRS0アドレスに変換する。"""
        timestamp = self.encode_timestamp(self.today())
        source = SourceFields(
            hash=self.calculate_hash(
                self.options.hash_length,
                timestamp,
                address.domain_part,
                address.local_part,
            ),
            timestamp=timestamp,
            hostname=address.domain_part,
            local_part=address.local_part,
        )
        return Srs0Address.from_source(
            source, forwarder, self.options.separator
        ).to_mail_address()

    def reverse(self, address: MailAddress) -> MailAddress:
        """SRS0アドレスから元の送信者を復元する。

        ハッシュはタイムスタンプより先に検証する。
        """
        srs_address = parse_srs_address(address, self.options.separator)
        if not isinstance(srs_address, Srs0Address):
            raise InvalidAddressError("Not an SRS0 address")

        if self.is_invalid_hash(srs_address):
            raise InvalidHashError(
                f"Invalid hash for address {srs_address.opaque_part} "
                f"{srs_address.forwarder}"
            )

        source = srs_address.source
        if not self.is_valid_timestamp(self.decode_timestamp(source.timestamp)):
            raise InvalidTimestampError(
                f"Invalid timestamp {source.timestamp} for address {srs_address}"
            )
        return source.source_address()
