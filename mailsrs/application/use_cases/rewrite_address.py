"""アドレス書き換えユースケース。"""

from pydantic import BaseModel, Field

from ...domain.value_objects import MailAddress
from ..services import SRSService


class AddressOutput(BaseModel):
    """書き換え後アドレスの出力DTO。

    Attributes:
        address: アドレス全体
        local_part: '@'より前の部分
        domain_part: '@'より後の部分
    """

    address: str = Field(..., description="アドレス全体")
    local_part: str = Field(..., description="ローカルパート")
    domain_part: str = Field(..., description="ドメインパート")

    @classmethod
    def from_domain(cls, address: MailAddress) -> "AddressOutput":
        """MailAddressから出力DTOを作成する。"""
        return cls(
            address=address.address,
            local_part=address.local_part,
            domain_part=address.domain_part,
        )


class ForwardAddressInput(BaseModel):
    """転送ユースケースの入力DTO。

    Attributes:
        address: 書き換えるメールアドレスまたはSRSアドレス
        forwarder: このフォワーダのドメイン
        shortcut: 常にSRS0アドレスを生成するかどうか（shortcut方式）
    """

    address: str = Field(..., description="メールアドレスまたはSRSアドレス")
    forwarder: str = Field(..., description="フォワーダのドメイン")
    shortcut: bool = Field(default=False, description="shortcut方式を使うかどうか")


class ForwardAddressOutput(AddressOutput):
    """転送ユースケースの出力DTO。"""

    rewritten: bool = Field(
        ..., description="アドレスが書き換えられたかどうか"
    )


class ForwardAddressUseCase:
    """転送するメールの返送先アドレスを書き換えるユースケース。"""

    def __init__(self, srs_service: SRSService) -> None:
        """ユースケースを初期化する。

        Args:
            srs_service: SRS書き換えサービス
        """
        self._srs_service = srs_service

    def execute(self, input_dto: ForwardAddressInput) -> ForwardAddressOutput:
        """アドレスを転送用に書き換える。

        Args:
            input_dto: 入力DTO

        Returns:
            出力DTO

        Raises:
            InvalidAddressError: アドレスまたはフォワーダが不正な場合
            InvalidHashError: ハッシュを生成できない場合
        """
        if input_dto.shortcut:
            result = self._srs_service.forward_shortcut(
                input_dto.address, input_dto.forwarder
            )
        else:
            result = self._srs_service.forward(input_dto.address, input_dto.forwarder)

        return ForwardAddressOutput(
            address=result.address,
            local_part=result.local_part,
            domain_part=result.domain_part,
            rewritten=result.address != input_dto.address.strip(),
        )


class ReverseAddressInput(BaseModel):
    """逆変換と送信者取得ユースケースの入力DTO。"""

    address: str = Field(..., description="SRSアドレス")


class ReverseAddressUseCase:
    """バウンスの宛先を1ホップ分逆変換するユースケース。"""

    def __init__(self, srs_service: SRSService) -> None:
        """ユースケースを初期化する。

        Args:
            srs_service: SRS書き換えサービス
        """
        self._srs_service = srs_service

    def execute(self, input_dto: ReverseAddressInput) -> AddressOutput:
        """SRSアドレスを逆変換する。

        Raises:
            InvalidAddressError: SRSアドレスでない場合
            InvalidHashError: ハッシュの検証に失敗した場合
            InvalidTimestampError: タイムスタンプが期限切れの場合
        """
        return AddressOutput.from_domain(self._srs_service.reverse(input_dto.address))


class SourceAddressUseCase:
    """SRSアドレスから検証せずに元の送信者を取り出すユースケース。"""

    def execute(self, input_dto: ReverseAddressInput) -> AddressOutput:
        """元の送信者を返す。

        Raises:
            InvalidAddressError: 解析できない、またはopaqueなアドレスの場合
        """
        return AddressOutput.from_domain(
            SRSService.as_source_address(input_dto.address)
        )
