"""SRS書き換えAPIエンドポイント。

アドレスの転送、逆変換、送信者取得をRESTful APIとして提供する。
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, Field

from ....application.use_cases import (
    AddressOutput,
    ForwardAddressInput,
    ForwardAddressOutput,
    ForwardAddressUseCase,
    ReverseAddressInput,
    ReverseAddressUseCase,
    SourceAddressUseCase,
)
from ....domain.exceptions import (
    InvalidAddressError,
    InvalidHashError,
    InvalidStateError,
    InvalidTimestampError,
    SRSException,
)
from ...dependencies import (
    get_forward_address_use_case,
    get_reverse_address_use_case,
    get_source_address_use_case,
)

router = APIRouter(prefix="/srs", tags=["SRS"])


class ForwardRequest(BaseModel):
    """転送リクエストのDTO。

    Attributes:
        address: 書き換えるアドレス
        forwarder: このフォワーダのドメイン
        shortcut: shortcut方式を使うかどうか
    """

    address: str = Field(
        ...,
        min_length=1,
        description="メールアドレスまたはSRSアドレス",
        examples=["user@example.com"],
    )
    forwarder: str = Field(
        ...,
        min_length=1,
        description="フォワーダのドメイン",
        examples=["srs.forward.com"],
    )
    shortcut: bool = Field(
        default=False, description="常にSRS0アドレスを生成するかどうか"
    )


class AddressRequest(BaseModel):
    """SRSアドレスを1つ受け取るリクエストのDTO。"""

    address: str = Field(
        ...,
        min_length=1,
        description="SRSアドレス",
        examples=["SRS0=jA9R=Y6=example.com=user@srs.forward.com"],
    )


class AddressResponse(BaseModel):
    """アドレスレスポンスのDTO。"""

    address: str = Field(..., description="アドレス全体")
    local_part: str = Field(..., description="ローカルパート")
    domain_part: str = Field(..., description="ドメインパート")

    @classmethod
    def from_output(cls, output: AddressOutput) -> "AddressResponse":
        """ユースケースの出力からレスポンスを作成する。"""
        return cls(
            address=output.address,
            local_part=output.local_part,
            domain_part=output.domain_part,
        )


class ForwardResponse(AddressResponse):
    """転送レスポンスのDTO。"""

    rewritten: bool = Field(..., description="アドレスが書き換えられたかどうか")


class ErrorResponse(BaseModel):
    """エラーレスポンスのDTO。"""

    detail: str = Field(..., description="エラーメッセージ")


ERROR_RESPONSES: dict[int | str, dict] = {
    400: {"description": "不正なアドレス", "model": ErrorResponse},
    422: {"description": "ハッシュまたはタイムスタンプが不正", "model": ErrorResponse},
    500: {"description": "内部エラー", "model": ErrorResponse},
}


def _to_http_exception(error: SRSException) -> HTTPException:
    """SRSの例外をHTTPエラーに変換する。"""
    if isinstance(error, InvalidAddressError):
        status_code = status.HTTP_400_BAD_REQUEST
    elif isinstance(error, (InvalidHashError, InvalidTimestampError)):
        status_code = status.HTTP_422_UNPROCESSABLE_ENTITY
    else:
        status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    if isinstance(error, InvalidStateError):
        return HTTPException(status_code=status_code, detail="Internal SRS error")
    return HTTPException(status_code=status_code, detail=str(error))


@router.post(
    "/forward",
    response_model=ForwardResponse,
    status_code=status.HTTP_200_OK,
    summary="返送先アドレスを転送用に書き換える",
    responses=ERROR_RESPONSES,
)
async def forward_address(
    request: ForwardRequest,
    use_case: Annotated[ForwardAddressUseCase, Depends(get_forward_address_use_case)],
) -> ForwardResponse:
    """返送先アドレスを書き換える。

    Args:
        request: 転送リクエスト
        use_case: 転送ユースケース

    Returns:
        ForwardResponse: 書き換え後のアドレス

    Raises:
        HTTPException: アドレスを書き換えられない場合
    """
    try:
        output: ForwardAddressOutput = use_case.execute(
            ForwardAddressInput(
                address=request.address,
                forwarder=request.forwarder,
                shortcut=request.shortcut,
            )
        )
    except SRSException as e:
        raise _to_http_exception(e) from e

    return ForwardResponse(
        address=output.address,
        local_part=output.local_part,
        domain_part=output.domain_part,
        rewritten=output.rewritten,
    )


@router.post(
    "/reverse",
    response_model=AddressResponse,
    status_code=status.HTTP_200_OK,
    summary="SRSアドレスを1ホップ分逆変換する",
    responses=ERROR_RESPONSES,
)
async def reverse_address(
    request: AddressRequest,
    use_case: Annotated[ReverseAddressUseCase, Depends(get_reverse_address_use_case)],
) -> AddressResponse:
    """SRSアドレスを逆変換する。

    Raises:
        HTTPException: アドレスが不正、改ざん済み、または期限切れの場合
    """
    try:
        output = use_case.execute(ReverseAddressInput(address=request.address))
    except SRSException as e:
        raise _to_http_exception(e) from e

    return AddressResponse.from_output(output)


@router.post(
    "/source",
    response_model=AddressResponse,
    status_code=status.HTTP_200_OK,
    summary="SRSアドレスから元の送信者を取り出す",
    responses=ERROR_RESPONSES,
)
async def source_address(
    request: AddressRequest,
    use_case: Annotated[SourceAddressUseCase, Depends(get_source_address_use_case)],
) -> AddressResponse:
    """ハッシュとタイムスタンプを検証せずに元の送信者を返す。

    Raises:
        HTTPException: 解析できない、またはopaqueなアドレスの場合
    """
    try:
        output = use_case.execute(ReverseAddressInput(address=request.address))
    except SRSException as e:
        raise _to_http_exception(e) from e

    return AddressResponse.from_output(output)
