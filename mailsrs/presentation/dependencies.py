"""FastAPIの依存性注入設定。"""

from functools import lru_cache
from typing import Annotated

from fastapi import Depends

from ..application.services import SRSService
from ..application.use_cases import (
    ForwardAddressUseCase,
    ReverseAddressUseCase,
    SourceAddressUseCase,
)
from ..infrastructure.config.settings import get_settings


@lru_cache
def get_srs_service() -> SRSService:
    """共有のSRS書き換えサービスを取得する。

    Returns:
        SRSService: 設定から構築したSRS書き換えサービス
    """
    settings = get_settings()
    return SRSService(settings.srs_secret_key, settings.to_srs_options())


def get_forward_address_use_case(
    srs_service: Annotated[SRSService, Depends(get_srs_service)],
) -> ForwardAddressUseCase:
    """転送ユースケースを取得する。"""
    return ForwardAddressUseCase(srs_service)


def get_reverse_address_use_case(
    srs_service: Annotated[SRSService, Depends(get_srs_service)],
) -> ReverseAddressUseCase:
    """逆変換ユースケースを取得する。"""
    return ReverseAddressUseCase(srs_service)


def get_source_address_use_case() -> SourceAddressUseCase:
    """送信者取得ユースケースを取得する。"""
    return SourceAddressUseCase()
