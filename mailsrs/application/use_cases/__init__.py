"""ユースケースパッケージ。"""

from .rewrite_address import (
    AddressOutput,
    ForwardAddressInput,
    ForwardAddressOutput,
    ForwardAddressUseCase,
    ReverseAddressInput,
    ReverseAddressUseCase,
    SourceAddressUseCase,
)

__all__ = [
    "AddressOutput",
    "ForwardAddressInput",
    "ForwardAddressOutput",
    "ForwardAddressUseCase",
    "ReverseAddressInput",
    "ReverseAddressUseCase",
    "SourceAddressUseCase",
]
