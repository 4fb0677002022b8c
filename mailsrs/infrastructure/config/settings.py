"""アプリケーション設定管理。"""

import warnings
from datetime import timedelta
from functools import lru_cache

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from ...domain.value_objects import SRSOptions


class Settings(BaseSettings):
    """アプリケーション設定。

    環境変数と``.env``ファイルから設定を読み込み、バリデーションを行う。
    """

    # SRS Configuration
    srs_secret_key: str = Field(
        default="",
        description="SRSアドレスのHMAC署名用の秘密鍵",
        validate_default=True,
    )
    srs_lifetime_days: int = Field(
        default=30, ge=1, description="SRSタイムスタンプの有効日数"
    )
    srs_always_rewrite: bool = Field(
        default=False,
        description="フォワーダがアドレスのドメインと同じでも書き換える",
    )
    srs_separator: str = Field(
        default="=", description="SRS0/SRS1キーワード直後のセパレータ"
    )
    srs_hash_length: int = Field(
        default=4, ge=1, le=28, description="生成するアドレスのハッシュ長"
    )
    srs_hash_min: int = Field(
        default=4, ge=1, le=28, description="有効とみなす最小のハッシュ長"
    )
    srs_try_verify_srs1_time: bool = Field(
        default=False,
        description="可能な場合にSRS1内側のタイムスタンプを検証する",
    )
    srs_disable_timestamp_validation: bool = Field(
        default=False, description="タイムスタンプ検証を無効化（テスト専用）"
    )

    # Application Configuration
    debug: bool = Field(default=False, description="デバッグモード")
    log_level: str = Field(default="INFO", description="ログレベル")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("srs_separator")
    @classmethod
    def validate_srs_separator(cls, v: str) -> str:
        """SRSセパレータのバリデーション。"""
        if v not in SRSOptions.ALLOWED_SEPARATORS:
            raise ValueError(
                f"Invalid SRS separator: {v!r}. "
                f"Must be one of {sorted(SRSOptions.ALLOWED_SEPARATORS)}"
            )
        return v

    @field_validator("srs_secret_key")
    @classmethod
    def validate_srs_secret_key(cls, v: str) -> str:
        """SRS秘密鍵のバリデーション。"""
        if not v.strip():
            warnings.warn(
                "SRS_SECRET_KEY is not set, addresses can't be rewritten!",
                UserWarning,
                stacklevel=2,
            )
        return v

    @field_validator("srs_disable_timestamp_validation")
    @classmethod
    def validate_srs_disable_timestamp_validation(cls, v: bool) -> bool:
        """タイムスタンプ検証無効化のバリデーション。"""
        if v:
            warnings.warn(
                "SRS timestamp validation is disabled. "
                "Never use this in production!",
                UserWarning,
                stacklevel=2,
            )
        return v

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """ログレベルのバリデーション。"""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            raise ValueError(f"Invalid log level: {v}. Must be one of {valid_levels}")
        return v_upper

    def to_srs_options(self) -> SRSOptions:
        """SRS書き換えエンジンの設定を作成する。"""
        return SRSOptions(
            lifetime=timedelta(days=self.srs_lifetime_days),
            always_rewrite=self.srs_always_rewrite,
            separator=self.srs_separator,
            hash_length=self.srs_hash_length,
            hash_min=self.srs_hash_min,
            try_verify_srs1_time=self.srs_try_verify_srs1_time,
            disable_timestamp_validation=self.srs_disable_timestamp_validation,
        )


@lru_cache
def get_settings() -> Settings:
    """設定のシングルトンインスタンスを取得する。

    Returns:
        Settings: アプリケーション設定
    """
    return Settings()
