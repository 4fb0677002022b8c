"""ログ設定。"""

import logging

from .config.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(settings: Settings) -> logging.Logger:
    """設定に従ってパッケージのロガーを構成する。

    2回目以降の呼び出しではログレベルのみ更新する。

    Args:
        settings: アプリケーション設定

    Returns:
        構成済みの``mailsrs``ロガー
    """
    logger = logging.getLogger("mailsrs")
    logger.setLevel("DEBUG" if settings.debug else settings.log_level)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)

    return logger
