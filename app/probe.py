import logging
from typing import Callable, ContextManager, Optional

from sqlalchemy.exc import ArgumentError, DBAPIError

from app.config import Settings
from app.db import build_url, open_connection
from app.models import ProbeResult

logger = logging.getLogger(__name__)

Connector = Callable[[str, str, str], ContextManager[Optional[object]]]


def describe_target(settings: Settings) -> str:
    # 日志中隐藏密码
    try:
        return build_url(settings.DB_URL).render_as_string(hide_password=True)
    except (ArgumentError, ValueError):
        return "<invalid DB_URL>"


def error_message(exc: Exception) -> str:
    # DBAPIError 包装了驱动原始异常，优先取驱动消息
    source = exc.orig if isinstance(exc, DBAPIError) and exc.orig is not None else exc
    message = str(source).strip()
    return message or type(source).__name__


def check_database(settings: Settings, connector: Connector = open_connection) -> ProbeResult:
    """
    建立一次数据库连接并立即检查：
      - 连接打开           -> SUCCESS
      - 连接为空或已关闭   -> FAILED
      - 建立连接抛出异常   -> ERROR（附驱动消息，不向上抛出）
    无论哪种结果，连接都在返回前释放。
    """
    try:
        with connector(settings.DB_URL, settings.DB_USERNAME, settings.DB_PASSWORD) as conn:
            if conn is not None and not conn.closed:
                result = ProbeResult.success()
            else:
                result = ProbeResult.failed()
    except Exception as e:
        logger.warning("DB probe against %s failed: %s", describe_target(settings), e)
        return ProbeResult.error(error_message(e))

    logger.debug("DB probe against %s: %s", describe_target(settings), result.status.value)
    return result
