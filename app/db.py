# 数据库连接：每次探测单独建立、用完即释放，不使用连接池
from contextlib import contextmanager
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import URL, Connection, make_url
from sqlalchemy.pool import NullPool

JDBC_PREFIX = "jdbc:"


def build_url(raw: str, username: str = "", password: str = "") -> URL:
    """
    把配置中的连接串转成 SQLAlchemy URL：
      - 兼容 jdbc:postgresql://... 形式，去掉 jdbc: 前缀
      - 配置了用户名/密码时覆盖 URL 中自带的凭据
    """
    if raw.startswith(JDBC_PREFIX):
        raw = raw[len(JDBC_PREFIX):]
    url = make_url(raw)
    if username:
        url = url.set(username=username)
    if password:
        url = url.set(password=password)
    return url


@contextmanager
def open_connection(raw_url: str, username: str = "", password: str = "") -> Iterator[Connection]:
    # 连接失败时直接抛出驱动异常，由调用方处理
    engine = create_engine(build_url(raw_url, username, password), poolclass=NullPool)
    try:
        with engine.connect() as conn:
            yield conn
    finally:
        engine.dispose()
