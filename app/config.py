# 读取 .env 配置，集中管理运行参数
from dataclasses import dataclass
import os
from typing import Optional
from dotenv import find_dotenv, load_dotenv


def _env(*names: str, default: Optional[str] = None) -> Optional[str]:
    # 按顺序取第一个非空变量，兼容 Spring 风格的变量名
    for name in names:
        value = os.getenv(name)
        if value:
            return value
    return default


@dataclass(frozen=True)
class Settings:
    DB_URL: str
    DB_USERNAME: str = ""
    DB_PASSWORD: str = ""
    APP_NAME: str = "DB Probe Service"
    DEBUG: bool = False
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"

    @classmethod
    def from_env(cls) -> "Settings":
        """
        启动时构造一次，之后只读。
        缺少 DB_URL 时拒绝启动。
        """
        load_dotenv(find_dotenv(usecwd=True))  # 启动时加载工作目录下的 .env

        db_url = _env("DB_URL", "SPRING_DATASOURCE_URL")
        if not db_url:
            raise RuntimeError("Missing DB_URL in .env")

        return cls(
            DB_URL=db_url,
            DB_USERNAME=_env("DB_USERNAME", "SPRING_DATASOURCE_USERNAME", default=""),
            DB_PASSWORD=_env("DB_PASSWORD", "SPRING_DATASOURCE_PASSWORD", default=""),
            APP_NAME=_env("APP_NAME", default="DB Probe Service"),
            DEBUG=_env("DEBUG", default="false").lower() == "true",
            HOST=_env("HOST", default="0.0.0.0"),
            PORT=int(_env("PORT", "SERVER_PORT", default="8080")),
            LOG_LEVEL=_env("LOG_LEVEL", default="INFO").upper(),
        )
