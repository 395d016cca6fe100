# app/deps.py

from fastapi import Request

from app.config import Settings
from app.db import open_connection
from app.probe import Connector


def get_settings(request: Request) -> Settings:
    """
    返回启动时构造的配置（挂在 app.state 上，只读）。
    """
    return request.app.state.settings


def get_connector() -> Connector:
    # 测试中可通过 dependency_overrides 替换
    return open_connection
