# 健康检查路由
from fastapi import APIRouter, Depends
from fastapi.responses import PlainTextResponse

from app.config import Settings
from app.deps import get_connector, get_settings
from app.probe import Connector, check_database

router = APIRouter(tags=["health"])


@router.get("/health", response_class=PlainTextResponse)
def health() -> str:
    # 存活检查，不依赖数据库
    return "OK"


@router.get("/dbtest", response_class=PlainTextResponse)
def dbtest(
    settings: Settings = Depends(get_settings),
    connector: Connector = Depends(get_connector),
) -> str:
    """
    数据库连通性检查；状态码恒为 200，结果只体现在响应文本中。
    """
    return check_database(settings, connector).text
