# app/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI

from app.config import Settings
from app.probe import describe_target

# 路由模块
from app.routers import health_router

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    settings = app.state.settings
    logger.info("%s probing %s", settings.APP_NAME, describe_target(settings))
    yield


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    # 配置只在这里构造一次，之后通过依赖注入传给路由
    settings = settings or Settings.from_env()
    configure_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.APP_NAME,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings

    # 路由注册
    app.include_router(health_router.router)

    return app


if __name__ == "__main__":
    settings = Settings.from_env()
    uvicorn.run(create_app(settings), host=settings.HOST, port=settings.PORT)
