"""
FastAPI 主应用

用户目录服务的 FastAPI 应用入口。
"""
import time
from contextlib import asynccontextmanager
from typing import AsyncGenerator, Optional

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse, PlainTextResponse

from user_directory.infrastructure.config.settings import Settings, get_settings
from user_directory.infrastructure.dependencies import (
    cleanup_dependencies,
    initialize_dependencies,
)
from user_directory.infrastructure.logging import get_logger
from user_directory.infrastructure.serialization import (
    CodecJSONResponse,
    JsonCodec,
    default_codec,
)
from user_directory.interfaces.rest.api import health, users

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """
    应用生命周期管理

    依赖项在 create_app 中创建，这里记录服务启动时间、输出启动日志并在关闭时清理。
    """
    app.state.started_at = time.time()
    user_count = await app.state.user_service.count_users()
    logger.info("Starting User Directory", users=user_count)

    yield

    logger.info("Shutting down User Directory")
    await cleanup_dependencies(app)


def create_app(
    settings: Optional[Settings] = None,
    codec: Optional[JsonCodec] = None,
) -> FastAPI:
    """
    创建 FastAPI 应用

    使用工厂模式创建应用，便于测试和配置。
    所有 JSON 响应默认经由绑定了 codec 的 CodecJSONResponse 渲染。
    """
    settings = settings or get_settings()
    response_class = CodecJSONResponse.with_codec(codec or default_codec)

    app = FastAPI(
        title=settings.app_name,
        description="只读用户目录 API",
        version=settings.app_version,
        debug=settings.debug,
        default_response_class=response_class,
        lifespan=lifespan,
    )
    # 未经过 lifespan 的应用（如测试中的 ASGITransport）以创建时间为准
    app.state.started_at = time.time()

    initialize_dependencies(app)

    _register_exception_handlers(app, response_class)
    _register_middleware(app)
    _register_routes(app)

    return app


def _register_exception_handlers(
    app: FastAPI,
    response_class: type[CodecJSONResponse],
) -> None:
    """注册异常处理器"""

    @app.exception_handler(Exception)
    async def global_exception_handler(
        request: Request,
        exc: Exception
    ) -> JSONResponse:
        """全局异常处理"""
        logger.error(
            "Unhandled exception",
            path=request.url.path,
            method=request.method,
            error=str(exc),
            exc_info=exc,
        )
        return response_class(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={
                "error": "Internal Server Error",
                "message": "An unexpected error occurred",
                "detail": str(exc) if app.debug else None,
            },
        )


def _register_routes(app: FastAPI) -> None:
    """注册路由"""
    app.include_router(health.router)
    app.include_router(users.router)

    @app.get("/", tags=["root"], response_class=PlainTextResponse)
    async def root() -> str:
        """根端点"""
        return "Hello World"


def _register_middleware(app: FastAPI) -> None:
    """注册中间件"""
    from user_directory.interfaces.rest.middleware import RequestLoggingMiddleware

    app.add_middleware(RequestLoggingMiddleware)
