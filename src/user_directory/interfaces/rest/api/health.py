"""
健康检查 REST API 路由
"""
import time

from fastapi import APIRouter, Depends, Request

from user_directory import __version__
from user_directory.application.services.user_service import UserService
from user_directory.infrastructure.dependencies import get_user_service
from user_directory.interfaces.rest.schemas.response import HealthResponse

router = APIRouter(prefix="/health", tags=["health"])


@router.get("", response_model=HealthResponse)
async def health_check(
    request: Request,
    service: UserService = Depends(get_user_service)
) -> HealthResponse:
    """
    健康检查端点

    返回服务状态、自服务启动以来的运行时间和目录中的用户数。
    """
    return HealthResponse(
        status="healthy",
        version=__version__,
        uptime=time.time() - request.app.state.started_at,
        users=await service.count_users(),
    )
