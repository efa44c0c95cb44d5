"""
依赖注入配置

配置和提供应用所需的所有依赖项。
"""
from fastapi import FastAPI, Request

from user_directory.application.services.user_service import UserService
from user_directory.domain.repositories.user_repository import IUserRepository
from user_directory.infrastructure.logging import get_logger
from user_directory.infrastructure.persistence.repositories.memory_user_repository import (
    InMemoryUserRepository,
)

logger = get_logger(__name__)


def initialize_dependencies(
    app: FastAPI,
    user_repo: IUserRepository | None = None,
) -> None:
    """初始化所有依赖项并存储到应用状态中"""
    if user_repo is None:
        user_repo = InMemoryUserRepository()

    app.state.user_repo = user_repo
    app.state.user_service = UserService(user_repo=user_repo)
    logger.debug("Dependencies initialized", repository=type(user_repo).__name__)


async def cleanup_dependencies(app: FastAPI) -> None:
    """清理依赖项"""
    app.state.user_service = None
    app.state.user_repo = None


def get_user_service(request: Request) -> UserService:
    """获取用户服务"""
    return request.app.state.user_service
