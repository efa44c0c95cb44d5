"""
用户 REST API 路由

定义用户目录相关的 HTTP 端点。
"""
from typing import List

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from user_directory.application.dtos.user_dto import UserDTO
from user_directory.application.queries.get_user import GetUserQuery
from user_directory.application.services.user_service import UserService
from user_directory.infrastructure.dependencies import get_user_service
from user_directory.infrastructure.logging import get_logger
from user_directory.interfaces.rest.schemas.response import UserResponse

logger = get_logger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("", response_model=List[str])
async def list_usernames(
    service: UserService = Depends(get_user_service)
):
    """按目录顺序列出所有用户名"""
    return await service.list_usernames()


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    responses={200: {"content": {"text/html": {}}, "description": "User, or a Not Found page"}},
)
async def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service)
):
    """
    获取用户详情

    - **user_id**: 用户 ID（整数）

    用户不存在时返回 200 text/html 页面 "Not Found"，与既有客户端保持兼容。
    """
    user_dto = await service.get_user(GetUserQuery(user_id=user_id))
    if user_dto is None:
        logger.info("User not found", user_id=user_id)
        return HTMLResponse("Not Found")

    return _map_dto_to_response(user_dto)


def _map_dto_to_response(dto: UserDTO) -> UserResponse:
    """将 UserDTO 映射为 UserResponse"""
    return UserResponse(id=dto.id, name=dto.name)
