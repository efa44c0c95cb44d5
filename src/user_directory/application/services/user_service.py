"""
用户应用服务

编排用户目录相关的用例。
"""
from typing import List, Optional

from user_directory.domain.repositories.user_repository import IUserRepository
from user_directory.application.queries.get_user import GetUserQuery
from user_directory.application.dtos.user_dto import UserDTO


class UserService:
    """
    用户应用服务

    编排用户列表、按 ID 查询等只读用例。
    """

    def __init__(
        self,
        user_repo: IUserRepository,
    ):
        self._user_repo = user_repo

    async def list_usernames(self) -> List[str]:
        """按目录顺序列出所有用户名"""
        users = await self._user_repo.find_all()
        return [u.name for u in users]

    async def get_user(self, query: GetUserQuery) -> Optional[UserDTO]:
        """
        获取用户用例

        用户不存在时返回 None，由调用方决定如何呈现缺失值。
        """
        user = await self._user_repo.find_by_id(query.user_id)
        if user is None:
            return None

        return UserDTO.from_entity(user)

    async def count_users(self) -> int:
        """统计用户总数"""
        return await self._user_repo.count()
