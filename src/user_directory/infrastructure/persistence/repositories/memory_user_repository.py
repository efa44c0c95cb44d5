"""
内存用户仓储

IUserRepository 的内存实现，启动时一次性加载，之后只读。
"""
from typing import Iterable, List, Optional

from user_directory.domain.entities.user import User
from user_directory.domain.repositories.user_repository import IUserRepository
from user_directory.infrastructure.logging import get_logger
from user_directory.infrastructure.persistence.seed.default_data import get_default_users

logger = get_logger(__name__)


class InMemoryUserRepository(IUserRepository):
    """
    内存用户仓储

    保持插入顺序；不提供写操作，因此并发读取无需加锁。
    """

    def __init__(self, users: Optional[Iterable[User]] = None):
        if users is None:
            users = get_default_users()

        self._users: dict[int, User] = {}
        for user in users:
            if user.id in self._users:
                raise ValueError(f"Duplicate user id: {user.id}")
            self._users[user.id] = user

        logger.debug("User directory loaded", count=len(self._users))

    async def find_by_id(self, user_id: int) -> Optional[User]:
        return self._users.get(user_id)

    async def find_all(self) -> List[User]:
        return list(self._users.values())

    async def count(self) -> int:
        return len(self._users)
