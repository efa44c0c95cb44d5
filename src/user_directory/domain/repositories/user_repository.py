"""
用户仓储接口

定义用户查询的抽象接口（Port）。
"""
from abc import ABC, abstractmethod
from typing import List, Optional

from user_directory.domain.entities.user import User


class IUserRepository(ABC):
    """
    用户仓储接口

    这是领域层定义的 Port，由基础设施层实现 Adapter。
    """

    @abstractmethod
    async def find_by_id(self, user_id: int) -> Optional[User]:
        """根据 ID 查找用户"""
        pass

    @abstractmethod
    async def find_all(self) -> List[User]:
        """按目录顺序返回所有用户"""
        pass

    @abstractmethod
    async def count(self) -> int:
        """统计用户总数"""
        pass
