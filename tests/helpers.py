"""
共享测试工具

提供通用的测试数据和 mock 工具，减少测试代码重复。
"""
from unittest.mock import Mock, AsyncMock

from user_directory.domain.entities.user import User


def create_mock_user(user_id: int = 7, name: str = "Natasha Romanoff") -> User:
    """创建测试用用户实体"""
    return User(id=user_id, name=name)


def create_mock_user_repository(users=None) -> Mock:
    """
    创建模拟用户仓储

    Args:
        users: 仓储返回的用户列表，默认为空

    Returns:
        方法均为 AsyncMock 的仓储
    """
    users = list(users or [])
    repo = Mock()
    repo.find_all = AsyncMock(return_value=users)
    repo.find_by_id = AsyncMock(
        side_effect=lambda user_id: next((u for u in users if u.id == user_id), None)
    )
    repo.count = AsyncMock(return_value=len(users))
    return repo
