"""
内存用户仓储单元测试
"""
import pytest

from user_directory.domain.entities.user import User
from user_directory.infrastructure.persistence.repositories.memory_user_repository import (
    InMemoryUserRepository,
)


class TestInMemoryUserRepository:
    """InMemoryUserRepository 测试"""

    @pytest.mark.asyncio
    async def test_default_seed(self):
        """测试默认加载的用户及顺序"""
        repo = InMemoryUserRepository()

        users = await repo.find_all()

        assert [u.name for u in users] == ["Steve Rogers", "Tony Stark", "Carol Danvers"]
        assert [u.id for u in users] == [0, 1, 2]
        assert await repo.count() == 3

    @pytest.mark.asyncio
    async def test_find_by_id(self):
        repo = InMemoryUserRepository()

        assert await repo.find_by_id(1) == User(id=1, name="Tony Stark")
        assert await repo.find_by_id(42) is None

    @pytest.mark.asyncio
    async def test_custom_users(self):
        repo = InMemoryUserRepository([User(id=5, name="Wanda Maximoff")])

        assert await repo.count() == 1
        assert await repo.find_by_id(0) is None

    @pytest.mark.asyncio
    async def test_empty_directory(self):
        repo = InMemoryUserRepository([])

        assert await repo.find_all() == []
        assert await repo.count() == 0

    def test_duplicate_id_rejected(self):
        """测试重复 ID"""
        with pytest.raises(ValueError, match="Duplicate user id: 1"):
            InMemoryUserRepository([User(id=1, name="A"), User(id=1, name="B")])

    @pytest.mark.asyncio
    async def test_find_all_returns_copy(self):
        repo = InMemoryUserRepository()

        users = await repo.find_all()
        users.clear()

        assert await repo.count() == 3
