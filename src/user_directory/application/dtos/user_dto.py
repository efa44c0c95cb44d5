"""
用户 DTO

定义用户数据传输对象。
"""
from dataclasses import dataclass

from user_directory.domain.entities.user import User


@dataclass
class UserDTO:
    """用户数据传输对象"""
    id: int
    name: str

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        """从领域实体创建 DTO"""
        return cls(id=user.id, name=user.name)

