"""
用户实体

定义目录中的用户。
"""
from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    """
    用户实体

    目录启动后不再修改，因此实体不可变。
    """
    id: int
    name: str

    def __post_init__(self):
        """初始化后验证"""
        if self.id < 0:
            raise ValueError("id must be non-negative")
        if not self.name:
            raise ValueError("name cannot be empty")
