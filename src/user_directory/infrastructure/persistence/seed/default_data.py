"""
默认数据定义

定义目录启动时加载的默认用户。
列表顺序即 /users 的返回顺序。
"""
from typing import List

from user_directory.domain.entities.user import User


def get_default_users() -> List[User]:
    """
    获取默认用户列表

    Returns:
        默认用户列表
    """
    return [
        User(id=0, name="Steve Rogers"),
        User(id=1, name="Tony Stark"),
        User(id=2, name="Carol Danvers"),
    ]
