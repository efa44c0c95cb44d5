"""
获取用户查询

定义获取用户详情的查询 DTO。
"""
from dataclasses import dataclass


@dataclass
class GetUserQuery:
    """获取用户查询"""
    user_id: int
