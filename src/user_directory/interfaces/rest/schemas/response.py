"""
REST API 响应模式

定义 FastAPI 的响应 Pydantic 模型。
"""
from pydantic import BaseModel


class UserResponse(BaseModel):
    """用户响应"""
    id: int
    name: str


class HealthResponse(BaseModel):
    """健康检查响应"""
    status: str
    version: str
    uptime: float
    users: int
