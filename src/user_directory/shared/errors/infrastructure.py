"""
基础设施错误

定义基础设施层的错误类型。
"""
from typing import Optional


class InfrastructureError(Exception):
    """基础设施错误基类"""

    def __init__(
        self,
        message: str,
        original_error: Optional[Exception] = None
    ):
        self.message = message
        self.original_error = original_error
        super().__init__(self.message)


class ServerBindError(InfrastructureError):
    """监听端口绑定错误"""
    pass


class CodecError(InfrastructureError):
    """JSON 编解码错误"""
    pass
