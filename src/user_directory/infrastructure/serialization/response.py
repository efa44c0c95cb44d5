"""
基于 JsonCodec 的 JSON 响应类

create_app 通过 with_codec 生成绑定了应用 codec 的子类，并注册为默认响应类，
使所有 JSON 响应都经过同一个编解码器。
"""
from typing import Any

from fastapi.responses import JSONResponse

from user_directory.infrastructure.serialization.json_codec import JsonCodec, default_codec


class CodecJSONResponse(JSONResponse):
    """使用 JsonCodec 渲染内容的 JSONResponse"""

    codec: JsonCodec = default_codec

    @classmethod
    def with_codec(cls, codec: JsonCodec) -> type["CodecJSONResponse"]:
        """返回绑定指定 codec 的响应子类"""
        return type(cls.__name__, (cls,), {"codec": codec})

    def render(self, content: Any) -> bytes:
        return self.codec.encode(content)
