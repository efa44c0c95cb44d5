"""
JSON 编解码器

基于 pydantic TypeAdapter 的 JSON 编解码，支持 Optional 类型：
存在的值按原值序列化，缺失的值序列化为 null，字段不会被省略。
"""
from typing import Any, Optional

from pydantic import TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

from user_directory.shared.errors.infrastructure import CodecError


class JsonCodec:
    """
    JSON 编解码器

    按类型缓存 TypeAdapter；未指定类型时按运行时类型推断序列化方式。
    """

    def __init__(self, indent: Optional[int] = None):
        self._indent = indent
        self._adapters: dict[Any, TypeAdapter] = {}

    def _adapter(self, type_: Any) -> TypeAdapter:
        try:
            adapter = self._adapters.get(type_)
        except TypeError:
            # 不可哈希的类型注解不缓存
            return TypeAdapter(type_)

        if adapter is None:
            adapter = TypeAdapter(type_)
            self._adapters[type_] = adapter
        return adapter

    def encode(self, value: Any, type_: Any = None) -> bytes:
        """
        序列化为 JSON 字节串

        Args:
            value: 待序列化的值
            type_: 目标类型（如 Optional[User]），给定时先按该类型校验

        Raises:
            CodecError: 值不符合目标类型或无法序列化
        """
        adapter = self._adapter(Any if type_ is None else type_)
        try:
            if type_ is not None:
                value = adapter.validate_python(value)
            return adapter.dump_json(value, indent=self._indent, exclude_none=False)
        except ValidationError as e:
            raise CodecError(f"Value does not match {type_!r}: {e}", original_error=e) from e
        except PydanticSerializationError as e:
            raise CodecError(f"Unable to serialize value: {e}", original_error=e) from e

    def decode(self, data: str | bytes, type_: Any) -> Any:
        """
        将 JSON 文本解析为目标类型

        Optional 类型遇到 null 时返回 None。

        Raises:
            CodecError: JSON 格式错误或与目标类型不符
        """
        try:
            return self._adapter(type_).validate_json(data)
        except ValidationError as e:
            raise CodecError(f"Unable to decode {type_!r}: {e}", original_error=e) from e


default_codec = JsonCodec()
