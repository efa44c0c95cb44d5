from user_directory.infrastructure.serialization.json_codec import JsonCodec, default_codec
from user_directory.infrastructure.serialization.response import CodecJSONResponse

__all__ = [
    "JsonCodec",
    "default_codec",
    "CodecJSONResponse",
]
