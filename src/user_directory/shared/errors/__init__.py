from user_directory.shared.errors.infrastructure import (
    InfrastructureError,
    ServerBindError,
    CodecError,
)

__all__ = [
    "InfrastructureError",
    "ServerBindError",
    "CodecError",
]
