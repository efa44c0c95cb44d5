from user_directory.interfaces.rest.api import health, users

__all__ = ["health", "users"]
