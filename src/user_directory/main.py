"""
服务启动入口

构建应用、绑定监听端口并运行 uvicorn。
"""
import argparse
import socket
import sys
from typing import Optional, Sequence

import uvicorn
from fastapi import FastAPI
from pydantic import ValidationError

from user_directory.infrastructure.config.settings import Settings, get_settings
from user_directory.infrastructure.logging import configure_logging, get_logger
from user_directory.interfaces.rest.main import create_app
from user_directory.shared.errors.infrastructure import ServerBindError

logger = get_logger(__name__)

LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def bind_socket(host: str, port: int) -> socket.socket:
    """
    创建并绑定 TCP 监听套接字

    在启动事件循环之前绑定，端口被占用时立即失败。

    Raises:
        ServerBindError: 绑定失败（端口占用、权限不足等）
    """
    family = socket.AF_INET6 if ":" in host else socket.AF_INET
    sock = socket.socket(family, socket.SOCK_STREAM)
    sock.setsockopt(socket.SOL_SOCKET, socket.SO_REUSEADDR, 1)
    try:
        sock.bind((host, port))
    except OSError as e:
        sock.close()
        logger.error("Failed to bind listening socket", host=host, port=port, error=str(e))
        raise ServerBindError(f"Cannot bind {host}:{port}: {e}", original_error=e) from e

    sock.set_inheritable(True)
    return sock


def build_server(settings: Settings, app: Optional[FastAPI] = None) -> uvicorn.Server:
    """创建 uvicorn 服务实例（不绑定端口）"""
    config = uvicorn.Config(
        app or create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        log_config=None,  # 日志由 configure_logging 统一配置
        access_log=False,  # 请求日志由 RequestLoggingMiddleware 输出
    )
    return uvicorn.Server(config)


def serve(settings: Optional[Settings] = None) -> None:
    """
    启动服务

    阻塞直到收到 SIGINT/SIGTERM。

    Raises:
        ServerBindError: 端口绑定失败
    """
    settings = settings or get_settings()
    configure_logging(
        log_level=settings.log_level,
        log_format=settings.log_format,
    )

    server = build_server(settings)
    sock = bind_socket(settings.host, settings.port)

    logger.info(
        "Server listening",
        host=settings.host,
        port=sock.getsockname()[1],
        environment=settings.environment,
    )
    try:
        server.run(sockets=[sock])
    finally:
        sock.close()
        logger.info("Server stopped")


def build_parser() -> argparse.ArgumentParser:
    """Build the command line parser"""
    parser = argparse.ArgumentParser(
        prog="user-directory",
        description="User Directory HTTP server",
    )
    parser.add_argument("--host", help="Host to bind (default: settings.host)")
    parser.add_argument("--port", type=int, help="Port to bind (default: settings.port)")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging level (default: settings.log_level)",
    )
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments"""
    return build_parser().parse_args(argv)


def resolve_settings(args: argparse.Namespace) -> Settings:
    """命令行参数覆盖环境配置"""
    overrides = {
        key: value
        for key, value in (
            ("host", args.host),
            ("port", args.port),
            ("log_level", args.log_level),
        )
        if value is not None
    }
    base = get_settings()
    return Settings.model_validate({**base.model_dump(), **overrides})


def entry_point(argv: Optional[Sequence[str]] = None) -> None:
    """Console script entry point"""
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        settings = resolve_settings(args)
    except ValidationError as e:
        parser.error("; ".join(
            f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}" for err in e.errors()
        ))

    try:
        serve(settings)
    except ServerBindError:
        sys.exit(1)
