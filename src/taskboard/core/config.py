"""配置常量模块 -- 可通过环境变量覆盖

包含 RPC 监听端口、数据库连接串以及标题长度限制。
"""

import os
from pathlib import Path

import structlog

log = structlog.get_logger()

DEFAULT_SERVER_PORT: int = 2022

DEFAULT_DATABASE_URL: str = "sqlite:///data/sqlite/taskboard.db"

# 任务标题最大长度（仅在 RPC 边界校验）
MAX_TITLE_LENGTH: int = 500

_SQLITE_PREFIX = "sqlite:///"


def get_server_port() -> int:
    """获取 RPC 监听端口，非法值回退为默认端口"""
    val = os.environ.get("SERVER_PORT")
    if not val:
        return DEFAULT_SERVER_PORT
    try:
        return int(val)
    except ValueError:
        log.warning(
            "invalid_port_config",
            env_var="SERVER_PORT",
            value=val,
            fallback=DEFAULT_SERVER_PORT,
        )
        return DEFAULT_SERVER_PORT


def get_database_url() -> str:
    """获取数据库连接串"""
    return os.environ.get("DATABASE_URL", DEFAULT_DATABASE_URL)


def resolve_db_path(database_url: str) -> str:
    """将连接串解析为 aiosqlite 可用的数据库路径

    支持的形式：
        sqlite:///relative/path.db   -> relative/path.db
        sqlite:////absolute/path.db  -> /absolute/path.db
        :memory: / sqlite:///:memory: -> :memory:
        裸文件路径                   -> 原样返回

    Raises:
        ValueError: 不支持的连接串 scheme
    """
    if database_url.startswith(_SQLITE_PREFIX):
        path = database_url[len(_SQLITE_PREFIX):]
        if not path:
            raise ValueError(f"Missing database path in {database_url!r}")
        return path
    if "://" in database_url:
        scheme = database_url.split("://", 1)[0]
        raise ValueError(f"Unsupported database scheme: {scheme}")
    return database_url


def get_db_path() -> str:
    """获取 SQLite 数据库路径"""
    return resolve_db_path(get_database_url())


def ensure_db_dir(db_path: str) -> None:
    """确保数据库文件所在目录存在（内存库跳过）"""
    if db_path == ":memory:":
        return
    Path(db_path).parent.mkdir(parents=True, exist_ok=True)
