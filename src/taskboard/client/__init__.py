"""Taskboard Client -- RPC 客户端 + 任务列表视图状态"""

from .rpc_client import RPCError, TaskboardClient
from .view import TaskListView

__all__ = [
    "RPCError",
    "TaskboardClient",
    "TaskListView",
]
