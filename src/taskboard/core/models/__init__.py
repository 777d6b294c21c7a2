"""Taskboard Core Domain Models -- 公共类型导出

所有公共模型类型从此入口导入。
"""

from .enums import TaskStatus, toggled
from .task import (
    CreateTaskInput,
    DeleteTaskInput,
    DeleteTaskResult,
    HealthStatus,
    Task,
    UpdateTaskStatusInput,
)

__all__ = [
    # 枚举
    "TaskStatus",
    "toggled",
    # Task
    "Task",
    # RPC 输入/输出
    "CreateTaskInput",
    "UpdateTaskStatusInput",
    "DeleteTaskInput",
    "DeleteTaskResult",
    "HealthStatus",
]
