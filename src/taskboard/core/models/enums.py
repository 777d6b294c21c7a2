"""枚举定义 -- 任务状态"""

from enum import StrEnum


class TaskStatus(StrEnum):
    """任务状态：只有待办与已完成两种"""

    PENDING = "pending"
    COMPLETED = "completed"


def toggled(status: TaskStatus) -> TaskStatus:
    """返回切换后的状态（pending <-> completed）"""
    if status == TaskStatus.PENDING:
        return TaskStatus.COMPLETED
    return TaskStatus.PENDING
