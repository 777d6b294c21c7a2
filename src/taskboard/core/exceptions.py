"""Taskboard 异常体系"""


class TaskboardError(Exception):
    """Taskboard 基础异常"""


class TaskNotFoundError(TaskboardError):
    """状态更新时目标任务不存在

    删除不存在的任务不是错误（返回 success=False），
    只有状态更新会抛出此异常。
    """

    def __init__(self, task_id: int) -> None:
        super().__init__(f"Task with id {task_id} not found")
        self.task_id = task_id
