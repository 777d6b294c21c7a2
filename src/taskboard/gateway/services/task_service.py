"""TaskService -- 任务创建/查询/状态更新/删除业务逻辑

每个操作只对应一次 Store 调用，外加时间戳维护：
1. create_task: 强制 pending，created_at = updated_at = now
2. list_tasks: created_at 倒序
3. update_task_status: 刷新 updated_at，目标不存在时抛 TaskNotFoundError
4. delete_task: 返回是否删除成功，目标不存在不视为错误

失败在捕获点记录日志后原样抛出，不重试、不转换。
"""

from datetime import UTC, datetime

import structlog
from taskboard.core.exceptions import TaskNotFoundError
from taskboard.core.models import Task, TaskStatus
from taskboard.core.store import StoreGroup

log = structlog.get_logger()


class TaskService:
    """任务业务服务（无状态）"""

    def __init__(self, store_group: StoreGroup) -> None:
        self._stores = store_group

    async def create_task(self, title: str) -> Task:
        """创建任务，状态固定为 pending"""
        now = datetime.now(UTC)
        try:
            task = await self._stores.task_store.create_task(
                title=title,
                status=TaskStatus.PENDING,
                created_at=now,
                updated_at=now,
            )
        except Exception as e:
            log.error("task_create_failed", error=str(e))
            raise

        log.info("task_created", task_id=task.id)
        return task

    async def list_tasks(self) -> list[Task]:
        """查询全部任务，最新创建的在前"""
        try:
            return await self._stores.task_store.list_tasks()
        except Exception as e:
            log.error("task_list_failed", error=str(e))
            raise

    async def update_task_status(self, task_id: int, status: TaskStatus) -> Task:
        """设置任务状态并刷新 updated_at

        目标状态与当前状态相同时依然刷新 updated_at。

        Raises:
            TaskNotFoundError: id 不存在
        """
        try:
            task = await self._stores.task_store.update_task_status(
                task_id=task_id,
                status=status,
                updated_at=datetime.now(UTC),
            )
            if task is None:
                raise TaskNotFoundError(task_id)
        except Exception as e:
            log.error("task_status_update_failed", task_id=task_id, error=str(e))
            raise

        log.info("task_status_updated", task_id=task_id, status=status.value)
        return task

    async def delete_task(self, task_id: int) -> bool:
        """删除任务

        Returns:
            True 表示删除了一行；id 不存在时返回 False（不抛异常）
        """
        try:
            deleted = await self._stores.task_store.delete_task(task_id)
        except Exception as e:
            log.error("task_delete_failed", task_id=task_id, error=str(e))
            raise

        log.info("task_deleted", task_id=task_id, success=deleted > 0)
        return deleted > 0
