"""Store Protocol 接口定义

使用 Python Protocol 实现结构化子类型（duck typing）。
"""

from datetime import datetime
from typing import Protocol

from ..models.enums import TaskStatus
from ..models.task import Task


class TaskStore(Protocol):
    """Task 存储接口"""

    async def create_task(
        self,
        title: str,
        status: TaskStatus,
        created_at: datetime,
        updated_at: datetime,
    ) -> Task:
        """插入任务，返回包含生成 id 的完整行"""
        ...

    async def get_task(self, task_id: int) -> Task | None:
        """根据 id 查询任务"""
        ...

    async def list_tasks(self) -> list[Task]:
        """查询全部任务（created_at 倒序）"""
        ...

    async def update_task_status(
        self,
        task_id: int,
        status: TaskStatus,
        updated_at: datetime,
    ) -> Task | None:
        """更新任务状态；无匹配行时返回 None"""
        ...

    async def delete_task(self, task_id: int) -> int:
        """删除任务，返回删除行数"""
        ...

    async def count_tasks(self) -> int:
        """任务总数"""
        ...
