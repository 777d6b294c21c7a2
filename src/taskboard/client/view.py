"""TaskListView -- 客户端任务列表状态

本地状态只根据服务端响应更新：
- 新建任务：用服务端返回的完整记录插到列表最前
- 切换状态：用服务端返回的记录替换本地行
- 删除任务：服务端响应后移除本地行
任何失败只记日志，本地状态保持不变，不重试。
"""

import httpx
import structlog
from taskboard.core.models import Task, TaskStatus, toggled

from .rpc_client import RPCError, TaskboardClient

log = structlog.get_logger()

# 视图层失败只记录，不向上抛
_CLIENT_ERRORS = (RPCError, httpx.HTTPError)


class TaskListView:
    """任务列表视图状态"""

    def __init__(self, client: TaskboardClient) -> None:
        self._client = client
        self.tasks: list[Task] = []
        self.is_loading = False

    async def load(self) -> None:
        """从 getTasks 刷新整个列表"""
        try:
            self.tasks = await self._client.get_tasks()
        except _CLIENT_ERRORS as e:
            log.error("load_tasks_failed", error=str(e))

    async def submit(self, title: str) -> Task | None:
        """提交新任务；空标题直接忽略，不发请求"""
        title = title.strip()
        if not title:
            return None

        self.is_loading = True
        try:
            task = await self._client.create_task(title)
        except _CLIENT_ERRORS as e:
            log.error("create_task_failed", error=str(e))
            return None
        finally:
            self.is_loading = False

        self.tasks = [task, *self.tasks]
        return task

    async def toggle(self, task_id: int) -> Task | None:
        """切换任务状态 pending <-> completed"""
        current = self._find(task_id)
        if current is None:
            return None

        try:
            updated = await self._client.update_task_status(
                task_id, toggled(current.status)
            )
        except _CLIENT_ERRORS as e:
            log.error("update_task_status_failed", task_id=task_id, error=str(e))
            return None

        self.tasks = [updated if t.id == task_id else t for t in self.tasks]
        return updated

    async def remove(self, task_id: int) -> bool:
        """删除任务，返回服务端的 success 标志"""
        try:
            result = await self._client.delete_task(task_id)
        except _CLIENT_ERRORS as e:
            log.error("delete_task_failed", task_id=task_id, error=str(e))
            return False

        self.tasks = [t for t in self.tasks if t.id != task_id]
        return result.success

    @property
    def pending(self) -> list[Task]:
        return [t for t in self.tasks if t.status == TaskStatus.PENDING]

    @property
    def completed(self) -> list[Task]:
        return [t for t in self.tasks if t.status == TaskStatus.COMPLETED]

    def summary(self) -> str:
        """纯文本渲染：计数 + 任务列表"""
        lines = [f"Pending: {len(self.pending)}  Completed: {len(self.completed)}"]
        if not self.tasks:
            lines.append("No tasks yet")
        for task in self.tasks:
            mark = "x" if task.status == TaskStatus.COMPLETED else " "
            created = task.created_at.strftime("%Y-%m-%d %H:%M")
            lines.append(f"[{mark}] #{task.id} {task.title} ({created})")
        return "\n".join(lines)

    def _find(self, task_id: int) -> Task | None:
        for task in self.tasks:
            if task.id == task_id:
                return task
        return None
