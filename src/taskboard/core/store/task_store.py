"""TaskStore SQLite 实现

每个方法对应一条 SQL 语句并立即提交，不存在跨语句事务。
更新/删除不存在的 id 不抛异常：分别返回 None / 0，由调用方决定如何处理。
"""

from datetime import UTC, datetime

import aiosqlite

from ..models.enums import TaskStatus
from ..models.task import Task

_COLUMNS = "id, title, status, created_at, updated_at"

# SQLite INTEGER 为 64 位有符号整数，超出范围的 id 不可能存在
_MIN_ID = -(2**63)
_MAX_ID = 2**63 - 1


def _storable_id(task_id: int) -> bool:
    return _MIN_ID <= task_id <= _MAX_ID


def to_db_timestamp(ts: datetime) -> str:
    """datetime -> 定长 ISO-8601 UTC 字符串"""
    if ts.tzinfo is None:
        ts = ts.replace(tzinfo=UTC)
    return ts.astimezone(UTC).isoformat(timespec="microseconds")


class SqliteTaskStore:
    """TaskStore 的 SQLite 实现"""

    def __init__(self, conn: aiosqlite.Connection) -> None:
        self._conn = conn

    async def create_task(
        self,
        title: str,
        status: TaskStatus,
        created_at: datetime,
        updated_at: datetime,
    ) -> Task:
        """插入任务记录，返回包含生成 id 的完整行"""
        cursor = await self._conn.execute(
            """
            INSERT INTO tasks (title, status, created_at, updated_at)
            VALUES (?, ?, ?, ?)
            """,
            (
                title,
                status.value,
                to_db_timestamp(created_at),
                to_db_timestamp(updated_at),
            ),
        )
        await self._conn.commit()
        task_id = cursor.lastrowid
        task = await self.get_task(task_id)
        if task is None:
            raise RuntimeError(f"Inserted task {task_id} could not be read back")
        return task

    async def get_task(self, task_id: int) -> Task | None:
        """根据 id 查询任务"""
        if not _storable_id(task_id):
            return None
        cursor = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM tasks WHERE id = ?",
            (task_id,),
        )
        row = await cursor.fetchone()
        if row is None:
            return None
        return self._row_to_task(row)

    async def list_tasks(self) -> list[Task]:
        """查询全部任务，按 created_at 倒序，同一时间戳按 id 倒序"""
        cursor = await self._conn.execute(
            f"SELECT {_COLUMNS} FROM tasks ORDER BY created_at DESC, id DESC"
        )
        rows = await cursor.fetchall()
        return [self._row_to_task(row) for row in rows]

    async def update_task_status(
        self,
        task_id: int,
        status: TaskStatus,
        updated_at: datetime,
    ) -> Task | None:
        """更新任务状态与 updated_at

        Returns:
            更新后的 Task；没有匹配行时返回 None
        """
        if not _storable_id(task_id):
            return None
        cursor = await self._conn.execute(
            "UPDATE tasks SET status = ?, updated_at = ? WHERE id = ?",
            (status.value, to_db_timestamp(updated_at), task_id),
        )
        await self._conn.commit()
        if cursor.rowcount == 0:
            return None
        return await self.get_task(task_id)

    async def delete_task(self, task_id: int) -> int:
        """删除任务，返回删除的行数（0 或 1）"""
        if not _storable_id(task_id):
            return 0
        cursor = await self._conn.execute(
            "DELETE FROM tasks WHERE id = ?",
            (task_id,),
        )
        await self._conn.commit()
        return cursor.rowcount

    async def count_tasks(self) -> int:
        """任务总数"""
        cursor = await self._conn.execute("SELECT COUNT(*) FROM tasks")
        row = await cursor.fetchone()
        return int(row[0]) if row else 0

    @staticmethod
    def _row_to_task(row: aiosqlite.Row) -> Task:
        """将数据库行转换为 Task 模型"""
        return Task(
            id=row[0],
            title=row[1],
            status=row[2],
            created_at=datetime.fromisoformat(row[3]),
            updated_at=datetime.fromisoformat(row[4]),
        )
