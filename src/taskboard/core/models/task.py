"""Task Domain Model + RPC 输入/输出模型

Task 是唯一的持久化实体；输入模型在 RPC 边界完成形状校验，
校验失败的请求不会进入 TaskService。
"""

from datetime import datetime
from typing import Literal

from pydantic import BaseModel, Field, StrictInt, StrictStr

from ..config import MAX_TITLE_LENGTH
from .enums import TaskStatus


class Task(BaseModel):
    """Task 数据模型

    id 由存储层分配且永不复用；title 与 created_at 创建后不可变，
    只有 status 与 updated_at 会随状态更新变化。
    """

    id: int = Field(description="存储层生成的自增 ID")
    title: str = Field(description="任务标题")
    status: TaskStatus = Field(default=TaskStatus.PENDING, description="当前状态")
    created_at: datetime = Field(description="创建时间（UTC）")
    updated_at: datetime = Field(description="最近一次状态变更时间（UTC）")


class CreateTaskInput(BaseModel):
    """createTask 请求体

    调用方额外传入的字段（例如 status）被忽略，新任务总是 pending。
    """

    title: StrictStr = Field(
        min_length=1,
        max_length=MAX_TITLE_LENGTH,
        description="任务标题，1..500 字符",
    )


class UpdateTaskStatusInput(BaseModel):
    """updateTaskStatus 请求体"""

    id: StrictInt = Field(description="任务 ID")
    status: TaskStatus = Field(description="目标状态")


class DeleteTaskInput(BaseModel):
    """deleteTask 请求体"""

    id: StrictInt = Field(description="任务 ID")


class DeleteTaskResult(BaseModel):
    """deleteTask 响应：是否真的删除了一行"""

    success: bool


class HealthStatus(BaseModel):
    """healthcheck 响应"""

    status: Literal["ok"] = "ok"
    timestamp: str = Field(description="ISO-8601 时间戳")
