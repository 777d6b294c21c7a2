"""任务 RPC 过程路由

GET  /rpc/getTasks:          任务列表，按 created_at 倒序
POST /rpc/createTask:        创建任务
POST /rpc/updateTaskStatus:  更新任务状态（不存在返回 404）
POST /rpc/deleteTask:        删除任务（不存在返回 success=false）
"""

from fastapi import APIRouter, Depends
from taskboard.core.exceptions import TaskNotFoundError
from taskboard.core.models import (
    CreateTaskInput,
    DeleteTaskInput,
    DeleteTaskResult,
    UpdateTaskStatusInput,
)

from ..deps import get_task_service
from ..rpc import RPC_PREFIX, rpc_error, rpc_result
from ..services.task_service import TaskService

router = APIRouter(prefix=RPC_PREFIX)


@router.get("/getTasks")
async def get_tasks(service: TaskService = Depends(get_task_service)):
    """查询全部任务"""
    tasks = await service.list_tasks()
    return rpc_result(tasks)


@router.post("/createTask")
async def create_task(
    body: CreateTaskInput,
    service: TaskService = Depends(get_task_service),
):
    """创建任务，返回包含生成 id 与时间戳的完整记录"""
    task = await service.create_task(body.title)
    return rpc_result(task)


@router.post("/updateTaskStatus")
async def update_task_status(
    body: UpdateTaskStatusInput,
    service: TaskService = Depends(get_task_service),
):
    """更新任务状态

    - 成功返回更新后的任务
    - 不存在的任务返回 404
    """
    try:
        task = await service.update_task_status(body.id, body.status)
    except TaskNotFoundError as e:
        return rpc_error(404, "NOT_FOUND", str(e))
    return rpc_result(task)


@router.post("/deleteTask")
async def delete_task(
    body: DeleteTaskInput,
    service: TaskService = Depends(get_task_service),
):
    """删除任务，返回 {"success": bool}"""
    success = await service.delete_task(body.id)
    return rpc_result(DeleteTaskResult(success=success))
