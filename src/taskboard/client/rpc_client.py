"""TaskboardClient -- Gateway RPC 过程的异步客户端

基于 httpx.AsyncClient；响应信封经 transport.deserialize 还原 datetime，
再校验为 Task 等模型。错误信封抛出 RPCError。
"""

from typing import Any

import httpx
from taskboard.core.exceptions import TaskboardError
from taskboard.core.models import DeleteTaskResult, HealthStatus, Task, TaskStatus
from taskboard.core.transport import deserialize


class RPCError(TaskboardError):
    """RPC 过程返回错误信封（或非 JSON 错误响应）"""

    def __init__(self, code: str, message: str, status_code: int) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message
        self.status_code = status_code


class TaskboardClient:
    """Gateway RPC 客户端

    Args:
        base_url: Gateway 基础 URL，例如 http://localhost:2022
        transport: 可选 httpx 传输层（测试中传入 ASGITransport）
        timeout_s: 请求超时（秒）
    """

    def __init__(
        self,
        base_url: str,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout_s: float = 10.0,
    ) -> None:
        self._http = httpx.AsyncClient(
            base_url=base_url,
            transport=transport,
            timeout=timeout_s,
        )

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> "TaskboardClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def healthcheck(self) -> HealthStatus:
        data = await self._call("GET", "healthcheck")
        return HealthStatus.model_validate(data)

    async def get_tasks(self) -> list[Task]:
        data = await self._call("GET", "getTasks")
        return [Task.model_validate(item) for item in data]

    async def create_task(self, title: str) -> Task:
        data = await self._call("POST", "createTask", {"title": title})
        return Task.model_validate(data)

    async def update_task_status(self, task_id: int, status: TaskStatus) -> Task:
        data = await self._call(
            "POST",
            "updateTaskStatus",
            {"id": task_id, "status": TaskStatus(status).value},
        )
        return Task.model_validate(data)

    async def delete_task(self, task_id: int) -> DeleteTaskResult:
        data = await self._call("POST", "deleteTask", {"id": task_id})
        return DeleteTaskResult.model_validate(data)

    async def _call(
        self,
        method: str,
        procedure: str,
        payload: dict[str, Any] | None = None,
    ) -> Any:
        """调用一个 RPC 过程并解码信封"""
        resp = await self._http.request(method, f"/rpc/{procedure}", json=payload)

        try:
            body = resp.json()
        except ValueError:
            raise RPCError(
                "INTERNAL_SERVER_ERROR", resp.text or resp.reason_phrase, resp.status_code
            ) from None

        if resp.is_error or "error" in body:
            error = body.get("error") or {}
            raise RPCError(
                error.get("code", "INTERNAL_SERVER_ERROR"),
                error.get("message", resp.reason_phrase),
                resp.status_code,
            )

        return deserialize(body["result"]["data"])
