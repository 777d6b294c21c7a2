"""LoggingMiddleware -- 请求级日志

为每个 HTTP 请求生成 request_id，连同 RPC 过程名绑定到 structlog contextvars，
请求结束时记录状态码与耗时。
"""

import time

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response
from ulid import ULID

from ..rpc import RPC_PREFIX


def procedure_name(path: str) -> str | None:
    """/rpc/createTask -> "createTask"；非 RPC 路径返回 None"""
    prefix = f"{RPC_PREFIX}/"
    if not path.startswith(prefix):
        return None
    return path[len(prefix):] or None


class LoggingMiddleware(BaseHTTPMiddleware):
    """请求级日志中间件"""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        request_id = str(ULID())
        path = request.url.path

        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(
            request_id=request_id,
            method=request.method,
            path=path,
        )
        procedure = procedure_name(path)
        if procedure:
            structlog.contextvars.bind_contextvars(procedure=procedure)

        log = structlog.get_logger()
        await log.ainfo("request_started")
        started = time.perf_counter()

        response = await call_next(request)

        await log.ainfo(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - started) * 1000, 2),
        )

        response.headers["X-Request-ID"] = request_id
        return response
