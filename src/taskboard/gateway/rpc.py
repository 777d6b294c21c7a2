"""RPC 响应封装 + 校验失败处理

成功响应: {"result": {"data": {"json": ..., "meta": ...}}}
失败响应: {"error": {"code": ..., "message": ..., "details"?: [...]}}
"""

from typing import Any

import structlog
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from starlette.requests import Request
from starlette.responses import JSONResponse
from taskboard.core.transport import serialize

log = structlog.get_logger()

RPC_PREFIX = "/rpc"


def rpc_result(data: Any) -> JSONResponse:
    """把过程返回值编码为 RPC 成功响应"""
    return JSONResponse(status_code=200, content={"result": {"data": serialize(data)}})


def rpc_error(
    status_code: int,
    code: str,
    message: str,
    details: list[Any] | None = None,
) -> JSONResponse:
    """构造 RPC 失败响应"""
    error: dict[str, Any] = {"code": code, "message": message}
    if details is not None:
        error["details"] = details
    return JSONResponse(status_code=status_code, content={"error": error})


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """输入形状校验失败 -- 400，请求不会进入 TaskService"""
    details = jsonable_encoder(exc.errors())
    log.warning("rpc_input_rejected", path=request.url.path, errors=len(details))
    return rpc_error(400, "BAD_REQUEST", "Invalid input", details)
