"""健康检查路由

GET /rpc/healthcheck: 常量 ok + 时间戳，无副作用。
GET /ready: Readiness 检查，验证 SQLite 连通性。
"""

from datetime import UTC, datetime

import structlog
from fastapi import APIRouter, Request
from starlette.responses import JSONResponse
from taskboard.core.models import HealthStatus

from ..rpc import RPC_PREFIX, rpc_result

log = structlog.get_logger()

router = APIRouter()


@router.get(f"{RPC_PREFIX}/healthcheck")
async def healthcheck():
    """Liveness 检查 -- 永远返回 ok"""
    # 毫秒精度 + "Z" 后缀，例如 2026-01-01T00:00:00.000Z
    timestamp = datetime.now(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")
    return rpc_result(HealthStatus(timestamp=timestamp))


@router.get("/ready")
async def ready(request: Request):
    """Readiness 检查 -- SQLite 可用返回 200，否则 503"""
    checks = {}
    all_ok = True

    try:
        store_group = request.app.state.store_group
        cursor = await store_group.conn.execute("SELECT 1")
        await cursor.fetchone()
        checks["sqlite"] = "ok"
    except Exception as e:
        log.warning("readiness_sqlite_failed", error=str(e))
        checks["sqlite"] = "unavailable"
        all_ok = False

    return JSONResponse(
        status_code=200 if all_ok else 503,
        content={
            "status": "ready" if all_ok else "not_ready",
            "checks": checks,
        },
    )
