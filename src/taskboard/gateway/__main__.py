"""Gateway 启动入口 -- python -m taskboard.gateway

监听端口由 SERVER_PORT 环境变量指定（默认 2022）。
"""

import structlog
import uvicorn
from taskboard.core.config import get_server_port

log = structlog.get_logger()


def main() -> None:
    """启动 uvicorn"""
    port = get_server_port()
    log.info("gateway_starting", port=port)
    uvicorn.run("taskboard.gateway.main:app", host="0.0.0.0", port=port)


if __name__ == "__main__":
    main()
