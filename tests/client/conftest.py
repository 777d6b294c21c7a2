"""client 测试配置 -- 真实客户端直连进程内 app"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest_asyncio
from httpx import ASGITransport
from taskboard.client import TaskboardClient, TaskListView
from taskboard.core.store import create_store_group


@pytest_asyncio.fixture
async def test_app(tmp_path: Path, monkeypatch):
    db_path = tmp_path / "client.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_path}")

    from taskboard.gateway.main import create_app

    app = create_app()
    store_group = await create_store_group(str(db_path))
    app.state.store_group = store_group

    yield app

    await store_group.conn.close()


@pytest_asyncio.fixture
async def rpc_client(test_app) -> AsyncGenerator[TaskboardClient, None]:
    async with TaskboardClient(
        "http://test",
        transport=ASGITransport(app=test_app),
    ) as client:
        yield client


@pytest_asyncio.fixture
async def view(rpc_client) -> TaskListView:
    return TaskListView(rpc_client)
