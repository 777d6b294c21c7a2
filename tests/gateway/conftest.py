"""gateway 测试配置 -- httpx AsyncClient + 手动初始化的 StoreGroup"""

from collections.abc import AsyncGenerator
from pathlib import Path

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from taskboard.core.store import create_store_group


@pytest_asyncio.fixture
async def test_app(tmp_path: Path, monkeypatch):
    """创建测试用 FastAPI app 实例（绕过 lifespan）"""
    db_path = tmp_path / "sqlite" / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_path}")
    monkeypatch.setenv("LOGFIRE_SEND_TO_LOGFIRE", "false")

    from taskboard.gateway.main import create_app

    app = create_app()
    store_group = await create_store_group(str(db_path))
    app.state.store_group = store_group

    yield app

    await store_group.conn.close()


@pytest_asyncio.fixture
async def client(test_app) -> AsyncGenerator[AsyncClient, None]:
    """提供 httpx AsyncClient 用于测试"""
    async with AsyncClient(
        transport=ASGITransport(app=test_app),
        base_url="http://test",
    ) as ac:
        yield ac
