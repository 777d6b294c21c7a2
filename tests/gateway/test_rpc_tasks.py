"""任务 RPC 过程测试

测试内容：
1. createTask 返回信封，datetime 路径登记在 meta 中
2. 输入校验失败返回 400，且不写入数据库
3. getTasks 倒序
4. updateTaskStatus 不存在返回 404 NOT_FOUND
5. deleteTask success 标志
"""

import re
from unittest.mock import AsyncMock

from httpx import AsyncClient
from taskboard.core.transport import deserialize


async def _create(client: AsyncClient, title: str) -> dict:
    resp = await client.post("/rpc/createTask", json={"title": title})
    assert resp.status_code == 200
    return resp.json()["result"]["data"]["json"]


async def _count_rows(test_app) -> int:
    return await test_app.state.store_group.task_store.count_tasks()


class TestCreateTask:
    async def test_create_returns_envelope(self, client: AsyncClient):
        resp = await client.post("/rpc/createTask", json={"title": "Buy milk"})
        assert resp.status_code == 200

        envelope = resp.json()["result"]["data"]
        task = envelope["json"]
        assert task["title"] == "Buy milk"
        assert task["status"] == "pending"
        assert isinstance(task["id"], int)
        assert task["created_at"] == task["updated_at"]
        assert envelope["meta"]["values"] == {"created_at": "Date", "updated_at": "Date"}

    async def test_caller_status_forced_pending(self, client: AsyncClient):
        resp = await client.post(
            "/rpc/createTask", json={"title": "Sneaky", "status": "completed"}
        )
        assert resp.status_code == 200
        assert resp.json()["result"]["data"]["json"]["status"] == "pending"

    async def test_max_length_title(self, client: AsyncClient):
        task = await _create(client, "a" * 500)
        assert len(task["title"]) == 500

    async def test_empty_title_rejected(self, client: AsyncClient, test_app):
        resp = await client.post("/rpc/createTask", json={"title": ""})

        assert resp.status_code == 400
        error = resp.json()["error"]
        assert error["code"] == "BAD_REQUEST"
        assert error["details"][0]["loc"] == ["body", "title"]
        assert await _count_rows(test_app) == 0

    async def test_too_long_title_rejected(self, client: AsyncClient, test_app):
        resp = await client.post("/rpc/createTask", json={"title": "a" * 501})
        assert resp.status_code == 400
        assert await _count_rows(test_app) == 0

    async def test_missing_title_rejected(self, client: AsyncClient, test_app):
        resp = await client.post("/rpc/createTask", json={})
        assert resp.status_code == 400
        assert await _count_rows(test_app) == 0

    async def test_rejected_input_never_reaches_store(self, client: AsyncClient, test_app):
        spy = AsyncMock()
        test_app.state.store_group.task_store.create_task = spy

        resp = await client.post("/rpc/createTask", json={"title": ""})

        assert resp.status_code == 400
        spy.assert_not_awaited()


class TestGetTasks:
    async def test_empty(self, client: AsyncClient):
        resp = await client.get("/rpc/getTasks")
        assert resp.status_code == 200
        assert resp.json()["result"]["data"] == {"json": []}

    async def test_newest_first(self, client: AsyncClient):
        first = await _create(client, "First Task")
        second = await _create(client, "Second Task")

        resp = await client.get("/rpc/getTasks")
        tasks = deserialize(resp.json()["result"]["data"])

        assert [t["id"] for t in tasks] == [second["id"], first["id"]]
        assert tasks[0]["created_at"] >= tasks[1]["created_at"]

    async def test_round_trip_matches_create(self, client: AsyncClient):
        resp = await client.post("/rpc/createTask", json={"title": "  spaced title  "})
        created = deserialize(resp.json()["result"]["data"])

        listed = deserialize((await client.get("/rpc/getTasks")).json()["result"]["data"])
        assert listed == [created]
        assert listed[0]["title"] == "  spaced title  "


class TestUpdateTaskStatus:
    async def test_complete_task(self, client: AsyncClient):
        task = await _create(client, "Finish report")

        resp = await client.post(
            "/rpc/updateTaskStatus", json={"id": task["id"], "status": "completed"}
        )
        assert resp.status_code == 200
        updated = deserialize(resp.json()["result"]["data"])
        assert updated["status"] == "completed"
        assert updated["title"] == "Finish report"
        assert updated["updated_at"] >= updated["created_at"]

    async def test_not_found(self, client: AsyncClient):
        resp = await client.post(
            "/rpc/updateTaskStatus", json={"id": 999, "status": "completed"}
        )
        assert resp.status_code == 404
        error = resp.json()["error"]
        assert error["code"] == "NOT_FOUND"
        assert re.search("not found", error["message"], re.IGNORECASE)

    async def test_invalid_status(self, client: AsyncClient):
        task = await _create(client, "x")
        resp = await client.post(
            "/rpc/updateTaskStatus", json={"id": task["id"], "status": "archived"}
        )
        assert resp.status_code == 400

    async def test_string_id_rejected(self, client: AsyncClient):
        resp = await client.post(
            "/rpc/updateTaskStatus", json={"id": "1", "status": "completed"}
        )
        assert resp.status_code == 400


class TestDeleteTask:
    async def test_delete_existing(self, client: AsyncClient):
        task = await _create(client, "Task to delete")

        resp = await client.post("/rpc/deleteTask", json={"id": task["id"]})
        assert resp.status_code == 200
        assert resp.json()["result"]["data"] == {"json": {"success": True}}

        listed = (await client.get("/rpc/getTasks")).json()["result"]["data"]["json"]
        assert task["id"] not in [t["id"] for t in listed]

    async def test_delete_missing(self, client: AsyncClient):
        resp = await client.post("/rpc/deleteTask", json={"id": 999})
        assert resp.status_code == 200
        assert resp.json()["result"]["data"] == {"json": {"success": False}}

    async def test_delete_requires_integer_id(self, client: AsyncClient):
        resp = await client.post("/rpc/deleteTask", json={"id": 1.5})
        assert resp.status_code == 400


class TestOutOfRangeIds:
    """超出 SQLite INTEGER 范围的 id 视为不存在"""

    async def test_delete_huge_id(self, client: AsyncClient):
        resp = await client.post("/rpc/deleteTask", json={"id": 2**63})
        assert resp.status_code == 200
        assert resp.json()["result"]["data"] == {"json": {"success": False}}

    async def test_delete_huge_negative_id(self, client: AsyncClient):
        resp = await client.post("/rpc/deleteTask", json={"id": -(2**63) - 1})
        assert resp.status_code == 200
        assert resp.json()["result"]["data"] == {"json": {"success": False}}

    async def test_update_huge_id_not_found(self, client: AsyncClient):
        resp = await client.post(
            "/rpc/updateTaskStatus", json={"id": 2**63, "status": "completed"}
        )
        assert resp.status_code == 404
        assert resp.json()["error"]["code"] == "NOT_FOUND"

    async def test_max_int64_still_queried(self, client: AsyncClient):
        resp = await client.post("/rpc/deleteTask", json={"id": 2**63 - 1})
        assert resp.status_code == 200
        assert resp.json()["result"]["data"] == {"json": {"success": False}}
