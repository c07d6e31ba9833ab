"""Tests for user strategy endpoints."""

from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient

from ohcraps.main import app
from ohcraps.models.user_strategy import (
    STATUS_READY_TO_RESUBMIT,
    STATUS_READY_TO_SUBMIT,
    STATUS_SUBMITTED,
)
from ohcraps.services.user_strategy_store import (
    InMemoryKeyValueStore,
    UserStrategyStore,
    get_user_strategy_store,
)


class FailingBackend:
    """Backend whose writes always fail."""

    def get(self, key: str) -> str | None:
        return None

    def set(self, key: str, value: str) -> None:
        raise OSError("read-only file system")


@pytest.fixture
def store() -> UserStrategyStore:
    store = UserStrategyStore(InMemoryKeyValueStore())
    store.load()
    return store


@pytest.fixture
async def client(store: UserStrategyStore):
    """Provide an async test client with an in-memory user store."""
    app.dependency_overrides[get_user_strategy_store] = lambda: store

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest.fixture
def new_strategy() -> dict[str, str]:
    return {
        "name": "Press Play",
        "buy_in": "$200",
        "table_minimum": "$10",
        "steps": "1. Place the 6 and 8\n- Press after a hit\n2. Take it down",
        "notes": "Short sessions",
        "credit": "Me",
    }


async def _create(client: AsyncClient, payload: dict[str, str]) -> dict:
    response = await client.post("/user-strategies", json=payload)
    assert response.status_code == 201
    return response.json()


class TestCreate:
    async def test_create(
        self, client: AsyncClient, store: UserStrategyStore, new_strategy: dict[str, str]
    ) -> None:
        data = await _create(client, new_strategy)

        assert data["name"] == "Press Play"
        assert data["is_submitted"] is False
        assert data["date_last_edited"] is None
        assert data["submission_status"] == STATUS_READY_TO_SUBMIT
        assert [str(s.id) for s in store.strategies] == [data["id"]]

    @pytest.mark.parametrize(("field", "label"), [("name", "Name"), ("steps", "Steps")])
    async def test_blank_required_field(
        self,
        client: AsyncClient,
        new_strategy: dict[str, str],
        field: str,
        label: str,
    ) -> None:
        response = await client.post("/user-strategies", json={**new_strategy, field: "   "})

        assert response.status_code == 400
        assert response.json()["detail"] == f"{label} cannot be empty"

    async def test_missing_steps(self, client: AsyncClient) -> None:
        response = await client.post("/user-strategies", json={"name": "x"})

        assert response.status_code == 422

    async def test_save_failure(self, new_strategy: dict[str, str]) -> None:
        failing = UserStrategyStore(FailingBackend())
        app.dependency_overrides[get_user_strategy_store] = lambda: failing

        transport = ASGITransport(app=app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            response = await client.post("/user-strategies", json=new_strategy)
            listing = await client.get("/user-strategies")

        app.dependency_overrides.clear()

        assert response.status_code == 503
        assert listing.json()["strategies"] == []


class TestReadEndpoints:
    async def test_list_in_creation_order(
        self, client: AsyncClient, new_strategy: dict[str, str]
    ) -> None:
        await _create(client, {**new_strategy, "name": "B"})
        await _create(client, {**new_strategy, "name": "A"})

        response = await client.get("/user-strategies")

        assert [s["name"] for s in response.json()["strategies"]] == ["B", "A"]

    async def test_get(self, client: AsyncClient, new_strategy: dict[str, str]) -> None:
        created = await _create(client, new_strategy)

        response = await client.get(f"/user-strategies/{created['id']}")

        assert response.status_code == 200
        assert response.json() == created

    async def test_get_not_found(self, client: AsyncClient) -> None:
        response = await client.get(f"/user-strategies/{uuid4()}")

        assert response.status_code == 404
        assert response.json()["detail"] == "User strategy not found"

    async def test_detail(self, client: AsyncClient, new_strategy: dict[str, str]) -> None:
        created = await _create(client, new_strategy)

        response = await client.get(f"/user-strategies/{created['id']}/detail")

        data = response.json()
        assert data["id"] == created["id"]
        assert data["buy_in_range"] == [200, 200]
        assert data["steps"] == [
            "§STEP§1. Place the 6 and 8",
            "§STEP§- Press after a hit",
            "§STEP§2. Take it down",
        ]
        assert data["notes"] == "Short sessions"

    async def test_share(self, client: AsyncClient, new_strategy: dict[str, str]) -> None:
        created = await _create(client, new_strategy)

        response = await client.get(f"/user-strategies/{created['id']}/share")

        data = response.json()
        assert data["subject"] == "Oh Craps! Strategy - Press Play"
        assert data["filename"] == "Press Play_OhCraps.txt"
        assert "Steps:\n1. Place the 6 and 8\n- Press after a hit\n2. Take it down" in data["text"]


class TestEdit:
    async def test_partial_edit(self, client: AsyncClient, new_strategy: dict[str, str]) -> None:
        created = await _create(client, new_strategy)

        response = await client.put(
            f"/user-strategies/{created['id']}",
            json={"notes": "Long sessions"},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["notes"] == "Long sessions"
        assert data["name"] == "Press Play"
        assert data["date_last_edited"] is not None

    async def test_blank_name_rejected(
        self, client: AsyncClient, new_strategy: dict[str, str]
    ) -> None:
        created = await _create(client, new_strategy)

        response = await client.put(f"/user-strategies/{created['id']}", json={"name": ""})

        assert response.status_code == 400

    async def test_edit_not_found(self, client: AsyncClient) -> None:
        response = await client.put(f"/user-strategies/{uuid4()}", json={"notes": "x"})

        assert response.status_code == 404


class TestSubmitLifecycle:
    async def test_submit_then_edit(
        self, client: AsyncClient, new_strategy: dict[str, str]
    ) -> None:
        created = await _create(client, new_strategy)

        submit = await client.post(f"/user-strategies/{created['id']}/submit")

        assert submit.status_code == 200
        data = submit.json()
        assert data["strategy"]["submission_status"] == STATUS_SUBMITTED
        assert data["email"]["subject"] == "Oh Craps! Strategy Submission - Press Play"
        assert data["email"]["body"].startswith("Strategy Name:\nPress Play")

        edit = await client.put(f"/user-strategies/{created['id']}", json={"credit": "Us"})

        edited = edit.json()
        assert edited["is_submitted"] is False
        assert edited["has_been_submitted"] is True
        assert edited["submission_status"] == STATUS_READY_TO_RESUBMIT

    async def test_submit_not_found(self, client: AsyncClient) -> None:
        response = await client.post(f"/user-strategies/{uuid4()}/submit")

        assert response.status_code == 404


class TestDuplicateAndDelete:
    async def test_duplicate(self, client: AsyncClient, new_strategy: dict[str, str]) -> None:
        created = await _create(client, new_strategy)
        await client.post(f"/user-strategies/{created['id']}/submit")

        response = await client.post(f"/user-strategies/{created['id']}/duplicate")

        assert response.status_code == 201
        copy = response.json()
        assert copy["id"] != created["id"]
        assert copy["name"] == "Press Play Copy"
        assert copy["has_been_submitted"] is False

    async def test_delete(
        self, client: AsyncClient, store: UserStrategyStore, new_strategy: dict[str, str]
    ) -> None:
        created = await _create(client, new_strategy)

        response = await client.delete(f"/user-strategies/{created['id']}")

        assert response.status_code == 200
        assert response.json()["deleted"] is True
        assert store.strategies == ()

        again = await client.delete(f"/user-strategies/{created['id']}")
        assert again.status_code == 404
