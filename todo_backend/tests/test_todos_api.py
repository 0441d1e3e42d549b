import json

from fastapi.testclient import TestClient

from todo_api.generate_openapi import generate_openapi
from todo_api.main import create_app
from todo_api.settings import Settings

FIRST = "Write a test that fails"
SECOND = "Write code to make the test pass"


def add_task(client, description):
    res = client.post("/api/todo", json={"task": description})
    assert res.status_code == 201
    return res.json()["id"]


class TestHealth:
    def test_health_check(self, client):
        res = client.get("/")
        assert res.status_code == 200
        data = res.json()
        assert data["message"] == "Healthy"
        assert data["backend"] == "memory"


class TestAddAndList:
    def test_list_is_empty_initially(self, client):
        res = client.get("/api/todo")
        assert res.status_code == 200
        assert res.json() == []

    def test_add_returns_sequential_ids(self, client):
        res = client.post("/api/todo", json={"task": FIRST})
        assert res.status_code == 201
        assert res.json() == {"id": 1}
        assert add_task(client, SECOND) == 2

    def test_list_renders_tasks_in_insertion_order(self, client):
        add_task(client, FIRST)
        add_task(client, SECOND)

        res = client.get("/api/todo")
        assert res.status_code == 200
        assert res.json() == [
            "[ ] 1. Write a test that fails",
            "[ ] 2. Write code to make the test pass",
        ]

    def test_add_empty_description_is_rejected(self, client):
        res = client.post("/api/todo", json={"task": ""})
        assert res.status_code == 400
        assert res.json() == {"error": "Task description should not be empty"}

        # A rejected add does not consume an id
        assert add_task(client, FIRST) == 1

    def test_custom_list_format(self):
        client = TestClient(create_app(Settings(task_list_format=":id - :description (:check)")))
        add_task(client, FIRST)
        assert client.get("/api/todo").json() == ["1 - Write a test that fails ( )"]


class TestMarkCompleted:
    def test_patch_marks_task_completed(self, client):
        add_task(client, FIRST)
        add_task(client, SECOND)

        res = client.patch("/api/todo/1", json={"completed": True})
        assert res.status_code == 200
        assert res.text == ""

        assert client.get("/api/todo").json() == [
            "[√] 1. Write a test that fails",
            "[ ] 2. Write code to make the test pass",
        ]

    def test_patch_twice_is_same_as_once(self, client):
        add_task(client, FIRST)
        client.patch("/api/todo/1", json={"completed": True})
        res = client.patch("/api/todo/1", json={"completed": True})
        assert res.status_code == 200
        assert client.get("/api/todo").json() == ["[√] 1. Write a test that fails"]

    def test_patch_false_leaves_task_unchanged(self, client):
        add_task(client, FIRST)
        client.patch("/api/todo/1", json={"completed": True})

        res = client.patch("/api/todo/1", json={"completed": False})
        assert res.status_code == 200
        assert client.get("/api/todo").json() == ["[√] 1. Write a test that fails"]

    def test_patch_unknown_task_is_not_found(self, client):
        res = client.patch("/api/todo/42", json={"completed": True})
        assert res.status_code == 404
        assert res.json() == {"error": "Task 42 not found"}


class TestUpdate:
    def test_put_replaces_description_and_keeps_completion(self, client):
        add_task(client, FIRST)
        add_task(client, SECOND)
        client.patch("/api/todo/2", json={"completed": True})

        res = client.put("/api/todo/2", json={"task": "New text"})
        assert res.status_code == 204
        assert res.text == ""

        assert client.get("/api/todo").json() == [
            "[ ] 1. Write a test that fails",
            "[√] 2. New text",
        ]

    def test_put_empty_description_is_rejected(self, client):
        add_task(client, FIRST)

        res = client.put("/api/todo/1", json={"task": ""})
        assert res.status_code == 400
        assert res.json() == {"error": "Task description should not be empty"}
        assert client.get("/api/todo").json() == ["[ ] 1. Write a test that fails"]

    def test_put_unknown_task_is_not_found(self, client):
        res = client.put("/api/todo/7", json={"task": "New text"})
        assert res.status_code == 404
        assert res.json() == {"error": "Task 7 not found"}
        # No task was created as a side effect
        assert client.get("/api/todo").json() == []


class TestValidationErrors:
    def test_add_without_task_field(self, client):
        res = client.post("/api/todo", json={"title": "wrong field"})
        assert res.status_code == 422
        body = res.json()
        assert body.get("error") == "ValidationError"
        assert body.get("message") == "Request validation failed"
        assert isinstance(body.get("detail"), list)

    def test_patch_with_non_boolean_completed(self, client):
        add_task(client, FIRST)
        res = client.patch("/api/todo/1", json={"completed": "maybe"})
        assert res.status_code == 422
        assert res.json().get("error") == "ValidationError"

    def test_non_integer_id(self, client):
        res = client.put("/api/todo/abc", json={"task": "x"})
        assert res.status_code == 422


class TestSQLiteBackend:
    def test_tasks_survive_app_restart(self, tmp_path):
        settings = Settings(persistence_backend="sqlite", sqlite_db_path=str(tmp_path / "todos.db"))

        client = TestClient(create_app(settings))
        assert client.get("/").json()["backend"] == "sqlite"
        add_task(client, FIRST)
        add_task(client, SECOND)
        client.patch("/api/todo/1", json={"completed": True})

        restarted = TestClient(create_app(settings))
        assert restarted.get("/api/todo").json() == [
            "[√] 1. Write a test that fails",
            "[ ] 2. Write code to make the test pass",
        ]
        assert add_task(restarted, "Refactor") == 3


class TestOpenAPI:
    def test_schema_is_written(self, tmp_path):
        path = generate_openapi(str(tmp_path / "interfaces" / "openapi.json"))
        with open(path, encoding="utf-8") as f:
            schema = json.load(f)
        assert "/api/todo" in schema["paths"]
        assert "/api/todo/{task_id}" in schema["paths"]
        assert {t["name"] for t in schema["tags"]} >= {"health", "todo"}
