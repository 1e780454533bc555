import pytest
from fastapi import HTTPException
from fastapi.testclient import TestClient
from openpyxl import load_workbook

from alumni.api import dependencies, router_meta, router_people, router_search
from alumni.main import create_app


@pytest.fixture()
def client(loaded_store):
    with TestClient(create_app(store=loaded_store)) as c:
        yield c


def test_health(client):
    body = client.get("/api/health").json()
    assert body["status"] == "ok"
    assert body["records"] == 3
    assert body["headers"] == 11
    assert body["message"] == ""


def test_people_without_query_lists_everyone(client):
    body = client.get("/api/people").json()
    assert body["count"] == body["total"] == 3
    assert [p["name"] for p in body["people"]] == ["Bob Lee", "Cara Khan", "Dev Roy"]


def test_people_search_is_case_insensitive(client):
    body = client.get("/api/people", params={"q": "  ENG "}).json()
    assert body["query"] == "  ENG "
    assert [p["name"] for p in body["people"]] == ["Bob Lee"]
    assert body["people"][0]["initials"] == "BL"


def test_people_no_matches_message(client):
    body = client.get("/api/people", params={"q": "xyz"}).json()
    assert body["count"] == 0
    assert body["message"] == "No matches found."


def test_people_query_does_not_leak_into_shared_store(client, loaded_store):
    client.get("/api/people", params={"q": "cara"})
    assert loaded_store.query == ""
    assert len(loaded_store.visible) == 3


def test_headers_reports_resolution(client):
    body = client.get("/api/headers").json()
    fields = {f["field"]: f["header"] for f in body["fields"]}
    assert fields["name"] == "Name"
    assert fields["role"] == "Title/ Designation/Role"
    assert fields["phone"] is None
    assert body["unmatched_headers"] == ["Notes"]


def test_reload_failure_keeps_records(client, monkeypatch):
    async def failing_load(store, *args, **kwargs):
        store.record_failure("Failed to load alumni data: HTTP 500")
        return store

    monkeypatch.setattr(router_meta, "load_directory", failing_load)
    body = client.post("/api/reload").json()

    assert body["status"] == "error"
    assert body["message"] == "Failed to load alumni data: HTTP 500"
    assert body["records"] == 3
    assert client.get("/api/people").json()["count"] == 3


def test_export_writes_matching_people(client, monkeypatch, tmp_path):
    monkeypatch.setattr(router_people, "EXPORT_FOLDER", tmp_path)

    response = client.get("/api/people/export", params={"q": "lee"})
    assert response.status_code == 200

    saved = list(tmp_path.glob("Alumni_Directory_*.xlsx"))
    assert len(saved) == 1
    wb = load_workbook(saved[0])
    assert wb.sheetnames == ["Summary", "People"]
    people = wb["People"]
    assert people.cell(row=1, column=1).value == "Name"
    assert people.cell(row=2, column=1).value == "Bob Lee"
    assert people.max_row == 2


def test_export_unavailable_when_nothing_ever_loaded(monkeypatch, tmp_path):
    from alumni.data.store import DirectoryStore

    store = DirectoryStore()
    store.record_failure("Failed to load alumni data: HTTP 404")
    monkeypatch.setattr(router_people, "EXPORT_FOLDER", tmp_path)

    with TestClient(create_app(store=store)) as c:
        response = c.get("/api/people/export")

    assert response.status_code == 503
    assert list(tmp_path.iterdir()) == []


def test_get_store_before_startup_is_503():
    dependencies.set_store(None)
    with pytest.raises(HTTPException) as exc:
        dependencies.get_store()
    assert exc.value.status_code == 503


def test_live_search_sends_initial_and_debounced_views(client, monkeypatch):
    monkeypatch.setattr(router_search, "SEARCH_DEBOUNCE_MS", 10)

    with client.websocket_connect("/ws/search") as ws:
        first = ws.receive_json()
        assert first["query"] == ""
        assert first["count"] == 3

        for text in ("e", "en", "eng"):
            ws.send_text(text)

        view = ws.receive_json()
        while view["query"] != "eng":
            view = ws.receive_json()

    assert [p["name"] for p in view["people"]] == ["Bob Lee"]
