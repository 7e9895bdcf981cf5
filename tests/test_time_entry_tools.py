import json
from datetime import datetime, timezone

import pytest

CURRENT_USER = {"id": "u1", "name": "Ada", "activeWorkspace": "w1", "defaultWorkspace": "w1"}


@pytest.mark.asyncio
async def test_list_time_entries_looks_up_current_user_once(fake, call):
    entries = [{"id": "e1", "description": "Docs"}]
    fake.add("GET", "/user", json=CURRENT_USER)
    fake.add("GET", "/workspaces/w1/user/u1/time-entries", json=entries)

    text = await call("list_time_entries", {"workspace_id": "w1"})

    assert json.loads(text) == entries
    assert fake.paths() == [
        ("GET", "/user"),
        ("GET", "/workspaces/w1/user/u1/time-entries"),
    ]


@pytest.mark.asyncio
async def test_list_time_entries_with_user_id_skips_lookup(fake, call):
    fake.add("GET", "/workspaces/w1/user/u2/time-entries", json=[])

    await call(
        "list_time_entries",
        {
            "workspace_id": "w1",
            "user_id": "u2",
            "start": "2024-01-01T00:00:00Z",
            "project": "p1",
            "page_size": 20,
        },
    )

    assert fake.paths() == [("GET", "/workspaces/w1/user/u2/time-entries")]
    params = fake.requests[0].url.params
    assert params["start"] == "2024-01-01T00:00:00Z"
    assert params["project"] == "p1"
    assert params["page-size"] == "20"
    assert "end" not in params


@pytest.mark.asyncio
async def test_stop_timer_defaults_end_to_now(fake, call):
    fake.add("GET", "/user", json=CURRENT_USER)
    fake.add("PATCH", "/workspaces/w1/user/u1/time-entries", json={"id": "e1"})

    before = datetime.now(timezone.utc).replace(microsecond=0)
    text = await call("stop_timer", {"workspace_id": "w1"})
    after = datetime.now(timezone.utc)

    assert text.startswith("Timer stopped:\n")
    assert fake.paths() == [
        ("GET", "/user"),
        ("PATCH", "/workspaces/w1/user/u1/time-entries"),
    ]
    end = datetime.strptime(fake.body()["end"], "%Y-%m-%dT%H:%M:%SZ").replace(tzinfo=timezone.utc)
    assert before <= end <= after


@pytest.mark.asyncio
async def test_stop_timer_forwards_explicit_end(fake, call):
    fake.add("PATCH", "/workspaces/w1/user/u7/time-entries", json={"id": "e1"})

    await call("stop_timer", {"workspace_id": "w1", "user_id": "u7", "end": "2024-01-15T17:00:00Z"})

    assert len(fake.requests) == 1
    assert fake.body() == {"end": "2024-01-15T17:00:00Z"}


@pytest.mark.asyncio
async def test_create_time_entry_without_end_is_running(fake, call):
    created = {"id": "e1", "timeInterval": {"start": "2024-01-15T09:00:00Z", "end": None}}
    fake.add("POST", "/workspaces/w1/time-entries", json=created)

    text = await call(
        "create_time_entry",
        {"workspace_id": "w1", "start": "2024-01-15T09:00:00Z", "description": "Standup", "tag_ids": ["t1"]},
    )

    assert text == "Time entry created (running):\n" + json.dumps(created, indent=2)
    assert fake.body() == {"description": "Standup", "tagIds": ["t1"], "start": "2024-01-15T09:00:00Z"}


@pytest.mark.asyncio
async def test_create_time_entry_with_end_is_completed(fake, call):
    created = {
        "id": "e2",
        "timeInterval": {"start": "2024-01-15T09:00:00Z", "end": "2024-01-15T10:00:00Z", "duration": "PT1H"},
    }
    fake.add("POST", "/workspaces/w1/time-entries", json=created)

    text = await call(
        "create_time_entry",
        {
            "workspace_id": "w1",
            "start": "2024-01-15T09:00:00Z",
            "end": "2024-01-15T10:00:00Z",
            "project_id": "p1",
            "billable": True,
        },
    )

    assert text.startswith("Time entry created (completed):\n")
    assert fake.body()["projectId"] == "p1"
    assert fake.body()["billable"] is True


@pytest.mark.asyncio
async def test_update_and_delete_time_entry(fake, call):
    fake.add("PUT", "/workspaces/w1/time-entries/e1", json={"id": "e1", "description": "Renamed"})
    fake.add("DELETE", "/workspaces/w1/time-entries/e1", status=204)

    updated = await call(
        "update_time_entry",
        {"workspace_id": "w1", "entry_id": "e1", "description": "Renamed", "start": "2024-01-15T09:00:00Z"},
    )
    deleted = await call("delete_time_entry", {"workspace_id": "w1", "entry_id": "e1"})

    assert updated.startswith("Time entry updated:\n")
    assert fake.body(0) == {"description": "Renamed", "start": "2024-01-15T09:00:00Z"}
    assert deleted == "Time entry e1 deleted successfully"


@pytest.mark.asyncio
async def test_get_time_entry(fake, call):
    entry = {"id": "e1", "description": "Docs"}
    fake.add("GET", "/workspaces/w1/time-entries/e1", json=entry)

    assert json.loads(await call("get_time_entry", {"workspace_id": "w1", "entry_id": "e1"})) == entry
