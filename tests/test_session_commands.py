import pytest


@pytest.mark.asyncio
async def test_select_command_returns_directives(app_client):
    resp = await app_client.post(
        "/session/commands", json={"command": "select", "name": "Avenida Rivadavia"}
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["found"] is True
    assert data["state"] == {"selected_name": "Avenida Rivadavia", "previous_name": None}

    directives = data["directives"]
    assert [d["type"] for d in directives] == [
        "segment_style",
        "segment_style",
        "frame_viewport",
        "persist",
        "show_panel",
    ]
    assert {d["segment_id"] for d in directives[:2]} == {"riv-1", "riv-2"}
    assert directives[0]["color"] == "#e53e3e"
    assert directives[0]["weight"] == 5
    assert directives[2]["bounds"] == [[-34.62, -58.42], [-34.60, -58.39]]
    assert directives[2]["padding"] == 50
    assert directives[2]["max_zoom"] == 16
    assert directives[3]["location"] == "?calle=Avenida+Rivadavia"
    assert directives[4]["panel"]["title"] == "Rivadavia, Bernardino"


@pytest.mark.asyncio
async def test_select_restores_previous_selection_from_client_state(app_client):
    resp = await app_client.post(
        "/session/commands",
        json={
            "command": "select",
            "name": "Calle Sin Historia",
            "state": {"selected_name": "Esteban Bonorino"},
        },
    )
    data = resp.json()
    assert data["state"] == {
        "selected_name": "Calle Sin Historia",
        "previous_name": "Esteban Bonorino",
    }
    first = data["directives"][0]
    assert (first["segment_id"], first["tier"], first["color"]) == (
        "bon-1",
        "has_history",
        "#38a169",
    )
    panel = data["directives"][-1]["panel"]
    assert panel["has_history"] is False


@pytest.mark.asyncio
async def test_select_unknown_street(app_client):
    resp = await app_client.post(
        "/session/commands",
        json={"command": "select", "name": "Calle Inexistente", "state": {}},
    )
    assert resp.status_code == 200
    assert resp.json() == {
        "found": False,
        "state": {"selected_name": None, "previous_name": None},
        "directives": [],
        "results": [],
    }


@pytest.mark.asyncio
async def test_select_requires_name(app_client):
    resp = await app_client.post("/session/commands", json={"command": "select"})
    assert resp.status_code == 400
    assert resp.json() == {"detail": "name is required for select"}


@pytest.mark.asyncio
async def test_unknown_command_rejected(app_client):
    resp = await app_client.post("/session/commands", json={"command": "zoom"})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_clear_command(app_client):
    resp = await app_client.post(
        "/session/commands",
        json={"command": "clear", "state": {"selected_name": "Eduardo Acevedo"}},
    )
    data = resp.json()
    assert data["state"] == {"selected_name": None, "previous_name": "Eduardo Acevedo"}
    assert [d["type"] for d in data["directives"]] == ["segment_style", "clear_persisted"]


@pytest.mark.asyncio
async def test_search_command(app_client):
    resp = await app_client.post(
        "/session/commands", json={"command": "search", "query": "finochietto"}
    )
    data = resp.json()
    assert data["results"] == [{"name": "Enrique Finochietto", "has_history": True}]
    assert data["directives"] == []


@pytest.mark.asyncio
async def test_restore_command_does_not_persist(app_client):
    resp = await app_client.post(
        "/session/commands",
        json={"command": "restore", "location": "https://mapa.example/?calle=eduardo+acevedo"},
    )
    data = resp.json()
    assert data["found"] is True
    assert data["state"]["selected_name"] == "Eduardo Acevedo"
    types = [d["type"] for d in data["directives"]]
    assert "persist" not in types
    panel = data["directives"][-1]["panel"]
    assert panel["wikipedia"] is None
    assert [p["name"] for p in panel["previous_names"]] == ["Calle 7", "Del Sol"]
