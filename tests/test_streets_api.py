import pytest


@pytest.mark.asyncio
async def test_list_streets_sorted_with_history_flag(app_client):
    resp = await app_client.get("/streets")
    assert resp.status_code == 200
    assert resp.json() == [
        {"name": "Avenida Rivadavia", "has_history": True},
        {"name": "Calle Sin Historia", "has_history": False},
        {"name": "Eduardo Acevedo", "has_history": True},
        {"name": "Enrique Finochietto", "has_history": True},
        {"name": "Esteban Bonorino", "has_history": True},
    ]


@pytest.mark.asyncio
async def test_street_detail(app_client):
    resp = await app_client.get("/streets/detail", params={"name": "Avenida Rivadavia"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["title"] == "Rivadavia, Bernardino"
    assert data["has_history"] is True
    assert data["wikipedia"]["url"] == "https://es.wikipedia.org/wiki/Avenida_Rivadavia"


@pytest.mark.asyncio
async def test_street_detail_without_history(app_client):
    resp = await app_client.get("/streets/detail", params={"name": "Calle Sin Historia"})
    assert resp.status_code == 200
    data = resp.json()
    assert data["has_history"] is False
    assert data["message"]


@pytest.mark.asyncio
async def test_street_detail_not_found(app_client):
    resp = await app_client.get("/streets/detail", params={"name": "avenida rivadavia"})
    assert resp.status_code == 404
    assert resp.json() == {"detail": "street not found"}


@pytest.mark.asyncio
async def test_street_detail_requires_name(app_client):
    resp = await app_client.get("/streets/detail")
    assert resp.status_code == 422
    assert resp.json() == {"detail": "Unprocessable Entity"}


@pytest.mark.asyncio
async def test_restore_street(app_client):
    resp = await app_client.get(
        "/streets/restore", params={"location": "?calle=avenida+rivadavia"}
    )
    assert resp.status_code == 200
    data = resp.json()
    assert data["name"] == "Avenida Rivadavia"
    assert data["location"] == "?calle=Avenida+Rivadavia"
    assert data["panel"]["title"] == "Rivadavia, Bernardino"


@pytest.mark.asyncio
async def test_restore_unknown_street(app_client):
    resp = await app_client.get("/streets/restore", params={"location": "?calle=Nada"})
    assert resp.status_code == 404


@pytest.mark.asyncio
async def test_suggest_streets(app_client):
    resp = await app_client.get("/suggest/streets", params={"q": "rivad"})
    assert resp.status_code == 200
    assert resp.json() == [{"name": "Avenida Rivadavia", "has_history": True}]


@pytest.mark.asyncio
async def test_suggest_streets_respects_limit(app_client):
    resp = await app_client.get("/suggest/streets", params={"q": "ri", "limit": 2})
    assert resp.status_code == 200
    assert [item["name"] for item in resp.json()] == ["Avenida Rivadavia", "Calle Sin Historia"]


@pytest.mark.asyncio
@pytest.mark.parametrize("q", ["r", " r ", ""])
async def test_suggest_short_query_returns_empty(app_client, q):
    resp = await app_client.get("/suggest/streets", params={"q": q})
    assert resp.status_code == 200
    assert resp.json() == []


@pytest.mark.asyncio
async def test_suggest_rejects_out_of_range_limit(app_client):
    resp = await app_client.get("/suggest/streets", params={"q": "ri", "limit": 500})
    assert resp.status_code == 422
