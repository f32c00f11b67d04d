"""Tests for the admin JSON API."""

import pytest

from podsurvey.vocabulary import PODCAST_FORMATS


async def seed(client, count, **fields):
    for i in range(count):
        body = {
            "name": f"Person {i}",
            "topics": ["Technology"],
            "description": "",
            "podcast_formats": [PODCAST_FORMATS[i % 2]],
        }
        body.update(fields)
        resp = await client.post("/api/surveys", json=body)
        assert resp.status_code == 201


@pytest.mark.asyncio
async def test_admin_api_requires_login(client):
    resp = await client.get("/api/admin/surveys")
    assert resp.status_code == 401
    assert resp.json()["detail"] == "Not authorized"


@pytest.mark.asyncio
async def test_list_surveys_paginates_newest_first(admin_client):
    await seed(admin_client, 25)

    resp = await admin_client.get("/api/admin/surveys")
    assert resp.status_code == 200
    data = resp.json()
    assert data["total"] == 25
    assert data["filtered"] == 25
    assert data["total_pages"] == 3
    assert data["per_page"] == 10
    assert len(data["items"]) == 10
    assert data["items"][0]["name"] == "Person 24"

    last = (await admin_client.get("/api/admin/surveys", params={"page": 3})).json()
    assert [item["name"] for item in last["items"]] == [f"Person {i}" for i in range(4, -1, -1)]

    clamped = (await admin_client.get("/api/admin/surveys", params={"page": 99})).json()
    assert clamped["page"] == 3


@pytest.mark.asyncio
async def test_list_surveys_filters(admin_client):
    await seed(admin_client, 6)
    await seed(admin_client, 2, topics=["Sports"], suggested_guest="Serena Williams")

    data = (await admin_client.get("/api/admin/surveys", params={"topic": "Sports"})).json()
    assert data["filtered"] == 2

    data = (await admin_client.get("/api/admin/surveys", params={"search": "serena"})).json()
    assert data["filtered"] == 2

    data = (
        await admin_client.get(
            "/api/admin/surveys",
            params={"topic": "Technology", "podcast_format": PODCAST_FORMATS[0]},
        )
    ).json()
    assert data["filtered"] == 3


@pytest.mark.asyncio
async def test_stats(admin_client):
    await seed(admin_client, 3)
    await seed(admin_client, 1, topics=["Technology", "Science"])

    data = (await admin_client.get("/api/admin/stats")).json()
    assert data["total_surveys"] == 4
    assert data["topics"][0] == {"label": "Technology", "count": 4}
    assert {"label": "Science", "count": 1} in data["topics"]


@pytest.mark.asyncio
async def test_bulk_delete(admin_client):
    await seed(admin_client, 3)
    items = (await admin_client.get("/api/admin/surveys")).json()["items"]

    resp = await admin_client.post(
        "/api/admin/surveys/delete",
        json={"ids": [items[0]["id"], items[1]["id"]]},
    )
    assert resp.status_code == 200
    assert resp.json() == {"deleted": 2}

    remaining = (await admin_client.get("/api/admin/surveys")).json()
    assert [item["id"] for item in remaining["items"]] == [items[2]["id"]]


@pytest.mark.asyncio
async def test_dashboard_state_json(admin_client):
    await seed(admin_client, 12)

    data = (await admin_client.get("/api/admin/dashboard")).json()
    assert data["total_records"] == 12
    assert data["total_pages"] == 2
    assert len(data["records"]) == 10
    assert data["topic_stats"] == [["Technology", 12]]
