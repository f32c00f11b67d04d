"""Tests for the server-rendered pages."""

import re

import pytest

from conftest import ADMIN_EMAIL


async def seed(client, topics_per_record):
    for i, topics in enumerate(topics_per_record):
        resp = await client.post(
            "/api/surveys",
            json={
                "name": f"Person {i}",
                "topics": topics,
                "description": f"Description {i}",
                "podcast_formats": ["Interview"],
            },
        )
        assert resp.status_code == 201


@pytest.mark.asyncio
async def test_survey_form_page(client):
    resp = await client.get("/")
    assert resp.status_code == 200
    assert "Podcast Survey" in resp.text
    assert "Wellness" in resp.text
    assert "Panel Discussion" in resp.text


@pytest.mark.asyncio
async def test_dashboard_requires_login(client):
    resp = await client.get("/dashboard")
    assert resp.status_code in (302, 307)
    assert resp.headers["location"].endswith("/login?admin")


@pytest.mark.asyncio
async def test_login_without_admin_flag_is_denied(client):
    resp = await client.post("/login", data={"email": ADMIN_EMAIL, "password": "whatever"})
    assert resp.status_code == 403
    assert "Access denied. Invalid URL." in resp.text
    assert "session_id" not in resp.cookies


@pytest.mark.asyncio
async def test_login_with_wrong_password(client):
    resp = await client.post("/login?admin", data={"email": ADMIN_EMAIL, "password": "nope"})
    assert resp.status_code == 401
    assert "Invalid login credentials" in resp.text


@pytest.mark.asyncio
async def test_login_page_redirects_signed_in_admin(admin_client):
    resp = await admin_client.get("/login?admin")
    assert resp.status_code in (302, 307)
    assert resp.headers["location"].endswith("/dashboard")


@pytest.mark.asyncio
async def test_dashboard_renders_stats_and_first_page(admin_client):
    await seed(admin_client, [["Technology"]] * 7 + [["Business"]] * 5)

    resp = await admin_client.get("/dashboard")
    assert resp.status_code == 200
    assert "Survey Dashboard" in resp.text
    assert "Showing 1-10 of 12" in resp.text
    assert "Page 1 of 2" in resp.text


@pytest.mark.asyncio
async def test_filter_and_navigation_actions(admin_client):
    await seed(admin_client, [["Technology"]] * 7 + [["Business"]] * 5)
    await admin_client.get("/dashboard")

    resp = await admin_client.post("/dashboard/page/next")
    assert resp.status_code == 303
    assert "Showing 11-12 of 12" in (await admin_client.get("/dashboard")).text

    await admin_client.post(
        "/dashboard/filters",
        data={"topic": "Technology", "podcast_format": "all", "search": ""},
    )
    page = (await admin_client.get("/dashboard")).text
    assert "Showing 1-7 of 7" in page
    assert "Page 1 of" not in page

    await admin_client.post("/dashboard/filters/clear")
    assert "Showing 1-10 of 12" in (await admin_client.get("/dashboard")).text


@pytest.mark.asyncio
async def test_select_and_bulk_delete(admin_client):
    await seed(admin_client, [["Technology"]] * 3)
    page = (await admin_client.get("/dashboard")).text
    ids = re.findall(r"/dashboard/select/([0-9a-f-]{36})", page)
    assert len(ids) == 3

    await admin_client.post(f"/dashboard/select/{ids[0]}")
    page = (await admin_client.get("/dashboard")).text
    assert "Delete Selected (1)" in page

    resp = await admin_client.post("/dashboard/delete")
    assert resp.status_code == 303
    page = (await admin_client.get("/dashboard")).text
    assert "Showing 1-2 of 2" in page
    assert ids[0] not in page
    assert "Delete Selected" not in page


@pytest.mark.asyncio
async def test_reloading_dashboard_shows_new_surveys(admin_client):
    await admin_client.get("/dashboard")
    await seed(admin_client, [["Science"]])

    page = (await admin_client.get("/dashboard")).text
    assert "Showing 1-1 of 1" in page


@pytest.mark.asyncio
async def test_reload_keeps_filters_and_page(admin_client):
    await seed(admin_client, [["Technology"]] * 12)
    await admin_client.get("/dashboard")
    await admin_client.post(
        "/dashboard/filters",
        data={"topic": "Technology", "podcast_format": "all", "search": ""},
    )
    await admin_client.post("/dashboard/page/next")
    await seed(admin_client, [["Business"]])

    page = (await admin_client.get("/dashboard")).text
    assert "Showing 11-12 of 12" in page


@pytest.mark.asyncio
async def test_refresh_action(admin_client):
    await admin_client.get("/dashboard")
    await seed(admin_client, [["Science"]])

    resp = await admin_client.post("/dashboard/refresh")
    assert resp.status_code == 303
    assert "Showing 1-1 of 1" in (await admin_client.get("/dashboard")).text


@pytest.mark.asyncio
async def test_logout(admin_client):
    await admin_client.get("/dashboard")
    resp = await admin_client.post("/logout")
    assert resp.status_code == 303
    assert resp.headers["location"].endswith("/login?admin")

    resp = await admin_client.get("/dashboard")
    assert resp.status_code in (302, 307)


@pytest.mark.asyncio
async def test_theme_toggle_sets_cookie(client):
    resp = await client.get("/theme/toggle", params={"next": "/survey"})
    assert resp.status_code in (302, 307)
    assert resp.headers["location"] == "/survey"
    assert resp.cookies["theme"] == "dark"

    page = await client.get("/survey")
    assert "theme-dark" in page.text

    resp = await client.get("/theme/toggle", params={"next": "//evil.example"})
    assert resp.headers["location"] == "/"
