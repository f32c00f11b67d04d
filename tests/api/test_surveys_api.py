"""Tests for the public survey submission API."""

from unittest.mock import AsyncMock, patch

import pytest

from podsurvey.errors import StoreError


def payload(**overrides):
    data = {
        "name": "Ada",
        "topics": ["Technology", "Science"],
        "description": "Talk about compilers",
        "podcast_formats": ["Interview"],
        "suggested_guest": "Grace Hopper",
    }
    data.update(overrides)
    return data


@pytest.mark.asyncio
async def test_submit_survey(client, app):
    resp = await client.post("/api/surveys", json=payload())
    assert resp.status_code == 201
    assert resp.json() == {"success": True, "message": "Thank you for your submission!"}

    stored = await app.state.survey_store.list()
    assert len(stored) == 1
    assert stored[0].topics == ("Technology", "Science")
    assert stored[0].suggested_guest == "Grace Hopper"


@pytest.mark.asyncio
async def test_anonymous_submission_without_guest(client, app):
    resp = await client.post("/api/surveys", json=payload(name="", suggested_guest=""))
    assert resp.status_code == 201

    stored = await app.state.survey_store.list()
    assert stored[0].display_name == "Anonymous"
    assert stored[0].suggested_guest is None


@pytest.mark.asyncio
async def test_missing_topic_rejected_before_store(client):
    with patch("podsurvey.store.SurveyStore.insert", new=AsyncMock()) as insert:
        resp = await client.post("/api/surveys", json=payload(topics=[]))

    assert resp.status_code == 400
    assert resp.json() == {"success": False, "message": "Please select at least one topic"}
    insert.assert_not_awaited()


@pytest.mark.asyncio
async def test_missing_format_rejected(client):
    resp = await client.post("/api/surveys", json=payload(podcast_formats=[]))
    assert resp.status_code == 400
    assert resp.json()["message"] == "Please select at least one podcast format"


@pytest.mark.asyncio
async def test_store_failure_is_reported(client):
    with patch("podsurvey.store.SurveyStore.insert", new=AsyncMock(side_effect=StoreError("db down"))):
        resp = await client.post("/api/surveys", json=payload())

    assert resp.status_code == 503
    body = resp.json()
    assert body["success"] is False
    assert "could not save" in body["message"]


@pytest.mark.asyncio
async def test_malformed_body_rejected(client):
    resp = await client.post("/api/surveys", json={"topics": "Technology", "name": "x" * 500})
    assert resp.status_code == 400
