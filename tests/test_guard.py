# tests/test_guard.py
import pytest
from fastapi import HTTPException
from sqlalchemy import select, func

from geohub.core.auth import TokenGuard
from geohub.core.permissions import Capability, has_permission, can_delete_resource
from geohub.core.security import TokenIdentity, create_access_token, decode_access_token
from geohub.jobs.models import Job
from geohub.resources.models import Resource
from tests.utils import auth

PROTECTED = [
    ("get", "/api/users/me"),
    ("put", "/api/users/me"),
    ("post", "/api/forum/posts"),
    ("post", "/api/forum/posts/1/replies"),
    ("post", "/api/jobs"),
    ("post", "/api/resources"),
    ("delete", "/api/resources/1"),
    ("post", "/api/events"),
    ("post", "/api/events/1/register"),
    ("get", "/api/events/1/registration"),
    ("get", "/api/messages"),
    ("post", "/api/messages"),
    ("put", "/api/messages/1/read"),
]


@pytest.mark.parametrize("method,path", PROTECTED)
async def test_missing_token_is_401(client, method, path):
    res = await client.request(method, path, json={})
    assert res.status_code == 401
    assert res.json() == {"message": "Access token required"}


@pytest.mark.parametrize("method,path", PROTECTED)
async def test_token_from_other_key_is_403(client, method, path):
    forged = create_access_token(1, "mallory", secret="not-our-secret")
    res = await client.request(method, path, json={}, headers=auth(forged))
    assert res.status_code == 403
    assert res.json() == {"message": "Invalid token"}


async def test_expired_token_is_403(client, register):
    user, _ = await register("expired")
    stale = create_access_token(user["id"], user["username"], expires_minutes=-5)
    res = await client.get("/api/users/me", headers=auth(stale))
    assert res.status_code == 403


async def test_rejected_before_any_write(client, db):
    forged = create_access_token(1, "mallory", secret="not-our-secret")
    job = {
        "title": "Field Geologist",
        "company": "Rift Minerals",
        "location": "Kitui",
        "type": "Full-time",
        "description": "Mapping and sampling",
        "contactEmail": "hr@example.com",
    }
    assert (await client.post("/api/jobs", json=job)).status_code == 401
    assert (await client.post("/api/jobs", json=job, headers=auth(forged))).status_code == 403

    total = (await db.execute(select(func.count(Job.id)))).scalar_one()
    assert total == 0


async def test_guard_decodes_identity():
    guard = TokenGuard("guard-secret")
    token = create_access_token(7, "njeri", secret="guard-secret")

    identity = await guard(authorization=f"Bearer {token}")
    assert identity == TokenIdentity(user_id=7, username="njeri")

    with pytest.raises(HTTPException) as exc:
        await guard(authorization="Basic abc")
    assert exc.value.status_code == 401

    with pytest.raises(HTTPException) as exc:
        await guard(authorization="Bearer not.a.jwt")
    assert exc.value.status_code == 403


def test_decode_round_trip_carries_user_id_and_username():
    token = create_access_token(3, "mutua", secret="k")
    assert decode_access_token(token, secret="k") == TokenIdentity(3, "mutua")


def test_permissions_closed_set():
    member = TokenIdentity(user_id=1, username="a")
    for cap in Capability:
        assert has_permission(member, cap)
    assert not has_permission(None, Capability.POST_JOB)


def test_can_delete_resource_only_for_uploader():
    resource = Resource(title="Map", category="Geological Maps", uploaded_by_id=5)
    assert can_delete_resource(TokenIdentity(5, "owner"), resource)
    assert not can_delete_resource(TokenIdentity(6, "other"), resource)
