# tests/test_users.py
from tests.utils import auth


async def test_update_profile_fields(client, register):
    user, token = await register("chebet")
    res = await client.put(
        "/api/users/me",
        json={
            "bio": "Hydrogeologist, borehole siting in Turkana",
            "fieldExperience": "6 years",
            "skills": ["hydrogeology", "resistivity surveys"],
            "availability": "Open to consulting",
        },
        headers=auth(token),
    )
    assert res.status_code == 200
    data = res.json()
    assert data["bio"].startswith("Hydrogeologist")
    assert data["fieldExperience"] == "6 years"
    assert data["skills"] == ["hydrogeology", "resistivity surveys"]
    assert data["fullName"] == user["fullName"]
    assert "password" not in data


async def test_update_password_is_hashed_and_usable(client, register):
    _, token = await register("mwangi")
    res = await client.put("/api/users/me", json={"password": "new-secret-9"}, headers=auth(token))
    assert res.status_code == 200
    assert "password" not in res.json()

    old = await client.post(
        "/api/auth/login", json={"email": "mwangi@example.com", "password": "rift-valley-42"}
    )
    assert old.status_code == 401
    new = await client.post(
        "/api/auth/login", json={"email": "mwangi@example.com", "password": "new-secret-9"}
    )
    assert new.status_code == 200


async def test_update_username_collision(client, register):
    await register("taken")
    _, token = await register("someone")
    res = await client.put("/api/users/me", json={"username": "taken"}, headers=auth(token))
    assert res.status_code == 400


async def test_me_for_deleted_account_is_404(client):
    from geohub.core.security import create_access_token

    token = create_access_token(999, "ghost")
    res = await client.get("/api/users/me", headers=auth(token))
    assert res.status_code == 404
    assert res.json() == {"message": "User not found"}
