# tests/test_forum.py
from geohub.forum import repository as repo
from tests.utils import auth


async def _post(client, token, category_id, title):
    res = await client.post(
        "/api/forum/posts",
        json={"title": title, "content": f"{title} body", "categoryId": category_id},
        headers=auth(token),
    )
    assert res.status_code == 200, res.text
    return res.json()


async def test_categories_in_insertion_order(client, category):
    await category("Job Frustrations")
    await category("Research Ideas")
    await category("Success Stories")

    res = await client.get("/api/forum/categories")
    assert res.status_code == 200
    assert [c["name"] for c in res.json()] == [
        "Job Frustrations",
        "Research Ideas",
        "Success Stories",
    ]


async def test_posts_filtered_by_category_newest_first_with_reply_counts(
    client, register, category
):
    _, token = await register("kariuki")
    research = await category("Research Ideas")
    advice = await category("Professional Advice")

    first = await _post(client, token, research.id, "Pegmatites of Taita")
    await _post(client, token, advice.id, "Licensing exam tips")
    second = await _post(client, token, research.id, "Fluorspar in Kerio Valley")

    for i in range(3):
        res = await client.post(
            f"/api/forum/posts/{first['id']}/replies",
            json={"content": f"reply {i}"},
            headers=auth(token),
        )
        assert res.status_code == 200

    res = await client.get(f"/api/forum/posts?categoryId={research.id}")
    assert res.status_code == 200
    posts = res.json()
    assert [p["id"] for p in posts] == [second["id"], first["id"]]
    assert all(p["categoryId"] == research.id for p in posts)
    counts = {p["id"]: p["replyCount"] for p in posts}
    assert counts == {first["id"]: 3, second["id"]: 0}
    assert posts[0]["author"]["username"] == "kariuki"
    assert "password" not in posts[0]["author"]
    assert posts[0]["category"]["name"] == "Research Ideas"

    everything = (await client.get("/api/forum/posts")).json()
    assert len(everything) == 3


async def test_author_comes_from_token_not_body(client, register, category):
    victim, _ = await register("victim")
    me, token = await register("poster")
    cat = await category()

    res = await client.post(
        "/api/forum/posts",
        json={"title": "t", "content": "c", "categoryId": cat.id, "authorId": victim["id"]},
        headers=auth(token),
    )
    assert res.status_code == 200
    assert res.json()["authorId"] == me["id"]


async def test_get_post_and_missing_post(client, register, category):
    _, token = await register("nduta")
    cat = await category()
    post = await _post(client, token, cat.id, "Core shed etiquette")

    res = await client.get(f"/api/forum/posts/{post['id']}")
    assert res.status_code == 200
    body = res.json()
    assert body["title"] == "Core shed etiquette"
    assert body["author"]["username"] == "nduta"
    assert body["category"]["id"] == cat.id

    missing = await client.get("/api/forum/posts/4040")
    assert missing.status_code == 404
    assert missing.json() == {"message": "Post not found"}


async def test_post_with_unknown_category_is_rejected(client, register):
    _, token = await register("lost")
    res = await client.post(
        "/api/forum/posts",
        json={"title": "t", "content": "c", "categoryId": 999},
        headers=auth(token),
    )
    assert res.status_code == 400


async def test_post_missing_title_is_validation_error(client, register, category):
    _, token = await register("sloppy")
    cat = await category()
    res = await client.post(
        "/api/forum/posts",
        json={"content": "c", "categoryId": cat.id},
        headers=auth(token),
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid input"


async def test_replies_oldest_first_and_missing_post(client, register, category):
    _, token = await register("omondi")
    cat = await category()
    post = await _post(client, token, cat.id, "Seismic refraction gear")

    for text in ("first", "second", "third"):
        await client.post(
            f"/api/forum/posts/{post['id']}/replies",
            json={"content": text},
            headers=auth(token),
        )

    res = await client.get(f"/api/forum/posts/{post['id']}/replies")
    assert [r["content"] for r in res.json()] == ["first", "second", "third"]
    assert res.json()[0]["author"]["username"] == "omondi"

    res = await client.post(
        "/api/forum/posts/999/replies", json={"content": "into the void"}, headers=auth(token)
    )
    assert res.status_code == 404


async def test_repository_counts_replies(db, register, category):
    user, _ = await register("repo")
    cat = await category()
    post = await repo.create_forum_post(
        db, {"title": "t", "content": "c", "author_id": user["id"], "category_id": cat.id}
    )
    for _ in range(2):
        await repo.create_forum_reply(
            db, {"content": "r", "author_id": user["id"], "post_id": post.id}
        )
    await db.commit()

    rows = await repo.get_forum_posts(db, cat.id)
    assert len(rows) == 1
    _post_row, author, category_row, reply_count = rows[0]
    assert author.id == user["id"]
    assert category_row.id == cat.id
    assert reply_count == 2

    assert await repo.get_forum_posts(db, cat.id + 100) == []
