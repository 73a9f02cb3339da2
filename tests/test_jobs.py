# tests/test_jobs.py
from geohub.jobs import repository as repo
from tests.utils import auth


def _job(title, **overrides):
    body = {
        "title": title,
        "company": "Rift Minerals Ltd",
        "location": "Nairobi",
        "type": "Full-time",
        "description": "Exploration geology role",
        "requirements": ["BSc Geology", "Driving licence"],
        "contactEmail": "careers@example.com",
    }
    body.update(overrides)
    return body


async def test_limit_returns_most_recent(client, register):
    _, token = await register("recruiter")
    ids = []
    for i in range(5):
        res = await client.post("/api/jobs", json=_job(f"Job {i}"), headers=auth(token))
        assert res.status_code == 200
        ids.append(res.json()["id"])

    res = await client.get("/api/jobs?limit=2")
    assert res.status_code == 200
    jobs = res.json()
    assert [j["id"] for j in jobs] == [ids[4], ids[3]]
    assert jobs[0]["postedBy"]["username"] == "recruiter"
    assert "password" not in jobs[0]["postedBy"]

    assert len((await client.get("/api/jobs")).json()) == 5


async def test_create_job_sets_poster_and_lists(client, register):
    user, token = await register("mining_hr")
    res = await client.post(
        "/api/jobs",
        json=_job("Mine Geologist", salary="KES 250,000", postedById=12345),
        headers=auth(token),
    )
    assert res.status_code == 200
    job = res.json()
    assert job["postedById"] == user["id"]
    assert job["requirements"] == ["BSc Geology", "Driving licence"]
    assert job["salary"] == "KES 250,000"
    assert job["expiresAt"] is None

    detail = await client.get(f"/api/jobs/{job['id']}")
    assert detail.status_code == 200
    assert detail.json()["postedBy"]["id"] == user["id"]


async def test_missing_job_is_404(client):
    res = await client.get("/api/jobs/777")
    assert res.status_code == 404
    assert res.json() == {"message": "Job not found"}


async def test_invalid_job_body(client, register):
    _, token = await register("careless")
    body = _job("No company")
    del body["company"]
    res = await client.post("/api/jobs", json=body, headers=auth(token))
    assert res.status_code == 400

    res = await client.post(
        "/api/jobs", json=_job("Bad reqs", requirements="not a list"), headers=auth(token)
    )
    assert res.status_code == 400


async def test_search_and_type_filters(client, register):
    _, token = await register("board")
    await client.post("/api/jobs", json=_job("Hydrogeologist"), headers=auth(token))
    await client.post(
        "/api/jobs",
        json=_job("GIS Intern", type="Internship", company="Survey of Kenya", location="Mombasa"),
        headers=auth(token),
    )

    res = await client.get("/api/jobs?search=hydro")
    assert [j["title"] for j in res.json()] == ["Hydrogeologist"]

    res = await client.get("/api/jobs?search=survey")
    assert [j["title"] for j in res.json()] == ["GIS Intern"]

    res = await client.get("/api/jobs?type=Internship")
    assert [j["title"] for j in res.json()] == ["GIS Intern"]

    res = await client.get("/api/jobs?location=Mombasa")
    assert [j["title"] for j in res.json()] == ["GIS Intern"]


async def test_repository_default_limit(db, register):
    user, _ = await register("bulk")
    for i in range(3):
        await repo.create_job(
            db,
            {
                "title": f"Job {i}",
                "company": "C",
                "location": "L",
                "type": "Contract",
                "description": "D",
                "contact_email": "c@example.com",
                "posted_by_id": user["id"],
            },
        )
    await db.commit()

    rows = await repo.get_jobs(db)
    assert len(rows) == 3
    job, poster = rows[0]
    assert job.title == "Job 2"
    assert poster.id == user["id"]
    assert await repo.get_job(db, 9999) is None
