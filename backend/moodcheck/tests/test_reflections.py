"""
Tests for reflection, statistics and review endpoints.
"""
from conftest import auth_headers


def submit(client, headers, mood=4, sleep_hours=7.5, age=19, text="Felt fine"):
    return client.post(
        "/api/reflections",
        headers=headers,
        json={"mood": mood, "sleep_hours": sleep_hours, "age": age, "text": text}
    )


def test_submit_and_list_own_reflections(client):
    headers = auth_headers(client, "ann@example.com")
    response = submit(client, headers)
    assert response.status_code == 201
    assert response.json()["email"] == "ann@example.com"

    mine = client.get("/api/reflections/mine", headers=headers).json()
    assert [entry["id"] for entry in mine] == [response.json()["id"]]


def test_submit_requires_session(client):
    response = client.post("/api/reflections", json={"mood": 3, "sleep_hours": 6})
    assert response.status_code == 401


def test_submit_rejects_out_of_range_mood(client):
    headers = auth_headers(client, "bob@example.com")
    assert submit(client, headers, mood=6).status_code == 422


def test_hide_keeps_entry_in_admin_stats(client):
    user = auth_headers(client, "cy@example.com")
    admin = auth_headers(client, "boss@example.com", role="admin")
    entry_id = submit(client, user, mood=2).json()["id"]
    submit(client, user, mood=4)

    response = client.post(f"/api/reflections/{entry_id}/hide", headers=user)
    assert response.status_code == 204
    assert len(client.get("/api/reflections/mine", headers=user).json()) == 1

    stats = client.get("/api/stats/anonymized", headers=admin).json()
    assert stats["total_submissions"] == 2
    assert stats["average_mood"] == 3
    assert stats["mood_distribution"]["2"] == 1


def test_cannot_hide_someone_elses_entry(client):
    owner = auth_headers(client, "dee@example.com")
    other = auth_headers(client, "eli@example.com")
    entry_id = submit(client, owner).json()["id"]
    assert client.post(f"/api/reflections/{entry_id}/hide", headers=other).status_code == 404


def test_admin_endpoints_reject_user_role(client):
    user = auth_headers(client, "fin@example.com")
    assert client.get("/api/stats/anonymized", headers=user).status_code == 403
    assert client.get("/api/reflections", headers=user).status_code == 403
    assert client.get("/api/reviews", headers=user).status_code == 403


def test_admin_can_remove_and_clear(client):
    user = auth_headers(client, "gia@example.com")
    admin = auth_headers(client, "chief@example.com", role="admin")
    entry_id = submit(client, user).json()["id"]
    submit(client, user)

    assert client.delete(f"/api/reflections/{entry_id}", headers=admin).status_code == 204
    assert len(client.get("/api/reflections", headers=admin).json()) == 1
    assert client.delete("/api/reflections", headers=admin).status_code == 204
    assert client.get("/api/reflections", headers=admin).json() == []


def test_review_flow(client):
    user = auth_headers(client, "hugo@example.com")
    admin = auth_headers(client, "lead@example.com", role="admin")

    created = client.post("/api/reviews", headers=user, json={"rating": 7, "comment": "y" * 400})
    assert created.status_code == 201
    review = created.json()
    assert review["rating"] == 5
    assert len(review["comment"]) == 300
    assert review["user"] == "hugo@example.com"

    patched = client.patch(f"/api/reviews/{review['id']}", headers=user, json={"comment": "Helpful"})
    assert patched.json()["comment"] == "Helpful"
    assert patched.json()["rating"] == 5

    assert len(client.get("/api/reviews/mine", headers=user).json()) == 1
    assert len(client.get("/api/reviews", headers=admin).json()) == 1

    assert client.delete(f"/api/reviews/{review['id']}", headers=admin).status_code == 204
    assert client.get("/api/reviews/mine", headers=user).json() == []


def test_review_owner_check(client):
    author = auth_headers(client, "ida@example.com")
    other = auth_headers(client, "jay@example.com")
    review_id = client.post("/api/reviews", headers=author, json={"rating": 4}).json()["id"]
    assert client.patch(f"/api/reviews/{review_id}", headers=other, json={"rating": 1}).status_code == 403
    assert client.delete(f"/api/reviews/{review_id}", headers=other).status_code == 403


def test_health(client):
    assert client.get("/health").json() == {"status": "healthy"}


def test_review_rating_must_be_finite(client):
    user = auth_headers(client, "kai@example.com")
    assert client.post("/api/reviews", headers=user, json={"rating": "nan"}).status_code == 422
    assert client.post("/api/reviews", headers=user, json={"rating": "inf"}).status_code == 422

    review_id = client.post("/api/reviews", headers=user, json={"rating": 4}).json()["id"]
    response = client.patch(f"/api/reviews/{review_id}", headers=user, json={"rating": "nan"})
    assert response.status_code == 422
    assert client.get("/api/reviews/mine", headers=user).json()[0]["rating"] == 4
