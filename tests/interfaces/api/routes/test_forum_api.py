"""HTTP tests for the discussion forum."""

from __future__ import annotations


def test_post_comment_and_react(client, make_user, login):
    make_user(email="owner@example.com", name="Owner")
    make_user(email="helper@example.com", name="Helper")
    owner = login("owner@example.com")
    helper = login("helper@example.com")

    created = client.post(
        "/forum/", json={"title": "Submission size", "content": "Is 20MB ok?"}, headers=owner
    )
    assert created.status_code == 201, created.text
    post_id = created.json()["id"]

    comment = client.post(
        f"/forum/{post_id}/comments", json={"content": "Yes, up to 50MB"}, headers=helper
    )
    assert comment.status_code == 201, comment.text

    reaction = client.post(f"/forum/{post_id}/react", json={"type": "SUPPORT"}, headers=helper)
    assert reaction.status_code == 200
    assert reaction.json()["SUPPORT"] == 1

    page = client.get("/forum/").json()
    assert page["meta"]["total"] == 1
    assert page["data"][0]["comment_count"] == 1
    assert page["data"][0]["author"]["name"] == "Owner"

    comments = client.get(f"/forum/{post_id}/comments").json()
    assert [item["content"] for item in comments] == ["Yes, up to 50MB"]

    inbox = client.get("/notifications/", headers=owner).json()
    assert "New reply on your forum post" in [item["notification"]["title"] for item in inbox]


def test_abusive_post_returns_blocked_terms(client, make_user, login):
    make_user(email="u1@example.com")

    response = client.post(
        "/forum/",
        json={"title": "Angry", "content": "what the fuck"},
        headers=login("u1@example.com"),
    )

    assert response.status_code == 400
    assert response.json()["detail"]["blocked"] == ["fuck"]


def test_only_admins_resolve_posts_and_delete_comments(client, make_user, login):
    make_user(email="admin@example.com", is_admin=True)
    make_user(email="u1@example.com")
    admin = login("admin@example.com")
    user = login("u1@example.com")
    post_id = client.post("/forum/", json={"title": "Bug", "content": "Crash"}, headers=user).json()[
        "id"
    ]
    comment_id = client.post(
        f"/forum/{post_id}/comments", json={"content": "Same here"}, headers=user
    ).json()["id"]

    assert (
        client.patch(f"/forum/{post_id}", json={"is_resolved": True}, headers=user).status_code
        == 403
    )
    resolved = client.patch(f"/forum/{post_id}", json={"is_resolved": True}, headers=admin)
    assert resolved.status_code == 200
    assert resolved.json()["status"] == "RESOLVED"

    assert client.delete(f"/forum/comments/{comment_id}", headers=user).status_code == 403
    assert client.delete(f"/forum/comments/{comment_id}", headers=admin).status_code == 204
    assert client.delete(f"/forum/comments/{comment_id}", headers=admin).status_code == 404


def test_missing_post_is_not_found(client):
    assert client.get("/forum/999").status_code == 404
