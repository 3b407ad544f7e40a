"""HTTP tests for the notification inbox and its administration."""

from __future__ import annotations


def _publish(client, headers, **payload):
    response = client.post("/admin/notifications/", json=payload, headers=headers)
    assert response.status_code == 201, response.text
    return response.json()


def test_inbox_scenario(client, make_user, login):
    make_user(email="admin@example.com", is_admin=True)
    make_user(email="u1@example.com", institution="IIT Delhi")
    admin_headers = login("admin@example.com")
    user_headers = login("u1@example.com")

    first = _publish(client, admin_headers, title="Welcome", body="Hello", target_all=True)
    second = _publish(client, admin_headers, title="Round 2", body="Starts Monday", target_all=True)

    inbox = client.get("/notifications/", headers=user_headers)
    assert inbox.status_code == 200
    items = inbox.json()
    assert [item["notification"]["title"] for item in items] == ["Round 2", "Welcome"]
    assert all(item["is_read"] is False for item in items)

    response = client.post(
        "/notifications/read",
        json={"notification_id": first["id"]},
        headers=user_headers,
    )
    assert response.status_code == 200
    assert response.json() == {"success": True}

    items = client.get("/notifications/", headers=user_headers).json()
    read_state = {item["notification_id"]: item["is_read"] for item in items}
    assert read_state == {first["id"]: True, second["id"]: False}
    assert len(items) == 2


def test_admin_only_notification_is_not_listed_for_participants(client, make_user, login):
    make_user(email="admin@example.com", is_admin=True)
    make_user(email="u1@example.com")
    admin_headers = login("admin@example.com")

    _publish(client, admin_headers, title="Moderation", body="Queue", target_admin_only=True)

    assert client.get("/notifications/", headers=login("u1@example.com")).json() == []
    titles = [
        item["notification"]["title"]
        for item in client.get("/notifications/", headers=admin_headers).json()
    ]
    assert titles == ["Moderation"]


def test_admin_summary_counts_unread_admin_notifications(client, make_user, login):
    make_user(email="admin@example.com", is_admin=True)
    headers = login("admin@example.com")
    created = _publish(client, headers, title="Alert", body="Check", target_admin_only=True)

    client.get("/notifications/", headers=headers)
    summary = client.get("/admin/notifications/", headers=headers).json()
    assert summary["unread_admin_notifications"] == 1
    assert summary["total"] == (
        summary["unread_admin_notifications"]
        + summary["recent_participant_messages"]
        + summary["recent_forum_comments"]
    )

    client.post("/notifications/read", json={"notification_id": created["id"]}, headers=headers)
    summary = client.get("/admin/notifications/", headers=headers).json()
    assert summary["unread_admin_notifications"] == 0


def test_publishing_records_author_and_targets(client, make_user, login):
    admin_id = make_user(email="admin@example.com", is_admin=True)
    target_id = make_user(email="target@example.com")

    created = _publish(
        client,
        login("admin@example.com"),
        title="Personal",
        body="Only for you",
        target_user_ids=[target_id],
        target_institutions=["IIT Delhi"],
    )

    assert created["created_by_id"] == admin_id
    assert created["target_all"] is False
    assert created["target_user_ids"] == [target_id]
    assert created["target_institutions"] == ["IIT Delhi"]


def test_blank_title_is_rejected(client, make_user, login):
    make_user(email="admin@example.com", is_admin=True)

    response = client.post(
        "/admin/notifications/",
        json={"title": "   ", "body": "Body"},
        headers=login("admin@example.com"),
    )

    assert response.status_code == 400


def test_participants_cannot_publish_or_read_summary(client, make_user, login):
    make_user(email="u1@example.com")
    headers = login("u1@example.com")

    assert (
        client.post(
            "/admin/notifications/", json={"title": "T", "body": "B"}, headers=headers
        ).status_code
        == 403
    )
    assert client.get("/admin/notifications/", headers=headers).status_code == 403


def test_mark_read_validation(client, make_user, login):
    make_user(email="u1@example.com")
    headers = login("u1@example.com")

    assert client.post("/notifications/read", json={}, headers=headers).status_code == 422
    assert (
        client.post(
            "/notifications/read", json={"notification_id": 12345}, headers=headers
        ).status_code
        == 404
    )
