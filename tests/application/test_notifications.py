"""Behaviour of notification authoring, delivery and acknowledgement."""

from __future__ import annotations

from itertools import product
import threading

import pytest
from sqlalchemy import delete, func, select

from competition_hub.application.use_cases.notifications import (
    count_unread_admin_notifications,
    create_notification,
    fetch_notifications_for_user,
    get_admin_notification_summary,
    mark_notification_read,
)
from competition_hub.domain.errors import NotFoundError, ValidationError
from competition_hub.domain.targeting import NotificationAudience, is_visible_to
from competition_hub.infrastructure.database import SessionLocal
from competition_hub.infrastructure.models import NotificationModel, NotificationReceiptModel
from competition_hub.infrastructure.repositories import (
    NotificationReceiptRepository,
    NotificationRepository,
)


def _titles(items) -> list[str]:
    return [item.title for item in items]


def test_repeated_fetches_keep_one_receipt_per_notification(session, make_user):
    user_id = make_user()
    first = create_notification(session, title="Welcome", body="Hello")
    second = create_notification(session, title="Reminder", body="Submit soon")

    for _ in range(3):
        fetch_notifications_for_user(session, user_id=user_id)

    receipts = NotificationReceiptRepository(session)
    assert receipts.count_for(user_id=user_id, notification_id=first.id) == 1
    assert receipts.count_for(user_id=user_id, notification_id=second.id) == 1


def test_overlapping_materialization_does_not_duplicate(session, make_user):
    user_id = make_user()
    notification = create_notification(session, title="Heads up", body="Body")
    receipts = NotificationReceiptRepository(session)

    receipts.insert_if_absent(user_id, [notification.id, notification.id])
    receipts.insert_if_absent(user_id, [notification.id])

    assert receipts.count_for(user_id=user_id, notification_id=notification.id) == 1


def test_fetch_never_resets_read_state(session, make_user):
    user_id = make_user()
    notification = create_notification(session, title="Results", body="Out now")
    fetch_notifications_for_user(session, user_id=user_id)

    mark_notification_read(session, user_id=user_id, notification_id=notification.id)
    read_at = NotificationReceiptRepository(session).get(
        user_id=user_id, notification_id=notification.id
    ).read_at

    items = fetch_notifications_for_user(session, user_id=user_id)

    assert len(items) == 1
    assert items[0].receipt.is_read is True
    assert items[0].receipt.read_at == read_at


def test_mark_read_creates_missing_receipt(session, make_user):
    user_id = make_user()
    notification = create_notification(session, title="Unseen", body="Body")

    mark_notification_read(session, user_id=user_id, notification_id=notification.id)
    mark_notification_read(session, user_id=user_id, notification_id=notification.id)

    receipt = NotificationReceiptRepository(session).get(
        user_id=user_id, notification_id=notification.id
    )
    assert receipt.is_read is True
    assert receipt.read_at is not None
    items = fetch_notifications_for_user(session, user_id=user_id)
    assert [item.receipt.is_read for item in items] == [True]


def test_mark_read_rejects_unknown_notification(session, make_user):
    user_id = make_user()

    with pytest.raises(NotFoundError):
        mark_notification_read(session, user_id=user_id, notification_id=999)
    with pytest.raises(ValidationError):
        mark_notification_read(session, user_id=user_id, notification_id=None)


@pytest.mark.parametrize(
    ("title", "body"),
    [("", "Body"), ("   ", "Body"), ("Title", ""), ("Title", "\t\n")],
)
def test_blank_title_or_body_is_rejected(session, title, body):
    with pytest.raises(ValidationError):
        create_notification(session, title=title, body=body)

    assert session.scalar(select(func.count(NotificationModel.id))) == 0


def test_explicit_user_target_creates_receipt_eagerly(session, make_user):
    target = make_user()
    other_admin = make_user(is_admin=True)

    notification = create_notification(
        session,
        title="Your submission",
        body="Please fix the attachment",
        target_all=False,
        target_admin_only=True,
        target_user_ids=[target, target],
    )

    receipts = NotificationReceiptRepository(session)
    assert receipts.count_for(user_id=target, notification_id=notification.id) == 1
    assert notification.target_user_ids == frozenset({target})
    assert _titles(fetch_notifications_for_user(session, user_id=target)) == [
        "Your submission"
    ]
    assert receipts.count_for(user_id=other_admin, notification_id=notification.id) == 0


def test_admin_only_notification_is_hidden_from_participants(session, make_user):
    participant = make_user()
    admin = make_user(is_admin=True)
    create_notification(
        session, title="Review queue", body="3 pending", target_all=False, target_admin_only=True
    )

    assert fetch_notifications_for_user(session, user_id=participant) == []
    assert _titles(fetch_notifications_for_user(session, user_id=admin, is_admin=True)) == [
        "Review queue"
    ]


def test_institution_target_reaches_matching_admin_only(session, make_user):
    member = make_user(is_admin=True, institution="IIT Delhi")
    outsider = make_user(is_admin=True, institution="NIT Trichy")
    create_notification(
        session,
        title="Campus round",
        body="Venue updated",
        target_all=False,
        target_institutions=[" IIT Delhi ", "", "IIT Delhi"],
    )

    assert _titles(
        fetch_notifications_for_user(
            session, user_id=member, is_admin=True, institution="IIT Delhi"
        )
    ) == ["Campus round"]
    assert (
        fetch_notifications_for_user(
            session, user_id=outsider, is_admin=True, institution="NIT Trichy"
        )
        == []
    )


def test_inbox_is_newest_first_and_capped(session, make_user):
    user_id = make_user()
    created = [
        create_notification(session, title=f"Notice {index}", body="Body")
        for index in range(55)
    ]

    items = fetch_notifications_for_user(session, user_id=user_id)

    assert len(items) == 50
    expected_ids = [notification.id for notification in reversed(created)][:50]
    assert [item.receipt.notification_id for item in items] == expected_ids


def test_newer_receipts_come_first(session, make_user):
    user_id = make_user()
    create_notification(session, title="First", body="Body")
    fetch_notifications_for_user(session, user_id=user_id)
    create_notification(session, title="Second", body="Body")

    items = fetch_notifications_for_user(session, user_id=user_id)

    assert _titles(items) == ["Second", "First"]
    assert items[0].receipt.created_at >= items[1].receipt.created_at


def test_admin_unread_count_tracks_admin_only_receipts(session, make_user):
    admin = make_user(is_admin=True)
    alert = create_notification(
        session, title="Flagged post", body="Check it", target_all=False, target_admin_only=True
    )
    create_notification(session, title="Broadcast", body="Everyone")

    assert count_unread_admin_notifications(session, user_id=admin) == 0

    fetch_notifications_for_user(session, user_id=admin, is_admin=True)
    assert count_unread_admin_notifications(session, user_id=admin) == 1

    mark_notification_read(session, user_id=admin, notification_id=alert.id)
    summary = get_admin_notification_summary(session, user_id=admin)
    assert summary.unread_admin_notifications == 0
    assert summary.total == summary.recent_participant_messages + summary.recent_forum_comments


def test_deleting_a_notification_removes_its_receipts(session, make_user):
    user_id = make_user()
    notification = create_notification(session, title="Temporary", body="Body")
    fetch_notifications_for_user(session, user_id=user_id)

    session.execute(delete(NotificationModel).where(NotificationModel.id == notification.id))
    session.commit()

    remaining = session.scalar(
        select(func.count(NotificationReceiptModel.id)).where(
            NotificationReceiptModel.notification_id == notification.id
        )
    )
    assert remaining == 0


def test_concurrent_fetches_create_one_receipt_each(session, make_user):
    user_id = make_user()
    notification_ids = [
        create_notification(session, title=f"Notice {index}", body="Body").id
        for index in range(20)
    ]
    workers = 8
    barrier = threading.Barrier(workers)
    errors: list[Exception] = []

    def fetch() -> None:
        try:
            barrier.wait(timeout=10)
            with SessionLocal() as worker_session:
                fetch_notifications_for_user(worker_session, user_id=user_id)
        except Exception as exc:  # noqa: BLE001
            errors.append(exc)

    threads = [threading.Thread(target=fetch) for _ in range(workers)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert errors == []
    receipts = NotificationReceiptRepository(session)
    assert {
        receipts.count_for(user_id=user_id, notification_id=notification_id)
        for notification_id in notification_ids
    } == {1}


@pytest.mark.parametrize(
    ("is_admin", "institution"),
    [(False, None), (False, "X"), (True, None), (True, "X")],
)
def test_query_and_rule_agree_on_every_addressing(session, make_user, is_admin, institution):
    user_id = make_user(is_admin=is_admin, institution=institution)
    bystander = make_user()
    created = []
    for target_all, admin_only, to_user, to_institution in product((True, False), repeat=4):
        created.append(
            create_notification(
                session,
                title=f"all={target_all} admin={admin_only} user={to_user} inst={to_institution}",
                body="Body",
                target_all=target_all,
                target_admin_only=admin_only,
                target_user_ids=[user_id if to_user else bystander],
                target_institutions=["X" if to_institution else "Y"],
            )
        )
    audience = NotificationAudience(user_id=user_id, is_admin=is_admin, institution=institution)
    expected = {n.id for n in created if is_visible_to(n, audience)}

    queried = NotificationRepository(session).find_visible(audience)
    inbox = fetch_notifications_for_user(
        session, user_id=user_id, is_admin=is_admin, institution=institution
    )

    assert {n.id for n in queried} == expected
    assert {item.receipt.notification_id for item in inbox} == expected


def test_participant_sees_non_admin_notification_without_any_target(session, make_user):
    user_id = make_user(institution="Y")
    create_notification(
        session,
        title="Institution X only",
        body="Body",
        target_all=False,
        target_institutions=["X"],
    )

    assert _titles(
        fetch_notifications_for_user(session, user_id=user_id, institution="Y")
    ) == ["Institution X only"]


def test_receipts_created_earlier_sort_after_newer_ones(session, make_user):
    user_id = make_user()
    create_notification(session, title="t1", body="Broadcast")
    create_notification(
        session, title="t2", body="Direct", target_all=False, target_user_ids=[user_id]
    )
    third = create_notification(session, title="t3", body="Broadcast")
    mark_notification_read(session, user_id=user_id, notification_id=third.id)

    items = fetch_notifications_for_user(session, user_id=user_id)

    # t2 got its receipt at authoring time and t3 when it was marked read;
    # t1 only gets one during the fetch, so it sorts first.
    assert _titles(items) == ["t1", "t3", "t2"]
