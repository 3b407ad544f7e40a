"""Submission threads and the notifications they emit."""

from __future__ import annotations

import pytest

from competition_hub.application.use_cases.competitions import create_competition
from competition_hub.application.use_cases.notifications import (
    fetch_notifications_for_user,
    get_admin_notification_summary,
)
from competition_hub.application.use_cases.submissions import (
    create_submission,
    get_submission,
    list_submission_messages,
    list_submissions,
    post_submission_message,
)
from competition_hub.domain.errors import (
    ContentBlockedError,
    NotFoundError,
    PermissionDeniedError,
    ValidationError,
)
from competition_hub.infrastructure.repositories import (
    NotificationReceiptRepository,
    UserRepository,
)

DRIVE_URL = "https://drive.google.com/file/d/abc123_XYZ/view"


@pytest.fixture()
def load_user(session):
    return lambda user_id: UserRepository(session).get(user_id)


@pytest.fixture()
def competition(session):
    return create_competition(
        session, legacy_id=1, slug="prompt-wars", title="Prompt Wars", is_published=True
    )


@pytest.fixture()
def submission(session, make_user, load_user, competition):
    owner = load_user(make_user(name="Asha"))
    return create_submission(
        session,
        owner=owner,
        competition_id=competition.id,
        title="My entry",
        file_url=DRIVE_URL,
    )


def test_create_and_list_submissions(session, make_user, load_user, competition):
    owner = load_user(make_user())

    created = create_submission(
        session,
        owner=owner,
        competition_id=competition.id,
        title=" Entry ",
        file_url=DRIVE_URL,
        description="  ",
    )

    assert created.status == "PENDING"
    assert created.title == "Entry"
    assert created.description is None
    assert [s.id for s in list_submissions(session, user_id=owner.id)] == [created.id]
    assert list_submissions(session, user_id=owner.id, competition_id=competition.id + 1) == []


@pytest.mark.parametrize(
    "file_url",
    ["https://example.com/file.zip", "drive.google.com/file/d/abc", ""],
)
def test_non_drive_links_are_rejected(session, make_user, load_user, competition, file_url):
    owner = load_user(make_user())

    with pytest.raises(ValidationError):
        create_submission(
            session, owner=owner, competition_id=competition.id, title="T", file_url=file_url
        )


def test_unpublished_competition_is_not_found(session, make_user, load_user):
    draft = create_competition(session, legacy_id=2, slug="draft", title="Draft")
    owner = load_user(make_user())

    with pytest.raises(NotFoundError):
        create_submission(
            session, owner=owner, competition_id=draft.id, title="T", file_url=DRIVE_URL
        )


def test_only_owner_and_admins_access_submission(session, make_user, load_user, submission):
    stranger = load_user(make_user())
    judge = load_user(make_user(is_admin=True))

    with pytest.raises(PermissionDeniedError):
        get_submission(session, submission.id, viewer=stranger)
    with pytest.raises(PermissionDeniedError):
        post_submission_message(session, submission.id, author=stranger, content="Hi")
    assert get_submission(session, submission.id, viewer=judge).id == submission.id
    with pytest.raises(NotFoundError):
        get_submission(session, 999, viewer=judge)


def test_judge_message_notifies_owner_eagerly(session, make_user, load_user, submission):
    judge = load_user(make_user(name="Judge", is_admin=True))

    message = post_submission_message(
        session, submission.id, author=judge, content="Please add a README"
    )

    assert message.is_from_admin is True
    # The owner holds an unread receipt before ever opening the inbox.
    assert NotificationReceiptRepository(session).count_where(
        user_id=submission.user_id, is_read=False
    ) == 1
    inbox = fetch_notifications_for_user(session, user_id=submission.user_id)
    assert [item.title for item in inbox] == ["Update on your submission"]
    assert '"My entry"' in inbox[0].body


def test_owner_message_alerts_admins(session, make_user, load_user, submission):
    admin = make_user(is_admin=True)
    owner = load_user(submission.user_id)

    post_submission_message(session, submission.id, author=owner, content="Added the README")

    titles = [
        item.title for item in fetch_notifications_for_user(session, user_id=admin, is_admin=True)
    ]
    assert titles == ["Participant replied on submission"]
    owner_titles = [
        item.title for item in fetch_notifications_for_user(session, user_id=owner.id)
    ]
    assert "Participant replied on submission" not in owner_titles

    summary = get_admin_notification_summary(session, user_id=admin)
    assert summary.unread_admin_notifications == 1
    assert summary.recent_participant_messages == 1
    assert summary.total == 2


def test_thread_is_oldest_first_and_moderated(session, make_user, load_user, submission):
    owner = load_user(submission.user_id)
    judge = load_user(make_user(is_admin=True))
    post_submission_message(session, submission.id, author=owner, content="First")
    post_submission_message(session, submission.id, author=judge, content="Second")

    with pytest.raises(ContentBlockedError):
        post_submission_message(session, submission.id, author=owner, content="what the fuck")
    with pytest.raises(ValidationError):
        post_submission_message(session, submission.id, author=owner, content="   ")

    thread = list_submission_messages(session, submission.id, viewer=owner)
    assert [(m.content, m.is_from_admin) for m in thread] == [("First", False), ("Second", True)]
    assert thread[1].author.id == judge.id
