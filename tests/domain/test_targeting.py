"""Tests for the notification visibility rules."""

from datetime import datetime, timedelta, timezone

import pytest

from competition_hub.domain.entities import Notification
from competition_hub.domain.targeting import (
    NotificationAudience,
    is_visible_to,
    select_visible,
)

PARTICIPANT = NotificationAudience(user_id=1, is_admin=False, institution=None)
ADMIN = NotificationAudience(user_id=2, is_admin=True, institution=None)


def _notification(**overrides) -> Notification:
    values = {
        "id": 1,
        "title": "Title",
        "body": "Body",
        "created_at": datetime(2024, 1, 1, tzinfo=timezone.utc),
    }
    values.update(overrides)
    return Notification(**values)


@pytest.mark.parametrize("audience", [PARTICIPANT, ADMIN])
def test_broadcast_is_visible_to_everyone(audience):
    notification = _notification(target_all=True, target_admin_only=False)

    assert is_visible_to(notification, audience)


def test_admin_only_is_hidden_from_participants():
    notification = _notification(target_all=False, target_admin_only=True)

    assert is_visible_to(notification, ADMIN)
    assert not is_visible_to(notification, PARTICIPANT)


def test_admin_only_stays_hidden_even_with_target_all():
    notification = _notification(target_all=True, target_admin_only=True)

    assert is_visible_to(notification, ADMIN)
    assert not is_visible_to(notification, PARTICIPANT)


def test_explicit_user_overrides_admin_only_flag():
    notification = _notification(
        target_all=False,
        target_admin_only=True,
        target_user_ids=frozenset({PARTICIPANT.user_id}),
    )

    assert is_visible_to(notification, PARTICIPANT)
    assert not is_visible_to(
        notification, NotificationAudience(user_id=99, is_admin=False)
    )


def test_institution_match_overrides_admin_only_flag():
    notification = _notification(
        target_all=False,
        target_admin_only=True,
        target_institutions=frozenset({"IIT Delhi"}),
    )
    member = NotificationAudience(user_id=5, is_admin=False, institution="IIT Delhi")
    outsider = NotificationAudience(user_id=6, is_admin=False, institution="NIT Trichy")

    assert is_visible_to(notification, member)
    assert not is_visible_to(notification, outsider)


def test_institution_target_is_hidden_from_admins_of_other_institutions():
    notification = _notification(
        target_all=False,
        target_admin_only=False,
        target_institutions=frozenset({"X"}),
    )

    assert is_visible_to(notification, NotificationAudience(3, True, "X"))
    assert not is_visible_to(notification, NotificationAudience(4, True, "Y"))
    assert not is_visible_to(notification, NotificationAudience(4, True, None))


def test_participants_see_every_non_admin_notification():
    # "target_admin_only == is_admin" holds for any participant when the
    # notification is not admin-only, whatever the other targets are.
    notification = _notification(
        target_all=False,
        target_admin_only=False,
        target_institutions=frozenset({"X"}),
    )

    assert is_visible_to(notification, NotificationAudience(7, False, "Y"))
    assert is_visible_to(notification, NotificationAudience(8, False, None))


def test_blank_institution_never_matches():
    notification = _notification(
        target_all=False,
        target_admin_only=True,
        target_institutions=frozenset({""}),
    )

    assert not is_visible_to(notification, NotificationAudience(9, False, ""))


def test_select_visible_orders_newest_first_and_applies_limit():
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    notifications = [
        _notification(id=index, created_at=base + timedelta(minutes=index))
        for index in range(1, 6)
    ]
    hidden = _notification(id=10, target_all=False, target_admin_only=True, created_at=base)

    selected = select_visible([*notifications, hidden], PARTICIPANT, limit=3)

    assert [n.id for n in selected] == [5, 4, 3]
