"""Rules deciding which notifications a user is addressed by."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import datetime

from .entities import Notification

DEFAULT_FETCH_LIMIT = 50


@dataclass(frozen=True)
class NotificationAudience:
    """Verified identity of the user a fetch is performed for."""

    user_id: int
    is_admin: bool = False
    institution: str | None = None


def is_visible_to(notification: Notification, audience: NotificationAudience) -> bool:
    """Return ``True`` when ``notification`` addresses ``audience``.

    A notification is visible when any of the following holds:

    * it is a broadcast (``target_all`` and not ``target_admin_only``);
    * ``target_admin_only`` equals the user's admin flag;
    * the user id is listed in ``target_user_ids``;
    * the user's institution is listed in ``target_institutions``.

    The second clause is kept exactly as written, which means ordinary users
    also match every notification that is not admin-only.
    """

    if notification.target_all and not notification.target_admin_only:
        return True
    if notification.target_admin_only == audience.is_admin:
        return True
    if audience.user_id in notification.target_user_ids:
        return True
    if audience.institution and audience.institution in notification.target_institutions:
        return True
    return False


def select_visible(
    notifications: Iterable[Notification],
    audience: NotificationAudience,
    *,
    limit: int | None = DEFAULT_FETCH_LIMIT,
) -> list[Notification]:
    """Return the notifications visible to ``audience``, newest first."""

    visible = [n for n in notifications if is_visible_to(n, audience)]
    visible.sort(key=_newest_first_key, reverse=True)
    if limit is not None:
        visible = visible[:limit]
    return visible


def _newest_first_key(notification: Notification) -> tuple[datetime, int]:
    created_at = notification.created_at or datetime.min
    if created_at.tzinfo is not None:
        created_at = created_at.replace(tzinfo=None)
    return (created_at, notification.id or 0)


__all__ = [
    "DEFAULT_FETCH_LIMIT",
    "NotificationAudience",
    "is_visible_to",
    "select_visible",
]
