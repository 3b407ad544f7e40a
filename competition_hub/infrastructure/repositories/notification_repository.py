"""Persistence helpers for notifications and their delivery receipts."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import datetime
from typing import Any

import logging

from sqlalchemy import and_, func, insert, or_, update
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from competition_hub.domain.entities import (
    Notification,
    NotificationInboxItem,
    NotificationReceipt,
)
from competition_hub.domain.targeting import DEFAULT_FETCH_LIMIT, NotificationAudience
from competition_hub.infrastructure.models import (
    NotificationModel,
    NotificationReceiptModel,
    NotificationTargetInstitutionModel,
    NotificationTargetUserModel,
)
from competition_hub.utils import (
    ensure_app_naive_datetime,
    ensure_app_timezone,
    now_in_app_naive_datetime,
)

from .errors import store_errors

logger = logging.getLogger(__name__)

_RECEIPT_KEY = ["notification_id", "user_id"]
_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class NotificationRepository:
    """Store and query :class:`Notification` objects."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def create(self, notification: Notification) -> Notification:
        model = NotificationModel(
            title=notification.title,
            body=notification.body,
            target_all=notification.target_all,
            target_admin_only=notification.target_admin_only,
            created_by_id=notification.created_by_id,
            created_at=ensure_app_naive_datetime(notification.created_at)
            or now_in_app_naive_datetime(),
        )
        model.target_institutions = [
            NotificationTargetInstitutionModel(institution=institution)
            for institution in sorted(notification.target_institutions)
        ]
        model.target_users = [
            NotificationTargetUserModel(user_id=user_id)
            for user_id in sorted(notification.target_user_ids)
        ]
        with store_errors(self.session, "store the notification"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def exists(self, notification_id: int) -> bool:
        query = self.session.query(NotificationModel.id).filter(
            NotificationModel.id == notification_id
        )
        return self.session.query(query.exists()).scalar()

    def find_visible(
        self,
        audience: NotificationAudience,
        *,
        limit: int | None = DEFAULT_FETCH_LIMIT,
    ) -> Sequence[Notification]:
        """Return notifications addressed to ``audience``, newest first."""

        clauses = [
            and_(
                NotificationModel.target_all.is_(True),
                NotificationModel.target_admin_only.is_(False),
            ),
            NotificationModel.target_admin_only == bool(audience.is_admin),
            NotificationModel.target_users.any(
                NotificationTargetUserModel.user_id == audience.user_id
            ),
        ]
        if audience.institution:
            clauses.append(
                NotificationModel.target_institutions.any(
                    NotificationTargetInstitutionModel.institution == audience.institution
                )
            )

        query = (
            self.session.query(NotificationModel)
            .filter(or_(*clauses))
            .order_by(NotificationModel.created_at.desc(), NotificationModel.id.desc())
        )
        if limit is not None:
            query = query.limit(limit)
        with store_errors(self.session, "load notifications"):
            models = query.all()
        return [self._to_entity(model) for model in models]

    @staticmethod
    def _to_entity(model: NotificationModel) -> Notification:
        return Notification(
            id=model.id,
            title=model.title,
            body=model.body,
            target_all=bool(model.target_all),
            target_admin_only=bool(model.target_admin_only),
            target_institutions=frozenset(
                target.institution for target in model.target_institutions
            ),
            target_user_ids=frozenset(target.user_id for target in model.target_users),
            created_by_id=model.created_by_id,
            created_at=ensure_app_timezone(model.created_at),
        )


class NotificationReceiptRepository:
    """Create, update and read per-user notification receipts.

    Receipt creation relies on the unique ``(notification_id, user_id)``
    constraint: rows are inserted with "insert, skip on conflict" semantics so
    concurrent fetches for the same user never produce duplicates and never
    reset an existing read state.
    """

    def __init__(self, session: Session) -> None:
        self.session = session

    def insert_if_absent(self, user_id: int, notification_ids: Iterable[int]) -> None:
        """Ensure ``user_id`` has a receipt for each of ``notification_ids``."""

        self._insert_ignoring_conflicts(
            {"notification_id": notification_id, "user_id": user_id}
            for notification_id in notification_ids
        )

    def insert_for_users(self, notification_id: int, user_ids: Iterable[int]) -> None:
        """Ensure each of ``user_ids`` has a receipt for ``notification_id``."""

        self._insert_ignoring_conflicts(
            {"notification_id": notification_id, "user_id": user_id}
            for user_id in user_ids
        )

    def mark_read(
        self,
        *,
        user_id: int,
        notification_id: int,
        read_at: datetime,
    ) -> None:
        """Upsert the receipt for ``(notification_id, user_id)`` as read."""

        stored_read_at = ensure_app_naive_datetime(read_at)
        values = {
            "notification_id": notification_id,
            "user_id": user_id,
            "is_read": True,
            "read_at": stored_read_at,
            "created_at": stored_read_at,
        }
        dialect_insert = self._dialect_insert()
        with store_errors(self.session, "mark the notification as read"):
            if dialect_insert is not None:
                statement = (
                    dialect_insert(NotificationReceiptModel)
                    .values(**values)
                    .on_conflict_do_update(
                        index_elements=_RECEIPT_KEY,
                        set_={"is_read": True, "read_at": stored_read_at},
                    )
                )
                self.session.execute(statement)
            else:
                self._mark_read_generic(values)
            self.session.commit()

    def get(self, *, user_id: int, notification_id: int) -> NotificationReceipt | None:
        model = (
            self.session.query(NotificationReceiptModel)
            .filter_by(user_id=user_id, notification_id=notification_id)
            .first()
        )
        return self._to_entity(model) if model else None

    def count_for(self, *, user_id: int, notification_id: int) -> int:
        return (
            self.session.query(func.count(NotificationReceiptModel.id))
            .filter_by(user_id=user_id, notification_id=notification_id)
            .scalar()
        )

    def list_inbox(
        self, user_id: int, notification_ids: Sequence[int]
    ) -> Sequence[NotificationInboxItem]:
        """Return the receipts of ``user_id`` joined with their notification."""

        if not notification_ids:
            return []
        query = (
            self.session.query(NotificationReceiptModel, NotificationModel)
            .join(
                NotificationModel,
                NotificationModel.id == NotificationReceiptModel.notification_id,
            )
            .filter(NotificationReceiptModel.user_id == user_id)
            .filter(NotificationReceiptModel.notification_id.in_(list(notification_ids)))
            .order_by(
                NotificationReceiptModel.created_at.desc(),
                NotificationModel.created_at.desc(),
                NotificationModel.id.desc(),
            )
        )
        with store_errors(self.session, "load notification receipts"):
            rows = query.all()
        return [
            NotificationInboxItem(
                receipt=self._to_entity(receipt),
                title=notification.title,
                body=notification.body,
                notification_created_at=ensure_app_timezone(notification.created_at),
            )
            for receipt, notification in rows
        ]

    def count_where(
        self,
        *,
        user_id: int | None = None,
        is_read: bool | None = None,
        admin_only: bool | None = None,
    ) -> int:
        """Count receipts matching every provided filter."""

        query = self.session.query(func.count(NotificationReceiptModel.id))
        if admin_only is not None:
            query = query.join(
                NotificationModel,
                NotificationModel.id == NotificationReceiptModel.notification_id,
            ).filter(NotificationModel.target_admin_only == admin_only)
        if user_id is not None:
            query = query.filter(NotificationReceiptModel.user_id == user_id)
        if is_read is not None:
            query = query.filter(NotificationReceiptModel.is_read == is_read)
        with store_errors(self.session, "count notification receipts"):
            return int(query.scalar() or 0)

    def _insert_ignoring_conflicts(self, rows: Iterable[dict[str, Any]]) -> None:
        now = now_in_app_naive_datetime()
        payload = [
            {**row, "is_read": False, "read_at": None, "created_at": now}
            for row in _unique_rows(rows)
        ]
        if not payload:
            return

        dialect_insert = self._dialect_insert()
        with store_errors(self.session, "create notification receipts"):
            if dialect_insert is not None:
                statement = (
                    dialect_insert(NotificationReceiptModel)
                    .values(payload)
                    .on_conflict_do_nothing(index_elements=_RECEIPT_KEY)
                )
                self.session.execute(statement)
            else:
                for row in payload:
                    try:
                        with self.session.begin_nested():
                            self.session.execute(insert(NotificationReceiptModel).values(**row))
                    except IntegrityError:
                        logger.debug(
                            "Receipt for notification %s and user %s already exists",
                            row["notification_id"],
                            row["user_id"],
                        )
            self.session.commit()

    def _mark_read_generic(self, values: dict[str, Any]) -> None:
        statement = (
            update(NotificationReceiptModel)
            .where(NotificationReceiptModel.notification_id == values["notification_id"])
            .where(NotificationReceiptModel.user_id == values["user_id"])
            .values(is_read=True, read_at=values["read_at"])
        )
        if self.session.execute(statement).rowcount:
            return
        try:
            with self.session.begin_nested():
                self.session.execute(insert(NotificationReceiptModel).values(**values))
        except IntegrityError:
            # A concurrent fetch created the receipt in between.
            self.session.execute(statement)

    def _dialect_insert(self):
        return _DIALECT_INSERTS.get(self.session.get_bind().dialect.name)

    @staticmethod
    def _to_entity(model: NotificationReceiptModel) -> NotificationReceipt:
        return NotificationReceipt(
            id=model.id,
            notification_id=model.notification_id,
            user_id=model.user_id,
            is_read=bool(model.is_read),
            read_at=ensure_app_timezone(model.read_at),
            created_at=ensure_app_timezone(model.created_at),
        )


def _unique_rows(rows: Iterable[dict[str, Any]]) -> list[dict[str, Any]]:
    seen: set[tuple[int, int]] = set()
    unique: list[dict[str, Any]] = []
    for row in rows:
        key = (row["notification_id"], row["user_id"])
        if key in seen:
            continue
        seen.add(key)
        unique.append(row)
    return unique


__all__ = ["NotificationReceiptRepository", "NotificationRepository"]
