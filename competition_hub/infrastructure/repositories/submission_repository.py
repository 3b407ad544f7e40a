"""Persistence helpers for submissions and submission messages."""

from __future__ import annotations

from collections.abc import Sequence

from sqlalchemy import func
from sqlalchemy.orm import Session

from competition_hub.domain.entities import ForumAuthor, Submission, SubmissionMessage
from competition_hub.infrastructure.models import SubmissionMessageModel, SubmissionModel
from competition_hub.utils import ensure_app_timezone, now_in_app_naive_datetime

from .errors import store_errors


class SubmissionRepository:
    """Provide access to submissions and the thread attached to each one."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, submission_id: int) -> Submission | None:
        model = self.session.get(SubmissionModel, submission_id)
        return self._to_entity(model) if model else None

    def list_for_user(
        self, user_id: int, *, competition_id: int | None = None
    ) -> Sequence[Submission]:
        query = self.session.query(SubmissionModel).filter(SubmissionModel.user_id == user_id)
        if competition_id is not None:
            query = query.filter(SubmissionModel.competition_id == competition_id)
        models = query.order_by(
            SubmissionModel.created_at.desc(), SubmissionModel.id.desc()
        ).all()
        return [self._to_entity(model) for model in models]

    def create(self, submission: Submission) -> Submission:
        now = now_in_app_naive_datetime()
        model = SubmissionModel(
            competition_id=submission.competition_id,
            user_id=submission.user_id,
            title=submission.title,
            file_url=submission.file_url,
            description=submission.description,
            status=submission.status,
            created_at=now,
            updated_at=now,
        )
        with store_errors(self.session, "create the submission"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._to_entity(model)

    def list_messages(self, submission_id: int) -> Sequence[SubmissionMessage]:
        models = (
            self.session.query(SubmissionMessageModel)
            .filter(SubmissionMessageModel.submission_id == submission_id)
            .order_by(SubmissionMessageModel.created_at.asc(), SubmissionMessageModel.id.asc())
            .all()
        )
        return [self._message_to_entity(model) for model in models]

    def create_message(self, message: SubmissionMessage) -> SubmissionMessage:
        model = SubmissionMessageModel(
            submission_id=message.submission_id,
            author_id=message.author_id,
            content=message.content,
            is_from_admin=message.is_from_admin,
            created_at=now_in_app_naive_datetime(),
        )
        with store_errors(self.session, "store the submission message"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._message_to_entity(model)

    def count_participant_messages(self) -> int:
        """Count messages that were not written by a judge."""

        return int(
            self.session.query(func.count(SubmissionMessageModel.id))
            .filter(SubmissionMessageModel.is_from_admin.is_(False))
            .scalar()
            or 0
        )

    @staticmethod
    def _to_entity(model: SubmissionModel) -> Submission:
        return Submission(
            id=model.id,
            competition_id=model.competition_id,
            user_id=model.user_id,
            title=model.title,
            file_url=model.file_url,
            description=model.description,
            status=model.status,
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
        )

    @staticmethod
    def _message_to_entity(model: SubmissionMessageModel) -> SubmissionMessage:
        author = model.author
        return SubmissionMessage(
            id=model.id,
            submission_id=model.submission_id,
            author_id=model.author_id,
            content=model.content,
            is_from_admin=bool(model.is_from_admin),
            created_at=ensure_app_timezone(model.created_at),
            author=ForumAuthor(
                id=author.id,
                name=author.name,
                institution=author.institution,
                is_admin=bool(author.is_admin),
            )
            if author is not None
            else None,
        )


__all__ = ["SubmissionRepository"]
