"""Persistence layer for forum posts, comments and reactions."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Sequence

from sqlalchemy import func, or_
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.orm import Session

from competition_hub.domain.entities import (
    ForumAuthor,
    ForumComment,
    ForumPost,
    summarize_reactions,
)
from competition_hub.infrastructure.models import (
    ForumCommentModel,
    ForumCommentReactionModel,
    ForumPostModel,
    ForumPostReactionModel,
    UserModel,
)
from competition_hub.utils import ensure_app_timezone, now_in_app_naive_datetime

from .errors import store_errors

_DIALECT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class ForumRepository:
    """Provide access to forum posts and their comments."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def list_posts(
        self, *, skip: int = 0, limit: int = 50, search: str | None = None
    ) -> tuple[list[ForumPost], int]:
        """Return one page of posts plus the number of matching posts."""

        query = self.session.query(ForumPostModel)
        if search:
            pattern = f"%{search.lower()}%"
            query = query.filter(
                or_(
                    func.lower(ForumPostModel.title).like(pattern),
                    func.lower(ForumPostModel.content).like(pattern),
                )
            )
        total = query.count()
        models = (
            query.order_by(ForumPostModel.updated_at.desc(), ForumPostModel.id.desc())
            .offset(skip)
            .limit(limit)
            .all()
        )
        post_ids = [model.id for model in models]
        comment_counts = self._comment_counts(post_ids)
        reactions = self._grouped_reactions(
            ForumPostReactionModel, ForumPostReactionModel.post_id, post_ids
        )
        posts = [
            self._post_to_entity(
                model,
                comment_count=comment_counts.get(model.id, 0),
                reactions=reactions.get(model.id, {}),
            )
            for model in models
        ]
        return posts, total

    def get_post(self, post_id: int) -> ForumPost | None:
        model = self.session.get(ForumPostModel, post_id)
        if model is None:
            return None
        return self._post_to_entity(
            model,
            comment_count=self._comment_counts([post_id]).get(post_id, 0),
            reactions=self.count_post_reactions(post_id),
        )

    def create_post(self, post: ForumPost) -> ForumPost:
        now = now_in_app_naive_datetime()
        model = ForumPostModel(
            author_id=post.author_id,
            title=post.title,
            content=post.content,
            status=post.status,
            is_resolved=post.is_resolved,
            created_at=now,
            updated_at=now,
        )
        with store_errors(self.session, "create the forum post"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._post_to_entity(model, comment_count=0, reactions={})

    def update_post_status(self, post_id: int, *, status: str, is_resolved: bool) -> ForumPost:
        model = self.session.get(ForumPostModel, post_id)
        if model is None:
            msg = f"Forum post with id {post_id} not found"
            raise ValueError(msg)
        model.status = status
        model.is_resolved = is_resolved
        with store_errors(self.session, "update the forum post"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self.get_post(post_id)

    def list_comments(self, post_id: int) -> list[ForumComment]:
        models = (
            self.session.query(ForumCommentModel)
            .filter(ForumCommentModel.post_id == post_id)
            .order_by(ForumCommentModel.created_at.asc(), ForumCommentModel.id.asc())
            .all()
        )
        reactions = self._grouped_reactions(
            ForumCommentReactionModel,
            ForumCommentReactionModel.comment_id,
            [model.id for model in models],
        )
        return [
            self._comment_to_entity(model, reactions=reactions.get(model.id, {}))
            for model in models
        ]

    def get_comment(self, comment_id: int) -> ForumComment | None:
        model = self.session.get(ForumCommentModel, comment_id)
        if model is None:
            return None
        return self._comment_to_entity(model, reactions=self.count_comment_reactions(comment_id))

    def create_comment(self, comment: ForumComment) -> ForumComment:
        model = ForumCommentModel(
            post_id=comment.post_id,
            author_id=comment.author_id,
            parent_id=comment.parent_id,
            content=comment.content,
            created_at=now_in_app_naive_datetime(),
        )
        with store_errors(self.session, "create the forum comment"):
            self.session.add(model)
            self.session.commit()
            self.session.refresh(model)
        return self._comment_to_entity(model, reactions={})

    def delete_comment(self, comment_id: int) -> bool:
        model = self.session.get(ForumCommentModel, comment_id)
        if model is None:
            return False
        with store_errors(self.session, "delete the forum comment"):
            self.session.delete(model)
            self.session.commit()
        return True

    def count_comments_by_participants(self) -> int:
        """Count comments written by non-admin users."""

        return (
            self.session.query(func.count(ForumCommentModel.id))
            .join(UserModel, UserModel.id == ForumCommentModel.author_id)
            .filter(UserModel.is_admin.is_(False))
            .scalar()
        )

    def upsert_post_reaction(self, *, post_id: int, user_id: int, reaction: str) -> None:
        self._upsert_reaction(
            ForumPostReactionModel,
            key_name="post_id",
            key_value=post_id,
            user_id=user_id,
            reaction=reaction,
        )

    def upsert_comment_reaction(self, *, comment_id: int, user_id: int, reaction: str) -> None:
        self._upsert_reaction(
            ForumCommentReactionModel,
            key_name="comment_id",
            key_value=comment_id,
            user_id=user_id,
            reaction=reaction,
        )

    def count_post_reactions(self, post_id: int) -> dict[str, int]:
        grouped = self._grouped_reactions(
            ForumPostReactionModel, ForumPostReactionModel.post_id, [post_id]
        )
        return summarize_reactions(grouped.get(post_id, {}))

    def count_comment_reactions(self, comment_id: int) -> dict[str, int]:
        grouped = self._grouped_reactions(
            ForumCommentReactionModel, ForumCommentReactionModel.comment_id, [comment_id]
        )
        return summarize_reactions(grouped.get(comment_id, {}))

    def _upsert_reaction(self, model_cls, *, key_name: str, key_value: int, user_id: int, reaction: str) -> None:
        values = {
            key_name: key_value,
            "user_id": user_id,
            "type": reaction,
            "created_at": now_in_app_naive_datetime(),
        }
        dialect_insert = _DIALECT_INSERTS.get(self.session.get_bind().dialect.name)
        with store_errors(self.session, "store the reaction"):
            if dialect_insert is not None:
                statement = (
                    dialect_insert(model_cls)
                    .values(**values)
                    .on_conflict_do_update(
                        index_elements=[key_name, "user_id"], set_={"type": reaction}
                    )
                )
                self.session.execute(statement)
            else:
                existing = (
                    self.session.query(model_cls)
                    .filter_by(**{key_name: key_value, "user_id": user_id})
                    .first()
                )
                if existing is None:
                    self.session.add(model_cls(**values))
                else:
                    existing.type = reaction
            self.session.commit()

    def _comment_counts(self, post_ids: Sequence[int]) -> dict[int, int]:
        if not post_ids:
            return {}
        rows = (
            self.session.query(ForumCommentModel.post_id, func.count(ForumCommentModel.id))
            .filter(ForumCommentModel.post_id.in_(list(post_ids)))
            .group_by(ForumCommentModel.post_id)
            .all()
        )
        return {post_id: count for post_id, count in rows}

    def _grouped_reactions(self, model_cls, key_column, ids: Sequence[int]) -> dict[int, dict[str, int]]:
        if not ids:
            return {}
        rows = (
            self.session.query(key_column, model_cls.type, func.count(model_cls.id))
            .filter(key_column.in_(list(ids)))
            .group_by(key_column, model_cls.type)
            .all()
        )
        grouped: dict[int, dict[str, int]] = defaultdict(dict)
        for key, reaction, count in rows:
            grouped[key][reaction] = count
        return dict(grouped)

    @staticmethod
    def _author_to_entity(model: UserModel | None) -> ForumAuthor | None:
        if model is None:
            return None
        return ForumAuthor(
            id=model.id,
            name=model.name,
            institution=model.institution,
            is_admin=bool(model.is_admin),
        )

    @classmethod
    def _post_to_entity(
        cls, model: ForumPostModel, *, comment_count: int, reactions: dict[str, int]
    ) -> ForumPost:
        return ForumPost(
            id=model.id,
            author_id=model.author_id,
            title=model.title,
            content=model.content,
            status=model.status,
            is_resolved=bool(model.is_resolved),
            created_at=ensure_app_timezone(model.created_at),
            updated_at=ensure_app_timezone(model.updated_at),
            author=cls._author_to_entity(model.author),
            comment_count=comment_count,
            reaction_summary=summarize_reactions(reactions),
        )

    @classmethod
    def _comment_to_entity(
        cls, model: ForumCommentModel, *, reactions: dict[str, int]
    ) -> ForumComment:
        return ForumComment(
            id=model.id,
            post_id=model.post_id,
            author_id=model.author_id,
            parent_id=model.parent_id,
            content=model.content,
            created_at=ensure_app_timezone(model.created_at),
            author=cls._author_to_entity(model.author),
            reaction_summary=summarize_reactions(reactions),
        )


__all__ = ["ForumRepository"]
