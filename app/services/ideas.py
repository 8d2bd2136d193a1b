"""Idea listing (left-joined with author), creation and deletion."""

from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from app.core.clock import Clock, iso_timestamp, utc_now
from app.models import Idea, User
from app.schemas.ideas import IdeaAuthor, IdeaOut

logger = logging.getLogger(__name__)


class IdeaService:
    def __init__(self, db: Session, now: Clock = utc_now) -> None:
        self.db = db
        self.now = now

    def list_ideas(self) -> list[IdeaOut]:
        rows = (
            self.db.query(Idea, User.username)
            .outerjoin(User, Idea.user_id == User.id)
            .order_by(Idea.id)
            .all()
        )
        return [
            IdeaOut(
                id=idea.id,
                title=idea.title,
                description=idea.description,
                date=idea.date,
                user_id=idea.user_id,
                user=IdeaAuthor(username=author),
            )
            for idea, author in rows
        ]

    def create_idea(self, title: str, description: str, author_id: int) -> Idea:
        idea = Idea(
            title=title,
            description=description,
            date=iso_timestamp(self.now()),
            user_id=author_id,
        )
        self.db.add(idea)
        self.db.commit()
        logger.info("Idea created", extra={"idea_id": idea.id, "user_id": author_id})
        return idea

    def delete_idea(self, idea_id: int, actor_id: int | None = None) -> int:
        """Delete by id regardless of author. Returns rows deleted."""
        deleted = (
            self.db.query(Idea)
            .filter(Idea.id == idea_id)
            .delete(synchronize_session=False)
        )
        self.db.commit()
        logger.info(
            "Idea deleted",
            extra={"idea_id": idea_id, "actor_id": actor_id, "deleted": deleted},
        )
        return deleted
