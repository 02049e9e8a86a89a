"""Comment service layer. Flat comments attached to a project."""

import logging
from typing import List, Optional

from sqlalchemy.orm import Session, selectinload

from projecthub.exceptions import NotFoundError, ValidationError
from projecthub.models.comment import Comment
from projecthub.models.project import Project
from projecthub.models.user import User
from projecthub.utils.permissions import ensure_comment_owner

logger = logging.getLogger(__name__)


def list_comments(db: Session, project_id: int) -> List[Comment]:
    return (
        db.query(Comment)
        .options(selectinload(Comment.author))
        .filter(Comment.project_id == project_id)
        .order_by(Comment.created_at.desc(), Comment.comment_id.desc())
        .all()
    )


def create_comment(db: Session, project_id: int, author: User, text: Optional[str]) -> Comment:
    cleaned = str(text or "").strip()
    if not cleaned:
        raise ValidationError("Comment text cannot be empty.")
    project_exists = db.query(Project.project_id).filter(Project.project_id == project_id).first()
    if not project_exists:
        raise NotFoundError("Project not found")

    comment = Comment(
        text=cleaned,
        project_id=project_id,
        author_id=author.user_id,
        author_name=author.display_name,
    )
    db.add(comment)
    db.commit()
    db.refresh(comment)
    return comment


def delete_comment(db: Session, comment_id: int, actor: User) -> None:
    comment = db.query(Comment).filter(Comment.comment_id == comment_id).first()
    if not comment:
        raise NotFoundError("Comment not found")
    ensure_comment_owner(comment, actor)
    db.delete(comment)
    db.commit()
    logger.info("user %s deleted comment %s", actor.user_id, comment_id)
