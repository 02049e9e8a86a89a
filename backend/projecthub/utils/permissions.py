"""Ownership checks shared by the project and comment services."""

import logging

from projecthub.exceptions import AuthorizationError
from projecthub.models.comment import Comment
from projecthub.models.project import Project
from projecthub.models.user import User

logger = logging.getLogger(__name__)


def is_author(author_id: int, user: User) -> bool:
    return author_id is not None and user is not None and int(author_id) == int(user.user_id)


def can_modify_project(project: Project, user: User) -> bool:
    return is_author(project.author_id, user)


def can_delete_comment(comment: Comment, user: User) -> bool:
    return is_author(comment.author_id, user)


def ensure_project_owner(project: Project, user: User) -> None:
    if not can_modify_project(project, user):
        logger.warning(
            "user %s refused write access to project %s owned by %s",
            user.user_id, project.project_id, project.author_id,
        )
        raise AuthorizationError("Not authorized")


def ensure_comment_owner(comment: Comment, user: User) -> None:
    if not can_delete_comment(comment, user):
        logger.warning(
            "user %s refused delete on comment %s owned by %s",
            user.user_id, comment.comment_id, comment.author_id,
        )
        raise AuthorizationError("Not authorized to delete this comment.")
