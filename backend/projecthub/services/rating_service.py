"""Rating and like mutations on the Project aggregate.

Each user owns at most one rating slot per project: rating again overwrites the
slot instead of appending a second row. The average is never stored; it is
derived from the current rating rows whenever it is read.
"""

import logging
import math
import numbers

from sqlalchemy.orm import Session

from projecthub.exceptions import ValidationError
from projecthub.models.project import Project, ProjectLike, ProjectRating
from projecthub.models.user import User

logger = logging.getLogger(__name__)

MIN_RATING = 1
MAX_RATING = 5


def validate_rating(value) -> float:
    """Return ``value`` if it is a finite number in 1..5, else raise ``ValidationError``.

    Fractional ratings such as 4.5 are accepted as-is.
    """
    if isinstance(value, bool) or not isinstance(value, numbers.Real) or math.isnan(value):
        raise ValidationError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")
    if not MIN_RATING <= value <= MAX_RATING:
        raise ValidationError(f"Rating must be between {MIN_RATING} and {MAX_RATING}")
    return value


def _find_rating(project: Project, user: User) -> ProjectRating | None:
    return next((row for row in project.ratings if row.user_id == user.user_id), None)


def _find_like(project: Project, user: User) -> ProjectLike | None:
    return next((row for row in project.like_rows if row.user_id == user.user_id), None)


def rate(db: Session, project: Project, user: User, value) -> float:
    rating = validate_rating(value)
    existing = _find_rating(project, user)
    if existing is not None:
        existing.rating = rating
    else:
        project.ratings.append(ProjectRating(user_id=user.user_id, rating=rating))
    db.commit()
    db.refresh(project)
    logger.info("user %s rated project %s with %s", user.user_id, project.project_id, rating)
    return project.average_rating


def has_liked(project: Project, user: User) -> bool:
    return _find_like(project, user) is not None


def toggle_like(db: Session, project: Project, user: User) -> int:
    if has_liked(project, user):
        project.like_rows.remove(_find_like(project, user))
    else:
        project.like_rows.append(ProjectLike(user_id=user.user_id))
    db.commit()
    db.refresh(project)
    return len(project.like_rows)
