"""SQLAlchemy model package."""

from projecthub.models.user import User, UserFavorite
from projecthub.models.project import Project, ProjectTag, ProjectLike, ProjectRating
from projecthub.models.comment import Comment

__all__ = [
    "User", "UserFavorite",
    "Project", "ProjectTag", "ProjectLike", "ProjectRating",
    "Comment",
]
