"""Read-only rollups across projects, users and comments.

Everything is recomputed on each call. Ties are broken deterministically:
projects by earliest ``created_at`` then lowest id, tags alphabetically.
"""

from typing import List, Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from projecthub.models.comment import Comment
from projecthub.models.project import Project, ProjectLike, ProjectRating, ProjectTag
from projecthub.models.user import User

TOP_RATED_LIMIT = 5
POPULAR_TAG_LIMIT = 10


def _most_liked_project(db: Session) -> Optional[dict]:
    like_count = func.count(ProjectLike.like_id).label("like_count")
    row = (
        db.query(Project.project_id, Project.title, Project.author_name, like_count)
        .outerjoin(ProjectLike, ProjectLike.project_id == Project.project_id)
        .group_by(Project.project_id, Project.title, Project.author_name, Project.created_at)
        .order_by(like_count.desc(), Project.created_at.asc(), Project.project_id.asc())
        .first()
    )
    if row is None:
        return None
    return {
        "id": row.project_id,
        "title": row.title,
        "likes": int(row.like_count or 0),
        "author": row.author_name,
    }


def _top_rated_projects(db: Session, limit: int = TOP_RATED_LIMIT) -> List[dict]:
    average = func.avg(ProjectRating.rating).label("average_rating")
    rows = (
        db.query(Project.project_id, Project.title, Project.author_name, average)
        .join(ProjectRating, ProjectRating.project_id == Project.project_id)
        .group_by(Project.project_id, Project.title, Project.author_name, Project.created_at)
        .order_by(average.desc(), Project.created_at.asc(), Project.project_id.asc())
        .limit(limit)
        .all()
    )
    return [
        {
            "id": row.project_id,
            "title": row.title,
            "rating": float(row.average_rating),
            "author": row.author_name,
        }
        for row in rows
    ]


def _popular_tags(db: Session, limit: int = POPULAR_TAG_LIMIT) -> List[dict]:
    count = func.count(ProjectTag.tag_id).label("tag_count")
    rows = (
        db.query(ProjectTag.tag, count)
        .group_by(ProjectTag.tag)
        .order_by(count.desc(), ProjectTag.tag.asc())
        .limit(limit)
        .all()
    )
    return [{"tag": row.tag, "count": int(row.tag_count)} for row in rows]


def get_analytics(db: Session) -> dict:
    return {
        "total_projects": db.query(func.count(Project.project_id)).scalar() or 0,
        "total_users": db.query(func.count(User.user_id)).scalar() or 0,
        "total_comments": db.query(func.count(Comment.comment_id)).scalar() or 0,
        "most_liked_project": _most_liked_project(db),
        "top_rated_projects": _top_rated_projects(db),
        "popular_tags": _popular_tags(db),
    }
