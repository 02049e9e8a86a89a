"""Favorites relation stored on the User aggregate."""

from typing import List

from sqlalchemy.orm import Session

from projecthub.models.project import Project
from projecthub.models.user import User, UserFavorite


def toggle_favorite(db: Session, user: User, project_id: int) -> List[int]:
    existing = next((row for row in user.favorite_rows if row.project_id == project_id), None)
    if existing is not None:
        user.favorite_rows.remove(existing)
    else:
        user.favorite_rows.append(UserFavorite(project_id=project_id))
    db.commit()
    db.refresh(user)
    return user.favorites


def list_favorites(db: Session, user: User) -> List[Project]:
    project_ids = user.favorites
    if not project_ids:
        return []
    found = {
        row.project_id: row
        for row in db.query(Project).filter(Project.project_id.in_(project_ids)).all()
    }
    # Dangling references to deleted projects are skipped.
    return [found[pid] for pid in project_ids if pid in found]
