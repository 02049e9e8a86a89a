"""User profile service layer."""

from sqlalchemy.orm import Session

from projecthub.exceptions import NotFoundError
from projecthub.models.user import User
from projecthub.schemas.user import ProfileUpdate
from projecthub.services import identity_service, project_service


def upsert_profile(db: Session, user: User, data: ProfileUpdate) -> User:
    present = data.model_fields_set
    if data.display_name:
        user.display_name = data.display_name.strip() or user.display_name
    if data.photo_url:
        user.photo_url = data.photo_url
    if "bio" in present:
        user.bio = data.bio or ""
    db.commit()
    db.refresh(user)
    return user


def get_public_profile(db: Session, uid: str) -> dict:
    user = identity_service.find_user(db, uid)
    if not user:
        raise NotFoundError("User not found")
    return {"user": user, "projects": project_service.list_user_projects(db, user)}
