"""Users API router: profiles, the current user and favorites."""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List

from projecthub.database import get_db
from projecthub.middleware.auth_middleware import get_current_user
from projecthub.models.user import User
from projecthub.schemas.project import ProfileOut, ProjectOut
from projecthub.schemas.user import FavoritesOut, ProfileUpdate, UserOut
from projecthub.services import favorite_service, user_service

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("/profile", response_model=UserOut)
def upsert_profile(
    data: ProfileUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return user_service.upsert_profile(db, current_user, data)


@router.get("/profile/{uid}", response_model=ProfileOut)
def get_profile(uid: str, db: Session = Depends(get_db)):
    return user_service.get_public_profile(db, uid)


@router.get("/me", response_model=UserOut)
def me(current_user: User = Depends(get_current_user)):
    return current_user


@router.post("/favorites/{project_id}", response_model=FavoritesOut)
def toggle_favorite(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return {"favorites": favorite_service.toggle_favorite(db, current_user, project_id)}


@router.get("/favorites", response_model=List[ProjectOut])
def list_favorites(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return favorite_service.list_favorites(db, current_user)
