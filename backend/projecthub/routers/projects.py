"""Projects API router. Validates requests and delegates business logic to the service layer."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List, Optional
from projecthub.database import get_db
from projecthub.schemas.project import (
    LikeResponse,
    ProjectCreate,
    ProjectCreateResponse,
    ProjectOut,
    ProjectPage,
    ProjectUpdate,
    RatingRequest,
    RatingResponse,
)
from projecthub.services import project_service, rating_service
from projecthub.middleware.auth_middleware import get_current_author, get_current_user
from projecthub.models.user import User

router = APIRouter(prefix="/api/projects", tags=["projects"])


@router.get("", response_model=ProjectPage)
def list_projects(
    page: Optional[str] = None,
    limit: Optional[str] = None,
    search: Optional[str] = None,
    tag: Optional[str] = None,
    db: Session = Depends(get_db),
):
    return project_service.list_projects(db, page=page, limit=limit, search=search, tag=tag)


@router.post("", response_model=ProjectCreateResponse, status_code=status.HTTP_201_CREATED)
def create_project(
    data: ProjectCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_author),
):
    project = project_service.create_project(db, data, current_user)
    return {"success": True, "message": "Project created successfully", "project": project}


@router.get("/user/my-projects", response_model=List[ProjectOut])
def my_projects(db: Session = Depends(get_db), current_user: User = Depends(get_current_user)):
    return project_service.list_user_projects(db, current_user)


@router.get("/{project_id}", response_model=ProjectOut)
def get_project(project_id: int, db: Session = Depends(get_db)):
    return project_service.get_project(db, project_id)


@router.put("/{project_id}", response_model=ProjectOut)
def update_project(
    project_id: int,
    data: ProjectUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    return project_service.update_project(db, project_id, data, current_user)


@router.delete("/{project_id}")
def delete_project(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    project_service.delete_project(db, project_id, current_user)
    return {"message": "Project deleted"}


@router.post("/{project_id}/like", response_model=LikeResponse)
def toggle_like(
    project_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    project = project_service.get_project(db, project_id)
    return {"likes": rating_service.toggle_like(db, project, current_user)}


@router.post("/{project_id}/rate", response_model=RatingResponse)
def rate_project(
    project_id: int,
    data: RatingRequest,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    # Out-of-range values are rejected before the project is loaded.
    rating_service.validate_rating(data.rating)
    project = project_service.get_project(db, project_id)
    average = rating_service.rate(db, project, current_user, data.rating)
    return {"success": True, "message": "Rating updated successfully", "average_rating": average}
