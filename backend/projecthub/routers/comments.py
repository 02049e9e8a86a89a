"""Comments API router."""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from typing import List

from projecthub.database import get_db
from projecthub.middleware.auth_middleware import get_current_user
from projecthub.models.user import User
from projecthub.schemas.comment import CommentCreate, CommentCreateResponse, CommentOut, MessageResponse
from projecthub.services import comment_service

router = APIRouter(prefix="/api/comments", tags=["comments"])


@router.get("/project/{project_id}", response_model=List[CommentOut])
def list_comments(project_id: int, db: Session = Depends(get_db)):
    return comment_service.list_comments(db, project_id)


@router.post("", response_model=CommentCreateResponse, status_code=status.HTTP_201_CREATED)
def create_comment(
    data: CommentCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    comment = comment_service.create_comment(db, data.project_id, current_user, data.text)
    return {"success": True, "message": "Comment added successfully.", "comment": comment}


@router.delete("/{comment_id}", response_model=MessageResponse)
def delete_comment(
    comment_id: int,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    comment_service.delete_comment(db, comment_id, current_user)
    return {"success": True, "message": "Comment deleted successfully."}
