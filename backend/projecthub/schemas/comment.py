"""Pydantic schemas for Comment request/response contracts."""

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Optional
from datetime import datetime

from projecthub.schemas.user import UserSummary


class CommentCreate(BaseModel):
    text: Optional[str] = None
    project_id: int

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CommentOut(BaseModel):
    comment_id: int = Field(serialization_alias="id")
    text: str
    project_id: int = Field(serialization_alias="project")
    author_id: int
    author: Optional[UserSummary] = None
    author_name: str
    created_at: Optional[datetime] = None

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )


class CommentCreateResponse(BaseModel):
    success: bool = True
    message: str = "Comment added successfully."
    comment: CommentOut


class MessageResponse(BaseModel):
    success: bool = True
    message: str
