"""Pydantic schemas for Project request/response contracts."""

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import Any, List, Optional
from datetime import datetime

from projecthub.schemas.user import UserPublicOut, UserSummary

TITLE_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 2000

# Text is stripped before length limits apply; blank required fields are reported by the service.
_input_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, str_strip_whitespace=True)
_output_config = ConfigDict(
    from_attributes=True,
    alias_generator=AliasGenerator(serialization_alias=to_camel),
)


class ProjectCreate(BaseModel):
    title: str = Field(max_length=TITLE_MAX_LENGTH)
    description: str = Field(max_length=DESCRIPTION_MAX_LENGTH)
    tags: Optional[list] = None
    github_link: str
    live_link: Optional[str] = ""

    model_config = _input_config


class ProjectUpdate(BaseModel):
    title: Optional[str] = Field(default=None, max_length=TITLE_MAX_LENGTH)
    description: Optional[str] = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)
    tags: Optional[list] = None
    github_link: Optional[str] = None
    live_link: Optional[str] = None

    model_config = _input_config


class RatingRequest(BaseModel):
    # Checked by rating_service.validate_rating.
    rating: Any = None


class RatingOut(BaseModel):
    user_id: int = Field(serialization_alias="user")
    rating: float

    model_config = _output_config


class ProjectOut(BaseModel):
    project_id: int = Field(serialization_alias="id")
    title: str
    description: str
    tags: List[str] = Field(default_factory=list)
    github_link: str
    live_link: Optional[str] = ""
    author_id: int
    author: Optional[UserSummary] = None
    author_name: str
    likes: List[int] = Field(default_factory=list)
    ratings: List[RatingOut] = Field(default_factory=list)
    average_rating: float = 0
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    model_config = _output_config


class ProjectPage(BaseModel):
    projects: List[ProjectOut]
    current_page: int
    total_pages: int
    total: int

    model_config = _output_config


class ProjectCreateResponse(BaseModel):
    success: bool = True
    message: str = "Project created successfully"
    project: ProjectOut


class LikeResponse(BaseModel):
    likes: int


class RatingResponse(BaseModel):
    success: bool = True
    message: str = "Rating updated successfully"
    average_rating: float

    model_config = _output_config


class ProfileOut(BaseModel):
    user: UserPublicOut
    projects: List[ProjectOut]
