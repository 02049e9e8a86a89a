"""Pydantic schemas for User request/response contracts."""

from pydantic import AliasGenerator, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel
from typing import List, Optional
from datetime import datetime


class Identity(BaseModel):
    """Claims of an identity already verified by the external provider."""

    uid: str
    email: Optional[str] = None
    name: Optional[str] = None
    picture: Optional[str] = None


class ProfileUpdate(BaseModel):
    display_name: Optional[str] = None
    photo_url: Optional[str] = Field(default=None, alias="photoURL")
    bio: Optional[str] = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class UserSummary(BaseModel):
    user_id: int = Field(serialization_alias="id")
    uid: str
    display_name: str
    photo_url: Optional[str] = Field(default="", serialization_alias="photoURL")
    bio: Optional[str] = ""

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=AliasGenerator(serialization_alias=to_camel),
    )


class UserPublicOut(UserSummary):
    email: Optional[str] = ""
    created_at: Optional[datetime] = None


class UserOut(UserPublicOut):
    favorites: List[int] = Field(default_factory=list)


class FavoritesOut(BaseModel):
    favorites: List[int]
