"""Pydantic schemas for the analytics rollup."""

from pydantic import AliasGenerator, BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from typing import List, Optional

_output_config = ConfigDict(alias_generator=AliasGenerator(serialization_alias=to_camel))


class MostLikedProject(BaseModel):
    id: int
    title: str
    likes: int
    author: str


class TopRatedProject(BaseModel):
    id: int
    title: str
    rating: float
    author: str


class TagCount(BaseModel):
    tag: str
    count: int


class AnalyticsOut(BaseModel):
    total_projects: int
    total_users: int
    total_comments: int
    most_liked_project: Optional[MostLikedProject] = None
    top_rated_projects: List[TopRatedProject]
    popular_tags: List[TagCount]

    model_config = _output_config
