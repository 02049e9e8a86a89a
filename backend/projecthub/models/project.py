"""SQLAlchemy model definitions for the Project domain."""

from sqlalchemy import Column, Float, Integer, String, Text, DateTime, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from projecthub.database import Base
from projecthub.utils.helpers import average_rating


class Project(Base):
    __tablename__ = "projects"

    project_id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)
    github_link = Column(String(1000), nullable=False)
    live_link = Column(String(1000), default="")
    author_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    author_name = Column(String(100), nullable=False)
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, server_default=func.now())

    author = relationship("User", back_populates="projects")
    tag_rows = relationship(
        "ProjectTag",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="ProjectTag.position",
    )
    like_rows = relationship(
        "ProjectLike",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="ProjectLike.like_id",
    )
    ratings = relationship(
        "ProjectRating",
        back_populates="project",
        cascade="all, delete-orphan",
        order_by="ProjectRating.rating_id",
    )
    comments = relationship("Comment", back_populates="project", cascade="all, delete-orphan")

    __table_args__ = (
        Index("idx_project_author", "author_id"),
        Index("idx_project_created", "created_at"),
    )

    @property
    def tags(self):
        return [row.tag for row in self.tag_rows]

    @tags.setter
    def tags(self, values):
        self.tag_rows = [ProjectTag(position=i, tag=tag) for i, tag in enumerate(values)]

    @property
    def likes(self):
        return [row.user_id for row in self.like_rows]

    @property
    def average_rating(self) -> float:
        return average_rating(row.rating for row in self.ratings)


class ProjectTag(Base):
    __tablename__ = "project_tag"

    tag_id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.project_id", ondelete="CASCADE"), nullable=False)
    position = Column(Integer, nullable=False, default=0)
    tag = Column(String(100), nullable=False)

    project = relationship("Project", back_populates="tag_rows")

    __table_args__ = (
        Index("idx_project_tag_project", "project_id"),
        Index("idx_project_tag_tag", "tag"),
    )


class ProjectLike(Base):
    __tablename__ = "project_like"

    like_id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.project_id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    project = relationship("Project", back_populates="like_rows")

    __table_args__ = (
        UniqueConstraint("project_id", "user_id", name="uq_project_like_project_user"),
    )


class ProjectRating(Base):
    __tablename__ = "project_rating"

    rating_id = Column(Integer, primary_key=True, autoincrement=True)
    project_id = Column(Integer, ForeignKey("projects.project_id", ondelete="CASCADE"), nullable=False)
    user_id = Column(Integer, ForeignKey("users.user_id"), nullable=False)
    rating = Column(Float, nullable=False)  # 1..5, fractions allowed
    created_at = Column(DateTime, server_default=func.now())
    updated_at = Column(DateTime, onupdate=func.now())

    project = relationship("Project", back_populates="ratings")

    __table_args__ = (
        UniqueConstraint("project_id", "user_id", name="uq_project_rating_project_user"),
    )
