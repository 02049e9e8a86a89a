"""SQLAlchemy model definitions for the User domain."""

from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey, Index, UniqueConstraint
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from projecthub.database import Base


class User(Base):
    __tablename__ = "users"

    user_id = Column(Integer, primary_key=True, autoincrement=True)
    uid = Column(String(128), unique=True, nullable=False)  # identity-provider subject
    email = Column(String(255), default="")
    display_name = Column(String(100), nullable=False)
    photo_url = Column(String(1000), default="")
    bio = Column(Text, default="")
    created_at = Column(DateTime, server_default=func.now())

    projects = relationship("Project", back_populates="author")
    comments = relationship("Comment", back_populates="author")
    favorite_rows = relationship(
        "UserFavorite",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="UserFavorite.favorite_id",
    )

    @property
    def favorites(self):
        return [row.project_id for row in self.favorite_rows]


class UserFavorite(Base):
    __tablename__ = "user_favorite"

    favorite_id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, ForeignKey("users.user_id", ondelete="CASCADE"), nullable=False)
    # Plain reference: favorites are not checked against existing projects.
    project_id = Column(Integer, nullable=False)
    created_at = Column(DateTime, server_default=func.now())

    user = relationship("User", back_populates="favorite_rows")

    __table_args__ = (
        UniqueConstraint("user_id", "project_id", name="uq_user_favorite_user_project"),
        Index("idx_user_favorite_user", "user_id"),
    )
