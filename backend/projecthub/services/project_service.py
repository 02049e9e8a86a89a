"""Project catalog service layer. Encapsulates business rules and data access flow."""

import logging
import re
from typing import List, Optional, Union

from sqlalchemy import func, or_
from sqlalchemy.orm import Session, selectinload

from projecthub.config import settings
from projecthub.exceptions import NotFoundError, ValidationError
from projecthub.models.project import Project, ProjectTag
from projecthub.models.user import User
from projecthub.schemas.project import ProjectCreate, ProjectUpdate
from projecthub.utils.helpers import escape_like, normalize_tags, page_count
from projecthub.utils.permissions import ensure_project_owner

logger = logging.getLogger(__name__)

DEFAULT_PAGE = 1
REQUIRED_TEXT_FIELDS = ("title", "description", "github_link")
LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _with_relations(query):
    return query.options(
        selectinload(Project.author),
        selectinload(Project.tag_rows),
        selectinload(Project.like_rows),
        selectinload(Project.ratings),
    )


def _parse_int(value: Union[int, str, None]) -> Optional[int]:
    """Read the leading integer of a query value; junk and empty strings give None."""
    if value is None or isinstance(value, int):
        return value
    match = LEADING_INT.match(value)
    return int(match.group(1)) if match else None


def normalize_paging(page: Union[int, str, None], limit: Union[int, str, None]) -> tuple[int, int]:
    page, limit = _parse_int(page), _parse_int(limit)
    page = page if page and page > 0 else DEFAULT_PAGE
    limit = limit if limit and limit > 0 else settings.DEFAULT_PAGE_SIZE
    return page, min(limit, settings.MAX_PAGE_SIZE)


def build_filters(search: Optional[str] = None, tag: Optional[str] = None) -> list:
    filters = []
    search = (search or "").strip()
    if search:
        pattern = f"%{escape_like(search.lower())}%"
        filters.append(
            or_(
                Project.title.ilike(pattern, escape="\\"),
                Project.description.ilike(pattern, escape="\\"),
            )
        )
    if tag:
        filters.append(Project.tag_rows.any(ProjectTag.tag == tag))
    return filters


def list_projects(
    db: Session,
    page: Union[int, str, None] = None,
    limit: Union[int, str, None] = None,
    search: Optional[str] = None,
    tag: Optional[str] = None,
) -> dict:
    page, limit = normalize_paging(page, limit)
    filters = build_filters(search, tag)

    total = db.query(Project).filter(*filters).count()
    projects = (
        _with_relations(db.query(Project).filter(*filters))
        .order_by(Project.created_at.desc(), Project.project_id.desc())
        .offset((page - 1) * limit)
        .limit(limit)
        .all()
    )
    return {
        "projects": projects,
        "current_page": page,
        "total_pages": page_count(total, limit),
        "total": total,
    }


def get_project(db: Session, project_id: int) -> Project:
    project = _with_relations(db.query(Project)).filter(Project.project_id == project_id).first()
    if not project:
        raise NotFoundError("Project not found")
    return project


def _clean_text(value: Optional[str]) -> str:
    return str(value or "").strip()


def create_project(db: Session, data: ProjectCreate, author: User) -> Project:
    payload = {field: _clean_text(getattr(data, field)) for field in REQUIRED_TEXT_FIELDS}
    missing = [field for field, value in payload.items() if not value]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")

    project = Project(
        title=payload["title"],
        description=payload["description"],
        github_link=payload["github_link"],
        live_link=_clean_text(data.live_link),
        author_id=author.user_id,
        author_name=author.display_name,
    )
    project.tags = normalize_tags(data.tags)
    db.add(project)
    db.commit()
    db.refresh(project)
    logger.info("user %s created project %s", author.user_id, project.project_id)
    return project


def update_project(db: Session, project_id: int, data: ProjectUpdate, actor: User) -> Project:
    project = get_project(db, project_id)
    ensure_project_owner(project, actor)

    present = data.model_fields_set
    # Empty values never blank out required fields.
    for field in REQUIRED_TEXT_FIELDS:
        if field in present:
            value = _clean_text(getattr(data, field))
            if value:
                setattr(project, field, value)
    if "tags" in present and data.tags is not None:
        project.tags = normalize_tags(data.tags)
    # The demo link is optional, so an explicit empty string clears it.
    if "live_link" in present:
        project.live_link = _clean_text(data.live_link)
    project.updated_at = func.now()

    db.commit()
    db.refresh(project)
    return project


def delete_project(db: Session, project_id: int, actor: User) -> None:
    project = get_project(db, project_id)
    ensure_project_owner(project, actor)
    db.delete(project)
    db.commit()
    logger.info("user %s deleted project %s", actor.user_id, project_id)


def list_user_projects(db: Session, user: User) -> List[Project]:
    return (
        _with_relations(db.query(Project))
        .filter(Project.author_id == user.user_id)
        .order_by(Project.created_at.desc(), Project.project_id.desc())
        .all()
    )
