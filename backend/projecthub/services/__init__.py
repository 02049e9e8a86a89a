"""Service layer package."""

from projecthub.services import (
    identity_service,
    rating_service,
    favorite_service,
    project_service,
    comment_service,
    analytics_service,
    user_service,
)
