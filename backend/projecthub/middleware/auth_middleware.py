import logging

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from sqlalchemy.orm import Session
from projecthub.database import get_db
from projecthub.models.user import User
from projecthub.schemas.user import Identity
from projecthub.services.identity_service import (
    ANONYMOUS_NAME,
    UNKNOWN_AUTHOR_NAME,
    TokenVerificationError,
    get_or_create_user,
    verify_token,
)

logger = logging.getLogger(__name__)

security = HTTPBearer(auto_error=False)


def get_identity(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> Identity:
    if credentials is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="No token provided",
            headers={"WWW-Authenticate": "Bearer"},
        )
    try:
        return verify_token(credentials.credentials)
    except TokenVerificationError as exc:
        logger.warning("token verification failed: %s", exc)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid or expired token",
            headers={"WWW-Authenticate": "Bearer"},
        )


def resolve_user(default_name: str = ANONYMOUS_NAME):
    def resolver(
        identity: Identity = Depends(get_identity),
        db: Session = Depends(get_db),
    ) -> User:
        return get_or_create_user(db, identity, default_name=default_name)
    return resolver


get_current_user = resolve_user(ANONYMOUS_NAME)
get_current_author = resolve_user(UNKNOWN_AUTHOR_NAME)
