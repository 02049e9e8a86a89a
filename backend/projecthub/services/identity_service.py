"""Identity resolution: verified provider claims -> local User.

Tokens are issued by the external identity provider; this module only checks them
with the configured key and maps the subject onto a local user record, creating
that record the first time a subject is seen.
"""

import logging
from datetime import datetime, timedelta, timezone
from typing import Optional

from jose import JWTError, jwt
from jose.exceptions import JWKError
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from projecthub.config import settings
from projecthub.exceptions import UpstreamError
from projecthub.models.user import User
from projecthub.schemas.user import Identity

logger = logging.getLogger(__name__)

ANONYMOUS_NAME = "Anonymous"
UNKNOWN_AUTHOR_NAME = "Unknown User"
SUBJECT_CLAIMS = ("uid", "user_id", "sub")


class TokenVerificationError(Exception):
    pass


def verify_token(token: str) -> Identity:
    options = {"verify_aud": bool(settings.IDENTITY_AUDIENCE)}
    try:
        payload = jwt.decode(
            token,
            settings.identity_verification_key(),
            algorithms=settings.IDENTITY_ALGORITHMS,
            audience=settings.IDENTITY_AUDIENCE,
            issuer=settings.IDENTITY_ISSUER,
            options=options,
        )
    except JWKError as exc:
        logger.error("identity provider key rejected: %s", exc)
        raise UpstreamError("Identity provider key is not usable") from exc
    except JWTError as exc:
        raise TokenVerificationError(str(exc)) from exc

    uid = next((str(payload[key]) for key in SUBJECT_CLAIMS if payload.get(key)), None)
    if not uid:
        raise TokenVerificationError("token has no subject claim")
    return Identity(
        uid=uid,
        email=payload.get("email"),
        name=payload.get("name"),
        picture=payload.get("picture"),
    )


def create_access_token(
    uid: str,
    email: Optional[str] = None,
    name: Optional[str] = None,
    picture: Optional[str] = None,
    expires_minutes: Optional[int] = None,
) -> str:
    """Sign a provider-shaped token with the shared secret (local development and tests)."""
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes or settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    payload = {"sub": uid, "uid": uid, "exp": expire}
    for key, value in (("email", email), ("name", name), ("picture", picture)):
        if value is not None:
            payload[key] = value
    if settings.IDENTITY_AUDIENCE:
        payload["aud"] = settings.IDENTITY_AUDIENCE
    if settings.IDENTITY_ISSUER:
        payload["iss"] = settings.IDENTITY_ISSUER
    return jwt.encode(payload, settings.IDENTITY_SECRET_KEY, algorithm=settings.IDENTITY_ALGORITHMS[0])


def find_user(db: Session, uid: str) -> Optional[User]:
    return db.query(User).filter(User.uid == uid).first()


def get_or_create_user(db: Session, identity: Identity, default_name: str = ANONYMOUS_NAME) -> User:
    user = find_user(db, identity.uid)
    if user:
        return user

    user = User(
        uid=identity.uid,
        email=identity.email or "",
        display_name=identity.name or default_name,
        photo_url=identity.picture or "",
        bio="",
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Another request provisioned the same subject first.
        db.rollback()
        return find_user(db, identity.uid)
    db.refresh(user)
    logger.info("auto-created user %s for subject %s", user.user_id, identity.uid)
    return user
