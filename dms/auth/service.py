
import logging
from datetime import datetime, timedelta, timezone
from dms.auth import tokens
from dms.config import settings
from dms.errors import BadRequest, NotFound
from dms.models.user import User
from dms.repositories.user_repository import UserRepository
from dms.schemas.auth import RegisterIn
from dms.utils.security import digest_token, new_reset_token

logger = logging.getLogger(__name__)

def register_user(users: UserRepository, body: RegisterIn) -> tuple[User, str]:
    if users.find_by_email(body.email):
        raise BadRequest("User already exists")
    user = users.create({
        "user_name": body.user_name,
        "first_name": body.first_name,
        "last_name": body.last_name,
        "email": body.email,
        "password": body.password,
        "role": int(body.role),
    })
    logger.info("Registered user %s with role %s", user.id, user.role)
    return user, tokens.issue(tokens.identity_for(user))

def login_user(users: UserRepository, email: str, password: str) -> tuple[User, str]:
    user = users.find_by_email(email)
    if not user:
        raise NotFound("Email address does not exist")
    if not users.verify_password(user, password):
        raise BadRequest("Password does not match")
    logger.info("User %s logged in", user.id)
    return user, tokens.issue(tokens.identity_for(user))

def request_password_reset(users: UserRepository, email: str) -> str:
    user = users.find_by_email(email)
    if not user:
        raise NotFound("Email address does not exist")
    token, digest = new_reset_token()
    expires = datetime.now(timezone.utc) + timedelta(minutes=settings.reset_token_expire_minutes)
    users.set_reset_token(user, digest, expires)
    logger.info("Password reset requested for user %s", user.id)
    return token

def reset_password(users: UserRepository, token: str, password: str) -> User:
    user = users.find_by_reset_token(digest_token(token))
    if not user or _expired(user.reset_password_expires):
        raise BadRequest("Password reset token is invalid or has expired")
    users.set_password(user, password)
    logger.info("Password reset for user %s", user.id)
    return user

def _expired(expires: datetime | None) -> bool:
    if expires is None:
        return True
    if expires.tzinfo is None:
        # sqlite drops the offset
        expires = expires.replace(tzinfo=timezone.utc)
    return expires <= datetime.now(timezone.utc)
