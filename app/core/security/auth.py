from datetime import datetime, timedelta, timezone
from fastapi import HTTPException, status
from jose import jwt, JWTError
from loguru import logger
from tortoise.exceptions import DoesNotExist

from app.core.config import settings
from app.models.user import User
from app.schemas.user import TokenPayload


def _signing_key(user: User) -> str:
    return settings.get_user_secret_key(user.id, user.salt)


def _credentials_error(detail: str = "Could not validate credentials") -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def create_access_token(user: User) -> dict:
    """
    Issue a bearer token for a staff account.

    Role names are copied into the token for clients; access checks read the
    roles from the database. Tokens are signed with the user's own key, so
    rotating the salt revokes them.
    """
    now = datetime.now(timezone.utc)
    expire = now + timedelta(minutes=settings.access_token_expire_minutes)
    payload = TokenPayload(
        sub=user.id,
        email=user.email,
        roles=await user.role_names(),
        iat=int(now.timestamp()),
        exp=int(expire.timestamp()),
    )
    token = jwt.encode(payload.model_dump(mode="json"), _signing_key(user), algorithm=settings.algorithm)

    return {
        "access_token": token,
        "token_type": "bearer",
        "user_id": str(user.id)
    }


async def verify_token(token: str) -> User:
    """
    Validate the bearer token and return its user.

    The claims are read unverified first: the signing key depends on the user
    they name.
    """
    try:
        claims = TokenPayload.model_validate(jwt.get_unverified_claims(token))
        user = await User.get(id=claims.sub)
        jwt.decode(token, _signing_key(user), algorithms=[settings.algorithm])
    except (JWTError, DoesNotExist, ValueError) as e:
        logger.warning(f"Authentication error: {e}")
        raise _credentials_error()

    if claims.email != user.email:
        logger.warning(f"Token issued for {claims.email} presented for {user.email}")
        raise _credentials_error()
    if not user.is_active:
        raise _credentials_error("Inactive user")
    return user
