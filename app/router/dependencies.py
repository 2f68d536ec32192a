from typing import Tuple

from fastapi import Depends, Query, status, HTTPException
from fastapi.security import OAuth2PasswordBearer
from jose import jwt
from pydantic import ValidationError
from sqlalchemy.orm import Session

from app.config import settings
from app.database import get_db
from app.log import get_logger
from app.model.users import User
from app.schema.auth_schema import TokenPayload

log = get_logger(__name__)

oauth2_scheme = OAuth2PasswordBearer(tokenUrl="login")

CREDENTIALS_EXCEPTION = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Could not validate credentials",
    headers={"WWW-Authenticate": "Bearer"},
)


def get_pagination_params(
    page: int = Query(1, ge=1), per_page: int = Query(15, gt=0, le=100)
) -> Tuple[int, int]:
    return page, per_page


def get_token(token: str = Depends(oauth2_scheme)) -> TokenPayload:
    try:
        payload = jwt.decode(token, settings.SECRET_KEY, algorithms=[settings.ALGORITHM])
        token_data = TokenPayload(**payload)
    except (jwt.JWTError, ValidationError) as e:
        log.info("Rejected bearer token: %s", e)
        raise CREDENTIALS_EXCEPTION from e
    return token_data


def get_current_user(
    db: Session = Depends(get_db), token: TokenPayload = Depends(get_token)
) -> User:
    if not token.sub.isdigit():
        raise CREDENTIALS_EXCEPTION
    user = db.query(User).filter(User.id == int(token.sub)).first()
    if not user:
        raise CREDENTIALS_EXCEPTION
    return user


def get_current_admin(
    current_user: User = Depends(get_current_user),
) -> User:
    if not current_user.is_admin:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="This user isn't an admin.",
        )
    return current_user
