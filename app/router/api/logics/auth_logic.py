from datetime import timedelta
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from fastapi import HTTPException, status

from app.auth_util import create_access_token, get_password_hash, verify_password
from app.config import settings
from app.exceptions import ValidationError
from app.log import get_logger
from app.model.users import User
from app.schema.auth_schema import LoginRequest, UserRegister, Token
from app.schema.user_schema import UserOut

log = get_logger(__name__)

EMAIL_TAKEN = {"email": ["The email has already been taken."]}


def issue_token(user: User) -> Token:
    access_token = create_access_token(
        subject=user.id,
        email=user.email,
        name=user.name,
        role="admin" if user.is_admin else "user",
        expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
    )
    return Token(access_token=access_token, token_type="bearer")


def register_logic(db: Session, request: UserRegister) -> Token:
    email = request.email.lower()
    if db.query(User).filter(User.email == email).first():
        raise ValidationError(EMAIL_TAKEN)

    user = User(
        name=request.name,
        email=email,
        hashed_password=get_password_hash(request.password),
        points=0,
        is_admin=False,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise ValidationError(EMAIL_TAKEN) from e
    db.refresh(user)
    log.info("User %s registered", user.id)
    return issue_token(user)


def login_logic(db: Session, request: LoginRequest) -> Token:
    user = db.query(User).filter(User.email == request.email.lower()).first()
    if not user or not verify_password(request.password, user.hashed_password):
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials.",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return issue_token(user)


def get_user_details_logic(user: User) -> UserOut:
    return UserOut(
        id=user.id,
        name=user.name,
        email=user.email,
        points=user.points,
        is_admin=user.is_admin,
    )
