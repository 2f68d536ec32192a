from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.schema.auth_schema import Token, UserRegister, LoginRequest
from app.router.api.logics.auth_logic import register_logic, login_logic

router = APIRouter()


@router.post("/register", response_model=Token, status_code=status.HTTP_201_CREATED)
def register(request: UserRegister, db: Session = Depends(get_db)):
    """Create a user account and return an access token for it.

    Args:
        request (UserRegister): name, email and password of the new user
        db (Session): Database session

    Raises:
        ValidationError: When the email is already registered

    Returns:
        Token: Access token for the new user
    """
    return register_logic(db, request)


@router.post("/login", response_model=Token, status_code=status.HTTP_200_OK)
def login(request: LoginRequest, db: Session = Depends(get_db)):
    """Exchange email and password for an access token."""
    return login_logic(db, request)
