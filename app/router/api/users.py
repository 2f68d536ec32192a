from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.model.users import User
from app.router.dependencies import get_current_user
from app.router.api.logics.auth_logic import get_user_details_logic
from app.router.api.logics.leaderboard_logic import get_leaderboard_logic
from app.schema.user_schema import UserOut, LeaderboardOut

router = APIRouter()


@router.get("/user", response_model=UserOut, status_code=status.HTTP_200_OK)
def get_user(user: User = Depends(get_current_user)):
    """The authenticated user, including the running points total."""
    return get_user_details_logic(user)


@router.get("/leaderboard", response_model=LeaderboardOut, status_code=status.HTTP_200_OK)
def get_leaderboard(db: Session = Depends(get_db)):
    """Top 20 users by points. Public."""
    return get_leaderboard_logic(db)
