from typing import Optional, Tuple

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.model.users import User
from app.router.dependencies import get_current_user, get_pagination_params
from app.router.api.logics.attempt_logic import (
    submit_attempt_logic, list_attempts_logic, get_attempt_logic,
    get_attempt_by_question_logic, attempt_statistics_logic,
)
from app.schema.attempt_schema import (
    AttemptCreate, AttemptResult, AttemptsOut, AttemptDetailOut, AttemptStatisticsOut,
)

router = APIRouter()


@router.get("", response_model=AttemptsOut, status_code=status.HTTP_200_OK)
def list_attempts(
    question_id: Optional[int] = Query(None),
    is_correct: Optional[bool] = Query(None),
    pagination: Tuple[int, int] = Depends(get_pagination_params),
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """The current user's attempts, newest first.

    Args:
        question_id (int, optional): only attempts on this question
        is_correct (bool, optional): only correct or only incorrect attempts
        pagination (Tuple[int, int]): page and per_page
        db (Session): Database session
        user (User): Current user

    Returns:
        AttemptsOut: one page of attempts with pagination metadata
    """
    page, per_page = pagination
    return list_attempts_logic(db, user, page, per_page, question_id=question_id, is_correct=is_correct)


@router.post("", response_model=AttemptResult, status_code=status.HTTP_200_OK)
def submit_attempt(
    submission: AttemptCreate,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    """Answer a question once. A correct answer is worth 10 points.

    Raises:
        ValidationError: unknown question_id (422)
        DuplicateAttemptError: the question was already answered (409)
    """
    return submit_attempt_logic(db, user, submission)


@router.get("/statistics", response_model=AttemptStatisticsOut, status_code=status.HTTP_200_OK)
def get_statistics(db: Session = Depends(get_db), user: User = Depends(get_current_user)):
    return attempt_statistics_logic(db, user)


@router.get("/question/{question_id}", response_model=AttemptDetailOut, status_code=status.HTTP_200_OK)
def get_attempt_by_question(
    question_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return get_attempt_by_question_logic(db, user, question_id)


@router.get("/{attempt_id}", response_model=AttemptDetailOut, status_code=status.HTTP_200_OK)
def get_attempt(
    attempt_id: int,
    db: Session = Depends(get_db),
    user: User = Depends(get_current_user),
):
    return get_attempt_logic(db, user, attempt_id)
