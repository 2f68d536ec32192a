from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.model.users import User
from app.router.dependencies import get_current_admin
from app.router.api.logics.question_logic import (
    list_questions_logic, get_question_logic, random_question_logic,
    create_question_logic, update_question_logic, delete_question_logic,
)
from app.schema.question_schema import QuestionCreate, QuestionUpdate

router = APIRouter()


@router.get("", response_model=dict, status_code=status.HTTP_200_OK)
def list_questions(hide_answers: bool = Query(False), db: Session = Depends(get_db)):
    """List every question. Pass hide_answers=true for quiz mode."""
    return list_questions_logic(db, hide_answers)


@router.get("/random", response_model=dict, status_code=status.HTTP_200_OK)
def random_question(hide_answers: bool = Query(True), db: Session = Depends(get_db)):
    """One random question, answer hidden unless hide_answers=false."""
    return random_question_logic(db, hide_answers)


@router.get("/{question_id}", response_model=dict, status_code=status.HTTP_200_OK)
def get_question(question_id: int, hide_answers: bool = Query(False), db: Session = Depends(get_db)):
    return get_question_logic(db, question_id, hide_answers)


@router.post("", response_model=dict, status_code=status.HTTP_201_CREATED)
def create_question(
    request: QuestionCreate,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """Create a question.

    Args:
        request (QuestionCreate): prompt, the four options and the correct letter
        db (Session): Database session
        admin (User): Current admin user

    Returns:
        dict: success flag, message and the created question
    """
    return create_question_logic(db, request)


@router.put("/{question_id}", response_model=dict, status_code=status.HTTP_200_OK)
def update_question(
    question_id: int,
    request: QuestionUpdate,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """Partially update a question. Only the fields sent are changed."""
    return update_question_logic(db, question_id, request)


@router.delete("/{question_id}", response_model=dict, status_code=status.HTTP_200_OK)
def delete_question(
    question_id: int,
    db: Session = Depends(get_db),
    admin: User = Depends(get_current_admin),
):
    """Delete a question together with its attempts. Points already awarded stay."""
    return delete_question_logic(db, question_id)
