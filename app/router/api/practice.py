from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.database import get_db
from app.router.api.logics.question_logic import check_answers_logic
from app.schema.question_schema import CheckAnswersRequest, CheckAnswersOut

router = APIRouter()


@router.post("/check-answers", response_model=CheckAnswersOut, status_code=status.HTTP_200_OK)
def check_answers(request: CheckAnswersRequest, db: Session = Depends(get_db)):
    """Score a full answer sheet in practice mode.

    Nothing is stored and no points are awarded; the response lists the
    correct option of every question.
    """
    return check_answers_logic(db, request.answers)
