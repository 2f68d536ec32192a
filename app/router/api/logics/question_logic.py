from typing import Any, Dict, Union

from sqlalchemy import func
from sqlalchemy.orm import Session

from app.exceptions import NotFoundError
from app.log import get_logger
from app.model.questions import Question
from app.schema.question_schema import (
    QuestionCreate, QuestionUpdate, QuestionOut, QuestionPublicOut,
    CheckAnswersOut, CorrectAnswerOut,
)

log = get_logger(__name__)


def serialize_question(question: Question, hide_answers: bool = False) -> Union[QuestionOut, QuestionPublicOut]:
    """Full view for administration, or the quiz-serving view without the answer."""
    if hide_answers:
        return QuestionPublicOut(
            id=question.id,
            question=question.question,
            option_a=question.option_a,
            option_b=question.option_b,
            option_c=question.option_c,
            option_d=question.option_d,
        )
    return QuestionOut(
        id=question.id,
        question=question.question,
        option_a=question.option_a,
        option_b=question.option_b,
        option_c=question.option_c,
        option_d=question.option_d,
        correct_answer=question.correct_answer,
        created_at=question.created_at,
        updated_at=question.updated_at,
    )


def _get_question_or_404(db: Session, question_id: int) -> Question:
    question = db.query(Question).filter(Question.id == question_id).first()
    if not question:
        raise NotFoundError("Question not found")
    return question


def list_questions_logic(db: Session, hide_answers: bool) -> Dict:
    questions = db.query(Question).order_by(Question.id.asc()).all()
    data = [serialize_question(q, hide_answers) for q in questions]
    return {"success": True, "data": data, "count": len(data)}


def get_question_logic(db: Session, question_id: int, hide_answers: bool) -> Dict:
    question = _get_question_or_404(db, question_id)
    return {"success": True, "data": serialize_question(question, hide_answers)}


def random_question_logic(db: Session, hide_answers: bool) -> Dict:
    question = db.query(Question).order_by(func.random()).first()
    if not question:
        raise NotFoundError("No questions available")
    return {"success": True, "data": serialize_question(question, hide_answers)}


def create_question_logic(db: Session, request: QuestionCreate) -> Dict:
    question = Question(**request.model_dump())
    db.add(question)
    db.commit()
    db.refresh(question)
    log.info("Question %s created", question.id)
    return {
        "success": True,
        "message": "Question created successfully",
        "data": serialize_question(question),
    }


def update_question_logic(db: Session, question_id: int, request: QuestionUpdate) -> Dict:
    question = _get_question_or_404(db, question_id)
    changes = request.model_dump(exclude_unset=True)
    for field, value in changes.items():
        setattr(question, field, value)
    db.commit()
    db.refresh(question)
    log.info("Question %s updated: %s", question.id, sorted(changes))
    return {
        "success": True,
        "message": "Question updated successfully",
        "data": serialize_question(question),
    }


def delete_question_logic(db: Session, question_id: int) -> Dict:
    question = _get_question_or_404(db, question_id)
    db.delete(question)
    db.commit()
    log.info("Question %s deleted", question_id)
    return {"success": True, "message": "Question deleted successfully"}


def check_answers_logic(db: Session, answers: Dict[str, Any]) -> CheckAnswersOut:
    """Score a whole answer sheet without persisting anything.

    Every stored question is scored and listed, answered or not; ids that
    match no question are ignored.
    """
    score = 0
    correct_answers = []
    for question in db.query(Question).order_by(Question.id.asc()).all():
        if answers.get(str(question.id)) == question.correct_answer:
            score += 1
        correct_answers.append(
            CorrectAnswerOut(question_id=question.id, correct_option=question.correct_answer)
        )
    return CheckAnswersOut(score=score, correct_answers=correct_answers)
