import math
from typing import Optional

from sqlalchemy import distinct, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session, joinedload

from app.exceptions import DuplicateAttemptError, NotFoundError, ValidationError
from app.log import get_logger
from app.model.attempts import Attempt
from app.model.questions import Question
from app.model.users import User
from app.router.api.logics.question_logic import serialize_question
from app.schema.attempt_schema import (
    AttemptCreate, AttemptResult, AttemptOut, AttemptDetailOut,
    AttemptsOut, Pagination, AttemptStatistics, AttemptStatisticsOut,
)

log = get_logger(__name__)

POINTS_PER_CORRECT_ANSWER = 10


def serialize_attempt(attempt: Attempt) -> AttemptOut:
    return AttemptOut(
        id=attempt.id,
        user_id=attempt.user_id,
        question_id=attempt.question_id,
        user_answer=attempt.user_answer,
        is_correct=attempt.is_correct,
        created_at=attempt.created_at,
        question=serialize_question(attempt.question) if attempt.question else None,
    )


def find_attempt(db: Session, user_id: int, question_id: int) -> Optional[Attempt]:
    return (
        db.query(Attempt)
        .filter(Attempt.user_id == user_id, Attempt.question_id == question_id)
        .first()
    )


def submit_attempt_logic(db: Session, user: User, submission: AttemptCreate) -> AttemptResult:
    """Score one answer and credit the user.

    The attempt insert and the points increment share one transaction. The
    existence check only gives early feedback; the unique constraint on
    (user_id, question_id) is what rejects a concurrent duplicate, and the
    rollback guarantees no points are credited for it.
    """
    question = db.query(Question).filter(Question.id == submission.question_id).first()
    if not question:
        raise ValidationError({"question_id": ["The selected question id is invalid."]})

    if find_attempt(db, user.id, question.id):
        log.warning("Duplicate attempt rejected: user=%s question=%s", user.id, question.id)
        raise DuplicateAttemptError()

    is_correct = submission.user_answer == question.correct_answer
    points_added = POINTS_PER_CORRECT_ANSWER if is_correct else 0

    attempt = Attempt(
        user_id=user.id,
        question_id=question.id,
        user_answer=submission.user_answer,
        is_correct=is_correct,
    )
    try:
        db.add(attempt)
        db.flush()
        if points_added:
            db.query(User).filter(User.id == user.id).update(
                {User.points: User.points + points_added}, synchronize_session=False
            )
        db.commit()
    except IntegrityError as e:
        db.rollback()
        if not db.query(Question.id).filter(Question.id == submission.question_id).first():
            raise NotFoundError("Question not found") from e
        log.warning("Concurrent duplicate attempt rejected: user=%s question=%s", user.id, submission.question_id)
        raise DuplicateAttemptError() from e

    db.refresh(user)
    log.info(
        "Attempt scored: user=%s question=%s correct=%s points_added=%s total=%s",
        user.id, question.id, is_correct, points_added, user.points,
    )
    return AttemptResult(
        is_correct=is_correct,
        points_added=points_added,
        total_points=user.points,
    )


def list_attempts_logic(
    db: Session,
    user: User,
    page: int,
    per_page: int,
    question_id: Optional[int] = None,
    is_correct: Optional[bool] = None,
) -> AttemptsOut:
    """Return the user's attempts, newest first, one page at a time."""
    query = db.query(Attempt).filter(Attempt.user_id == user.id)
    if question_id is not None:
        query = query.filter(Attempt.question_id == question_id)
    if is_correct is not None:
        query = query.filter(Attempt.is_correct == is_correct)

    total = query.count()
    attempts = (
        query.options(joinedload(Attempt.question))
        .order_by(Attempt.created_at.desc(), Attempt.id.desc())
        .offset((page - 1) * per_page)
        .limit(per_page)
        .all()
    )
    return AttemptsOut(
        data=[serialize_attempt(a) for a in attempts],
        pagination=Pagination(
            current_page=page,
            last_page=max(1, math.ceil(total / per_page)),
            per_page=per_page,
            total=total,
        ),
    )


def get_attempt_logic(db: Session, user: User, attempt_id: int) -> AttemptDetailOut:
    attempt = (
        db.query(Attempt)
        .options(joinedload(Attempt.question))
        .filter(Attempt.id == attempt_id, Attempt.user_id == user.id)
        .first()
    )
    if not attempt:
        raise NotFoundError("Attempt not found")
    return AttemptDetailOut(data=serialize_attempt(attempt))


def get_attempt_by_question_logic(db: Session, user: User, question_id: int) -> AttemptDetailOut:
    attempt = find_attempt(db, user.id, question_id)
    if not attempt:
        raise NotFoundError("No attempt found for this question")
    return AttemptDetailOut(data=serialize_attempt(attempt))


def attempt_statistics_logic(db: Session, user: User) -> AttemptStatisticsOut:
    total_attempts = db.query(func.count(Attempt.id)).filter(Attempt.user_id == user.id).scalar()
    correct_attempts = (
        db.query(func.count(Attempt.id))
        .filter(Attempt.user_id == user.id, Attempt.is_correct.is_(True))
        .scalar()
    )
    attempted_questions = (
        db.query(func.count(distinct(Attempt.question_id)))
        .filter(Attempt.user_id == user.id)
        .scalar()
    )
    total_questions = db.query(func.count(Question.id)).scalar()

    accuracy = round(correct_attempts / total_attempts * 100, 2) if total_attempts else 0

    return AttemptStatisticsOut(
        data=AttemptStatistics(
            total_attempts=total_attempts,
            correct_attempts=correct_attempts,
            incorrect_attempts=total_attempts - correct_attempts,
            accuracy_percentage=accuracy,
            total_points=user.points,
            attempted_questions=attempted_questions,
            total_questions=total_questions,
            unattempted_questions=total_questions - attempted_questions,
        )
    )
