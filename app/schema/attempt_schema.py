from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel

from app.schema.question_schema import OptionLetter, QuestionOut


class AttemptCreate(BaseModel):
    question_id: int
    user_answer: OptionLetter


class AttemptResult(BaseModel):
    success: bool = True
    is_correct: bool
    points_added: int
    total_points: int


class AttemptOut(BaseModel):
    id: int
    user_id: int
    question_id: int
    user_answer: OptionLetter
    is_correct: bool
    created_at: datetime
    question: Optional[QuestionOut] = None


class AttemptDetailOut(BaseModel):
    success: bool = True
    data: AttemptOut


class Pagination(BaseModel):
    current_page: int
    last_page: int
    per_page: int
    total: int


class AttemptsOut(BaseModel):
    success: bool = True
    data: List[AttemptOut]
    pagination: Pagination


class AttemptStatistics(BaseModel):
    total_attempts: int
    correct_attempts: int
    incorrect_attempts: int
    accuracy_percentage: float
    total_points: int
    attempted_questions: int
    total_questions: int
    unattempted_questions: int


class AttemptStatisticsOut(BaseModel):
    success: bool = True
    data: AttemptStatistics
