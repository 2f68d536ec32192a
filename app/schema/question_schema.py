from datetime import datetime
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

OptionLetter = Literal["A", "B", "C", "D"]

QUESTION_FIELDS = ("question", "option_a", "option_b", "option_c", "option_d", "correct_answer")


class QuestionCreate(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    question: str = Field(min_length=1)
    option_a: str = Field(min_length=1, max_length=255)
    option_b: str = Field(min_length=1, max_length=255)
    option_c: str = Field(min_length=1, max_length=255)
    option_d: str = Field(min_length=1, max_length=255)
    correct_answer: OptionLetter


class QuestionUpdate(BaseModel):
    """Partial update. Fields left out are unchanged, fields sent must be valid."""
    model_config = ConfigDict(str_strip_whitespace=True)

    question: Optional[str] = Field(default=None, min_length=1)
    option_a: Optional[str] = Field(default=None, min_length=1, max_length=255)
    option_b: Optional[str] = Field(default=None, min_length=1, max_length=255)
    option_c: Optional[str] = Field(default=None, min_length=1, max_length=255)
    option_d: Optional[str] = Field(default=None, min_length=1, max_length=255)
    correct_answer: Optional[OptionLetter] = None

    @field_validator(*QUESTION_FIELDS, mode="before")
    @classmethod
    def reject_null(cls, value):
        if value is None:
            raise ValueError("Field may not be null")
        return value


class QuestionPublicOut(BaseModel):
    """Quiz-serving view, without the correct answer."""
    id: int
    question: str
    option_a: str
    option_b: str
    option_c: str
    option_d: str


class QuestionOut(QuestionPublicOut):
    correct_answer: OptionLetter
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


#####################
### Check answers ###
#####################
class CheckAnswersRequest(BaseModel):
    # keyed by question id as sent in JSON; malformed entries never match
    answers: Dict[str, Any] = Field(default_factory=dict)


class CorrectAnswerOut(BaseModel):
    question_id: int
    correct_option: OptionLetter


class CheckAnswersOut(BaseModel):
    score: int
    correct_answers: List[CorrectAnswerOut]
