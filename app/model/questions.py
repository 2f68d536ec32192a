from sqlalchemy import Column, String, DateTime, Integer, Text, CheckConstraint
from sqlalchemy.orm import relationship
from app.database.base_class import Base
from datetime import datetime

OPTION_LETTERS = ("A", "B", "C", "D")


class Question(Base):
    __tablename__ = "questions"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # attributes
    question = Column(Text, nullable=False)
    option_a = Column(String(255), nullable=False)
    option_b = Column(String(255), nullable=False)
    option_c = Column(String(255), nullable=False)
    option_d = Column(String(255), nullable=False)
    correct_answer = Column(String(1), nullable=False)
    created_at = Column(DateTime, default=datetime.now)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now)

    __table_args__ = (
        CheckConstraint("correct_answer IN ('A', 'B', 'C', 'D')", name="ck_questions_correct_answer"),
    )

    # relationship
    attempts = relationship("Attempt", back_populates="question", cascade="all, delete-orphan")
