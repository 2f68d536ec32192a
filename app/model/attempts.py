from sqlalchemy import Column, Boolean, ForeignKey, DateTime, Integer, String, UniqueConstraint
from sqlalchemy.orm import relationship
from app.database.base_class import Base
from datetime import datetime


class Attempt(Base):
    __tablename__ = "attempts"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)

    # FK
    user_id = Column(Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True)
    question_id = Column(Integer, ForeignKey("questions.id", ondelete="CASCADE"), nullable=False)

    # attributes, fixed at creation
    user_answer = Column(String(1), nullable=False)
    is_correct = Column(Boolean, nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)

    # one attempt per user and question; this is what stops double scoring
    __table_args__ = (
        UniqueConstraint("user_id", "question_id", name="uq_attempts_user_question"),
    )

    # relationship
    user = relationship("User", back_populates="attempts")
    question = relationship("Question", back_populates="attempts")
