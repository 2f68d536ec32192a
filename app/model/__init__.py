from app.model.users import User
from app.model.questions import Question, OPTION_LETTERS
from app.model.attempts import Attempt

__all__ = ["User", "Question", "Attempt", "OPTION_LETTERS"]
