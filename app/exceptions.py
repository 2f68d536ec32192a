from typing import Dict, List, Optional


class QuizAPIException(Exception):
    """Base class for errors rendered as ``{"success": false, "message": ...}``."""

    status_code = 500
    message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)

    def to_dict(self) -> dict:
        return {"success": False, "message": self.message}


class ValidationError(QuizAPIException):
    status_code = 422
    message = "Validation failed"

    def __init__(self, errors: Dict[str, List[str]], message: Optional[str] = None):
        super().__init__(message)
        self.errors = errors

    def to_dict(self) -> dict:
        return {"success": False, "message": self.message, "errors": self.errors}


class NotFoundError(QuizAPIException):
    status_code = 404
    message = "Not found"


class DuplicateAttemptError(QuizAPIException):
    status_code = 409
    message = "You already attempted this question"
