from app.router.api.auth import router as auth_router
from app.router.api.users import router as users_router
from app.router.api.questions import router as questions_router
from app.router.api.attempts import router as attempts_router
from app.router.api.practice import router as practice_router
__all__ = [
    "auth_router",
    "users_router",
    "questions_router",
    "attempts_router",
    "practice_router",
]
