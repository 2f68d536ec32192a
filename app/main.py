from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError
from starlette.exceptions import HTTPException as StarletteHTTPException

from app.model import users, questions, attempts  # noqa: F401  registers the tables on Base
from app.router import (
    auth_router,
    users_router,
    questions_router,
    attempts_router,
    practice_router,
)
from app.config import settings
from app.exceptions import QuizAPIException
from app.log import get_logger

log = get_logger(__name__)


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.API_VERSION
)

# Add CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        settings.FRONTEND_URL,
        "http://localhost:3000",  # For local development
        "http://localhost:5173",  # For Vite development
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(auth_router, tags=["Authentication"])
app.include_router(users_router, tags=["User"])
app.include_router(questions_router, prefix="/questions", tags=["Questions"])
app.include_router(attempts_router, prefix="/attempts", tags=["Attempts"])
app.include_router(practice_router, tags=["Practice"])


##########################
### Exception handlers ###
##########################
@app.exception_handler(QuizAPIException)
async def quiz_exception_handler(request: Request, exc: QuizAPIException):
    return JSONResponse(status_code=exc.status_code, content=exc.to_dict())


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = {}
    for error in exc.errors():
        # drop the "body"/"query"/"path" prefix, keep the field path
        field = ".".join(str(part) for part in error["loc"][1:]) or str(error["loc"][0])
        errors.setdefault(field, []).append(error["msg"])
    log.info("Validation error on %s %s: %s", request.method, request.url.path, errors)
    return JSONResponse(
        status_code=422,
        content={"success": False, "message": "Validation failed", "errors": errors},
    )


@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"success": False, "message": exc.detail},
        headers=getattr(exc, "headers", None),
    )


@app.exception_handler(OperationalError)
async def database_exception_handler(request: Request, exc: OperationalError):
    log.error("Database unavailable on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(
        status_code=503,
        content={"success": False, "message": "Database unavailable"},
    )


#####################
### Root Endpoint ###
#####################
@app.get("/")
def read_root():
    return {"name": settings.PROJECT_NAME, "environment": settings.ENV, "version": settings.API_VERSION}
