from fastapi import FastAPI
from slowapi.errors import RateLimitExceeded
from contextlib import asynccontextmanager
from slowapi import _rate_limit_exceeded_handler
# Settings
from ortho_coach.core.config import get_settings
# Rate Limiter
from ortho_coach.core.route_limiters import limiter
# Routers
from ortho_coach.routes.health import router as health_router
from ortho_coach.routes.interview_feedback import router as interview_feedback_router
from ortho_coach.routes.questions import router as questions_router
from ortho_coach.routes.sessions import router as sessions_router
# CORS Middleware
from ortho_coach.core.cors_middleware import add_cors_middleware
# Logger
from loguru import logger
# Services
from ortho_coach.services.feedback import build_feedback_engine, load_knowledge_base
from ortho_coach.services.interview_session.session_service import SessionService
from ortho_coach.services.question_bank.question_bank_service import QuestionBankService
# Error Handling
from fastapi.exceptions import RequestValidationError
from fastapi import HTTPException, Request
from fastapi.responses import JSONResponse
from fastapi.encoders import jsonable_encoder

from ortho_coach.errors.handlers import http_exception_handler, generic_exception_handler


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Manage application lifespan events."""
    # Startup
    try:
        settings = get_settings()
        knowledge_base = load_knowledge_base(settings.keyword_table_path)
        question_bank = QuestionBankService.with_seed_questions()

        app.state.knowledge_base = knowledge_base
        app.state.feedback_engine = build_feedback_engine(settings, knowledge_base)
        app.state.question_bank = question_bank
        app.state.session_service = SessionService(question_bank)
        logger.info("Application startup completed successfully")

    except Exception as e:
        logger.error(f"Error during application startup: {e}")
        raise

    yield

    logger.info("Application shutdown")

# Initialize FastAPI app
app = FastAPI(
    title="Ortho Interview Coach API",
    description="Mock interview feedback for orthopedic surgery residency candidates",
    version="0.1.0",
    lifespan=lifespan
)
# Add CORS middleware
add_cors_middleware(app)

# Centralized error handlers
app.add_exception_handler(HTTPException, http_exception_handler)
app.add_exception_handler(Exception, generic_exception_handler)

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(
        status_code=422,
        content={"detail": jsonable_encoder(exc.errors())},
    )

# Add rate limiter to the app
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, _rate_limit_exceeded_handler)

# Include routers
app.include_router(health_router)
app.include_router(interview_feedback_router)
app.include_router(questions_router)
app.include_router(sessions_router)
