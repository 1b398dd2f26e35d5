"""Main FastAPI application for Interview Practice API."""

from fastapi import FastAPI, Depends, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from pydantic import BaseModel
from typing import Any, List, Optional
from datetime import datetime, timezone
import os
import time

from config import config
from errors import APIError, BadRequest, NotFound, ServerError

from logger import log_info, log_error, log_warning, log_debug
from metrics import (
    request_count, request_duration, registration_count, login_count,
    interviews_saved_count, error_count, get_metrics
)
from auth import UserCreate, UserCredentials, register_user, authenticate_user

from database import create_client, get_database, get_db, init_db, check_db_connection
from db_operations import (
    create_interview,
    get_interviews_by_user,
    get_interview_by_id,
    get_questions_by_category,
)
from seed import initialize_database
from models import CATEGORIES

VERSION = "1.0.0"

app = FastAPI(
    title="Interview Practice API",
    description="Accounts, saved interview sessions and a practice question bank",
    version=VERSION
)

# CORS Configuration
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.cors_origins.split(",") if config.cors_origins != "*" else ["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def route_template(request: Request) -> str:
    """Path template of the matched route, used as a bounded metric label."""
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


# Request logging middleware
@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all incoming requests."""
    start_time = time.time()

    log_info(f"Incoming request: {request.method} {request.url.path}",
             method=request.method,
             path=request.url.path,
             client=request.client.host if request.client else "unknown")

    response = await call_next(request)

    endpoint = route_template(request)
    duration = time.time() - start_time
    request_count.labels(
        method=request.method,
        endpoint=endpoint,
        status=response.status_code
    ).inc()
    request_duration.labels(
        method=request.method,
        endpoint=endpoint
    ).observe(duration)

    log_info(f"Request completed: {request.method} {request.url.path} - {response.status_code}",
             method=request.method,
             path=request.url.path,
             status_code=response.status_code,
             duration=duration)

    return response


@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


# ============= Pydantic Models =============

class InterviewCreate(BaseModel):
    userId: Any = None
    questions: Any = None
    answers: Any = None
    feedback: Any = None
    settings: Any = None
    scores: Any = None

class RegisterResponse(BaseModel):
    message: str
    user: dict
    userId: str

class LoginResponse(BaseModel):
    message: str
    user: dict

class InterviewCreatedResponse(BaseModel):
    message: str
    interviewId: str

class HealthResponse(BaseModel):
    status: str
    version: str
    database: str
    timestamp: str


# ============= User Endpoints =============

@app.post("/api/users/register", response_model=RegisterResponse, status_code=201)
async def register(user_data: UserCreate, db=Depends(get_db)):
    """Register a new user."""
    try:
        log_info(f"User registration attempt: {user_data.email}")

        user, user_id = await register_user(db, user_data.name, user_data.email, user_data.password)
        registration_count.inc()

        log_info(f"User registered successfully: {user_data.email}", user_id=user_id)
        return RegisterResponse(message="User registered successfully", user=user, userId=user_id)

    except BadRequest as e:
        log_warning(f"Registration failed: {e.message}", email=user_data.email)
        error_count.labels(error_type="registration_failed", endpoint="/api/users/register").inc()
        raise
    except Exception as e:
        log_error(f"Registration error: {str(e)}", email=user_data.email)
        error_count.labels(error_type="registration_error", endpoint="/api/users/register").inc()
        raise ServerError()


@app.post("/api/users/login", response_model=LoginResponse)
async def login(credentials: UserCredentials, db=Depends(get_db)):
    """Confirm credentials and return the account."""
    try:
        log_info(f"Login attempt: {credentials.email}")

        user = await authenticate_user(db, credentials.email, credentials.password)
        login_count.labels(result="success").inc()

        log_info(f"Login successful: {credentials.email}")
        return LoginResponse(message="Login successful", user=user)

    except BadRequest as e:
        log_warning(f"Login failed: {e.message}", email=credentials.email)
        login_count.labels(result="failure").inc()
        raise
    except Exception as e:
        log_error(f"Login error: {str(e)}", email=credentials.email)
        error_count.labels(error_type="login_error", endpoint="/api/users/login").inc()
        raise ServerError()


# ============= Interview Endpoints =============

@app.post("/api/interviews", response_model=InterviewCreatedResponse, status_code=201)
async def save_interview(interview: InterviewCreate, db=Depends(get_db)):
    """Save a completed interview session."""
    try:
        interview_id = await create_interview(
            db,
            user_id=interview.userId,
            questions=interview.questions,
            answers=interview.answers,
            feedback=interview.feedback,
            settings=interview.settings,
            scores=interview.scores,
        )
        interviews_saved_count.inc()

        log_info("Interview saved", interview_id=interview_id, user_id=str(interview.userId))
        return InterviewCreatedResponse(message="Interview saved successfully", interviewId=interview_id)

    except Exception as e:
        log_error(f"Save interview error: {str(e)}", user_id=str(interview.userId))
        error_count.labels(error_type="save_interview_error", endpoint="/api/interviews").inc()
        raise ServerError()


@app.get("/api/interviews/user/{user_id}", response_model=List[dict])
async def list_user_interviews(user_id: str, db=Depends(get_db)):
    """Get all interviews of a user, newest first."""
    try:
        interviews = await get_interviews_by_user(db, user_id)
        log_debug(f"Interviews retrieved: {len(interviews)} entries", user_id=user_id)
        return interviews

    except Exception as e:
        log_error(f"Get interviews error: {str(e)}", user_id=user_id)
        error_count.labels(error_type="list_interviews_error", endpoint="/api/interviews/user").inc()
        raise ServerError()


@app.get("/api/interviews/{interview_id}", response_model=dict)
async def get_interview(interview_id: str, db=Depends(get_db)):
    """Get interview by ID."""
    try:
        interview = await get_interview_by_id(db, interview_id)
    except Exception as e:
        log_error(f"Get interview error: {str(e)}", interview_id=interview_id)
        error_count.labels(error_type="get_interview_error", endpoint="/api/interviews").inc()
        raise ServerError()

    if not interview:
        raise NotFound("Interview not found")

    return interview


# ============= Question Endpoints =============

@app.get("/api/questions/{category}", response_model=List[dict])
async def list_questions(category: str, db=Depends(get_db)):
    """Get questions by category."""
    try:
        questions = await get_questions_by_category(db, category)
        if not questions and category not in CATEGORIES:
            log_warning(f"Unknown question category: {category}", category=category)
        log_debug(f"Questions retrieved: {len(questions)} entries", category=category)
        return questions

    except Exception as e:
        log_error(f"Get questions error: {str(e)}", category=category)
        error_count.labels(error_type="get_questions_error", endpoint="/api/questions").inc()
        raise ServerError()


# ============= Health & Metrics =============

@app.get("/metrics")
async def metrics():
    """Prometheus metrics endpoint."""
    return await get_metrics()


@app.get("/api/health", response_model=HealthResponse)
async def health_check(request: Request):
    """Health check endpoint."""
    try:
        await check_db_connection(request.app.state.mongo)
        db_status = "connected"
    except Exception as e:
        log_warning(f"Database health check failed: {e}")
        db_status = "unreachable"

    return HealthResponse(
        status="healthy" if db_status == "connected" else "degraded",
        version=VERSION,
        database=db_status,
        timestamp=datetime.now(timezone.utc).isoformat()
    )


# ============= Single-page application =============

def resolve_static_file(path: str) -> Optional[str]:
    """Map a request path to a file inside the static directory, if any."""
    root = os.path.realpath(config.static_dir)
    candidate = os.path.realpath(os.path.join(root, path))
    if os.path.commonpath([root, candidate]) != root:
        return None
    if os.path.isfile(candidate):
        return candidate
    return None


# Registered last so every API route above takes precedence
@app.get("/{full_path:path}", include_in_schema=False)
async def spa_fallback(full_path: str):
    """Serve static assets, and index.html for every other route."""
    return FileResponse(resolve_static_file(full_path) or os.path.join(config.static_dir, "index.html"))


# ============= Startup/Shutdown Events =============

@app.on_event("startup")
async def startup_event():
    """Run on application startup."""
    log_info("=" * 60)
    log_info("API SERVER STARTED")
    log_info("=" * 60)
    log_info(f"Version: {VERSION}")
    log_info(f"Database: {config.mongodb_db}")
    log_info(f"Seed on startup: {config.seed_on_startup}")
    log_info("=" * 60)

    if not config.validate():
        log_warning("⚠️  WARNING: Configuration validation failed!")

    client = create_client()
    try:
        await check_db_connection(client)
    except Exception as e:
        # Fatal: uvicorn aborts startup and exits
        log_error(f"❌ Error connecting to MongoDB: {str(e)}")
        await client.close()
        raise

    app.state.mongo = client
    app.state.db = get_database(client)
    log_info("✅ Connected to MongoDB")

    try:
        await init_db(app.state.db)
    except Exception as e:
        log_error(f"Index creation failed: {str(e)}")

    if config.seed_on_startup:
        try:
            await initialize_database(app.state.db)
        except Exception as e:
            log_error(f"Seed error: {str(e)}")


@app.on_event("shutdown")
async def shutdown_event():
    """Run on application shutdown."""
    log_info("Shutting down API...")
    client = getattr(app.state, "mongo", None)
    if client is not None:
        await client.close()
        log_info("MongoDB connection closed")


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app:app",
        host=config.api_host,
        port=config.api_port,
        reload=config.api_debug
    )
