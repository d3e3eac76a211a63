# backend/main.py

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from config import settings
import logging

from fastapi.middleware.cors import CORSMiddleware

# database stuff
from core.database import SessionLocal, init_db, test_db_connection
from models.users import Users, UserRole
from api.auth.security import hash_password
from api.settings.store import seed_defaults

# routers
from api.auth.routes import router as auth_router
from api.users.routes import router as users_router
from api.inspections.routes import router as inspections_router
from api.detections.routes import router as detections_router
from api.datasheets.routes import router as datasheets_router
from api.settings.routes import router as settings_router

app = FastAPI(
    title="AOI IC Marking Verification API",
    description="Inspections, detections, datasheets and settings behind the IC marking verification dashboard.",
    version="1.0.0",
    openapi_tags=[
        {"name": "Auth", "description": "Authentication related endpoints"},
        {"name": "Inspections", "description": "Operator console: captured images and their detections"},
        {"name": "Detections", "description": "Scored markings, review queue and verdict overrides"},
        {"name": "Datasheets", "description": "Datasheet admin: vendor reference library"},
        {"name": "Settings", "description": "Detection thresholds and camera roster"},
    ],
)


# Configure logging
logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s - %(name)s - %(levelname)s - %(message)s")
logger = logging.getLogger(__name__)


# The dashboard views and the resource groups each one works against
VIEWS = [
    {"id": "operator", "name": "Operator", "description": "Upload and inspect IC markings", "resources": ["/inspections", "/detections"]},
    {"id": "admin", "name": "Admin", "description": "Manage datasheet library", "resources": ["/datasheets"]},
    {"id": "review", "name": "Review", "description": "Review suspicious detections", "resources": ["/detections/review-queue"]},
    {"id": "settings", "name": "Settings", "description": "Configure system", "resources": ["/settings"]},
]


def seed_admin(db):
    """Creates the configured admin account unless a user with that name exists."""
    if not settings.ADMIN_USERNAME or not settings.ADMIN_PASSWORD:
        return
    if db.query(Users).filter(Users.username == settings.ADMIN_USERNAME).first():
        return

    db.add(Users(
        username=settings.ADMIN_USERNAME,
        email=settings.ADMIN_EMAIL,
        hashed_password=hash_password(settings.ADMIN_PASSWORD),
        role=UserRole.admin,
    ))
    db.commit()
    logger.info(f"Seeded admin user {settings.ADMIN_USERNAME}")


@app.on_event("startup")
async def startup_db_check():
    """Test database connection on startup, then create tables and seed defaults."""
    if not test_db_connection():
        logger.error("Database connection failed on startup.")
        raise RuntimeError("Database connection failed")

    init_db()
    db = SessionLocal()
    try:
        seed_defaults(db)
        seed_admin(db)
    finally:
        db.close()
    logger.info("Database connected successfully.")


@app.exception_handler(SQLAlchemyError)
async def store_error_handler(request: Request, exc: SQLAlchemyError):
    """Every store failure reaches the client as the same generic error."""
    logger.error(f"{request.method} {request.url.path} failed: {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "The operation failed"},
    )


# CORS Middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Routes
app.include_router(auth_router)
app.include_router(users_router)
app.include_router(inspections_router)
app.include_router(detections_router)
app.include_router(datasheets_router)
app.include_router(settings_router)


@app.get("/")
async def root():
    return {"message": f"{settings.PROJECT_NAME} API", "views": VIEWS}


@app.get("/health")
async def health():
    """
    Provides a health check endpoint for the FastAPI application and its database.
    """
    logging.info("Health check running...")

    db_connection_status = test_db_connection()
    logging.info("SQLAlchemy connection check: %s", db_connection_status)

    return {
        "status": "OK" if db_connection_status else "DEGRADED",
        "sqlalchemy_check": db_connection_status,
    }
