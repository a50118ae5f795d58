"""
Web Accessibility Checker API - FastAPI app for HTML accessibility analysis.

Start locally with: uvicorn app.main:app --reload
"""

from fastapi import FastAPI  # The FastAPI framework
from fastapi.middleware.cors import CORSMiddleware  # Cross-Origin Resource Sharing

from app.core.config import settings  # Application settings
from app.core.logging_config import configure_logging
from app.routers import accessibility  # Accessibility analysis router

# ---------------------------------------------------------------------------
# LOGGING
# ---------------------------------------------------------------------------
configure_logging(settings.LOG_LEVEL, debug=settings.DEBUG)

# ---------------------------------------------------------------------------
# CREATE FASTAPI APPLICATION
# ---------------------------------------------------------------------------
# - docs_url: Swagger UI at http://localhost:8000/docs
# - redoc_url: ReDoc at http://localhost:8000/redoc
app = FastAPI(
    title=settings.APP_NAME,
    docs_url="/docs",
    redoc_url="/redoc",
)

# ---------------------------------------------------------------------------
# CORS MIDDLEWARE
# ---------------------------------------------------------------------------
# The checker UI is served from a different origin than the API, so
# cross-origin requests have to be allowed explicitly.
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ---------------------------------------------------------------------------
# REGISTER ROUTERS
# ---------------------------------------------------------------------------
# accessibility.router: /accessibility/analyze, /accessibility/rules
app.include_router(accessibility.router)


# ---------------------------------------------------------------------------
# HEALTH CHECK ENDPOINT
# ---------------------------------------------------------------------------
@app.get("/health", tags=["health"])
def health_check():
    """
    Liveness probe. The checker has no backing services to verify.

    Returns:
        {"status": "ok"}
    """
    return {"status": "ok"}
