import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

# ✅ Import All API Routes
from app.api.routes import health, interview
from app.core.config import API_VERSION, CORS_ALLOW_ORIGINS, LOG_FILE, LOG_LEVEL
from app.core.logging_config import setup_logging

setup_logging(LOG_LEVEL, LOG_FILE)

logger = logging.getLogger(__name__)


# ============================================
# ✅ FASTAPI APP INIT
# ============================================

app = FastAPI(title="Interview AI", version=API_VERSION)

# ✅ CORS — ONLY ALLOW CONFIGURED FRONTENDS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST"],
    allow_headers=["Content-Type"],
)


# ============================================
# ✅ REGISTER ALL ROUTERS
# ============================================

app.include_router(interview.router)
app.include_router(health.router)


# ============================================
# ✅ ERROR SHAPE
# ============================================

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    """Report unparseable bodies with the same {"error": ...} shape the routes use."""
    logger.warning(f"Rejected request body on {request.url.path}: {len(exc.errors())} validation error(s)")
    return JSONResponse(status_code=400, content={"error": "Request body must be a JSON object."})


# ============================================
# ✅ HEALTH CHECK ROOT ENDPOINT
# ============================================

@app.get("/")
def root():
    return {"status": "Interview AI API running"}
