from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.staticfiles import StaticFiles
from fastapi.responses import FileResponse, JSONResponse
from fastapi.middleware.cors import CORSMiddleware
import logging
import os

from . import schemas
from .config import settings
from .routers import estimates

logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("estimator")

app = FastAPI(
    title="Materials Estimator",
    description="Construction materials quantity estimator for the company website",
    version="1.0.0"
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Malformed bodies get the same {message, error, field} envelope as engine errors."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    loc = [str(part) for part in first.get("loc", ()) if part != "body"]
    field = loc[0] if loc else None
    logger.info("Rejected request body: %s", errors)
    detail = estimates.error_detail(
        estimates.MSG_INVALID_INPUT, first.get("msg", "invalid request body"), field)
    return JSONResponse(status_code=422, content={"detail": detail})


# API routes
app.include_router(estimates.router, prefix="/api")

# Serve the website's static files
frontend_path = os.path.join(os.path.dirname(__file__), "..", "frontend")
if os.path.exists(frontend_path):
    for sub in ("css", "js", "img"):
        sub_path = os.path.join(frontend_path, sub)
        if os.path.exists(sub_path):
            app.mount(f"/{sub}", StaticFiles(directory=sub_path), name=sub)

    @app.get("/")
    def serve_frontend():
        return FileResponse(os.path.join(frontend_path, "index.html"))
else:
    logger.info("No frontend directory at %s, serving API only", frontend_path)


@app.get("/health")
def health():
    return {"status": "ok", "app": "materials-estimator"}


@app.get("/api/company", response_model=schemas.CompanyInfo)
def company_info():
    return schemas.CompanyInfo(
        name=settings.COMPANY_NAME,
        email=settings.COMPANY_EMAIL or None,
        phone=settings.COMPANY_PHONE or None,
        number_locale=settings.NUMBER_LOCALE,
    )
